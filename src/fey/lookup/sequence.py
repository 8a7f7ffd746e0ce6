"""Index and predicate lookups over iterables, returning Option or Result.

``items[i]`` raises on a bad index and ``next(iter, None)`` cannot tell a
found None from a miss. These lookups return ``Some(None)`` for the first and
``Nothing`` (or ``Err(NOT_FOUND)``) for the second.

Sequences are indexed directly. Other iterables (generators, sets, dict views)
are consumed in their natural iteration order.
"""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from itertools import islice
from typing import Any, SupportsIndex

from fey.errors import NOT_FOUND
from fey.lookup._result import found_or
from fey.types.option import Nothing, Option, Some
from fey.types.result import Result

__all__ = [
    'find_at_index',
    'find_at_index_result',
    'find_matching',
    'find_matching_result',
]


def find_at_index[T](items: Iterable[T], index: SupportsIndex) -> Option[T]:
    """Return ``Some(element)`` at `index`, or Nothing when out of bounds.

    Negative indexes count from the end, as in ``items[-1]``.

    Examples:
        >>> find_at_index([1, None, 2], 1)
        Some(value=None)
        >>> find_at_index([1, 2, 3], 5)
        Nothing
        >>> find_at_index((n * n for n in range(5)), -1)
        Some(value=16)

    Raises:
        TypeError: If `index` is not an integer.
    """
    index = operator.index(index)
    if isinstance(items, Sequence):
        try:
            return Some(items[index])
        except IndexError:
            return Nothing
    if index >= 0:
        for element in islice(items, index, index + 1):
            return Some(element)
        return Nothing
    tail = deque(items, maxlen=-index)
    if len(tail) < -index:
        return Nothing
    return Some(tail[0])


def find_at_index_result[T](items: Iterable[T], index: SupportsIndex, *, error: Any = NOT_FOUND) -> Result[T, Any]:
    """Like `find_at_index`, but returns ``Ok(element)`` or ``Err(error)``.

    Examples:
        >>> find_at_index_result([1, 2, 3], 0)
        Ok(value=1)
        >>> find_at_index_result([1, 2, 3], 5)
        Err(error=NotFound())
    """
    return found_or(find_at_index(items, index), error)


def find_matching[T](items: Iterable[T], predicate: Callable[[T], Any]) -> Option[T]:
    """Return ``Some(element)`` for the first element satisfying `predicate`.

    The predicate is called left to right and stops at the first truthy
    result. Returns Nothing when no element matches or `items` is empty.
    Exceptions raised by `predicate` propagate.

    Examples:
        >>> find_matching([1, 2, 3], lambda n: n % 2 == 0)
        Some(value=2)
        >>> find_matching([1, 3, 5], lambda n: n % 2 == 0)
        Nothing
    """
    for element in items:
        if predicate(element):
            return Some(element)
    return Nothing


def find_matching_result[T](
    items: Iterable[T],
    predicate: Callable[[T], Any],
    *,
    error: Any = NOT_FOUND,
) -> Result[T, Any]:
    """Like `find_matching`, but returns ``Ok(element)`` or ``Err(error)``."""
    return found_or(find_matching(items, predicate), error)
