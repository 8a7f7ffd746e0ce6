"""Key lookup over ordered (key, value) pair lists, returning Option or Result.

A pair list may repeat a key; the first pair with a matching key wins. This is
the shape of ``dict.items()`` snapshots, parsed query strings and HTTP headers
before they are folded into a dict.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fey._logging import get_logger
from fey.errors import NOT_FOUND, NotAPairList
from fey.lookup._result import found_or
from fey.types.option import Nothing, Option, Some
from fey.types.result import Result

__all__ = ['get', 'get_result']

logger = get_logger(__name__)


def _is_pair(item: Any) -> bool:
    return isinstance(item, tuple | list) and len(item) == 2


def _require_pairs(value: Any) -> None:
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str | bytes | bytearray)
        and all(_is_pair(item) for item in value)
    ):
        return
    exc = NotAPairList(value)
    logger.debug('not_a_pair_list', value=exc.rendered)
    raise exc


def get[V](pairs: Sequence[tuple[Any, V]], key: Any) -> Option[V]:
    """Return ``Some(value)`` of the first pair whose key equals `key`, else Nothing.

    Examples:
        >>> get([('a', 1), ('b', None)], 'b')
        Some(value=None)
        >>> get([('a', 1), ('a', 2)], 'a')
        Some(value=1)
        >>> get([('a', 1)], 'c')
        Nothing

    Raises:
        NotAPairList: If `pairs` is not a sequence of two-item tuples/lists.
    """
    _require_pairs(pairs)
    for pair_key, value in pairs:
        if pair_key == key:
            return Some(value)
    return Nothing


def get_result[V](pairs: Sequence[tuple[Any, V]], key: Any, *, error: Any = NOT_FOUND) -> Result[V, Any]:
    """Like `get`, but returns ``Ok(value)`` or ``Err(error)``.

    Raises:
        NotAPairList: If `pairs` is not a sequence of two-item tuples/lists.
    """
    return found_or(get(pairs, key), error)
