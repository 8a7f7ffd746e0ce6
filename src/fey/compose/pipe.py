"""pipe() function for threading a value through a chain of steps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

__all__ = ['pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')


# Overloads for type inference (up to 4 steps)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Apply functions left to right, each to the previous return value.

    `pipe` neither wraps nor short-circuits: the Result/Option functions do
    that themselves, so a pipeline is just those functions with their extra
    arguments bound.

    Args:
        value: The initial value, usually a Result or Option.
        *fns: Single-argument functions to apply in sequence.

    Returns:
        The return value of the last function, or `value` if there are none.

    Example:
        ```python
        from functools import partial

        from fey import option, pipe
        from fey.lookup import mapping

        pipe(
            mapping.get(user, 'nickname'),
            partial(option.map, f=str.title),
            partial(option.unwrap_or, default='Anonymous'),
        )
        ```
    """
    current = value
    for fn in fns:
        current = fn(current)
    return current
