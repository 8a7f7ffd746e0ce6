"""Pipe-friendly functions over Option values (Some | Nothing).

Option is for optional data rather than for operations that can fail. It keeps
"absent" apart from "present but None", which a bare ``None`` cannot do:

    ```python
    from fey import option
    from fey.lookup import sequence

    sequence.find_at_index([1, None, 3], 1)  # Some(value=None)
    sequence.find_at_index([1, None, 3], 4)  # Nothing
    ```

Handing anything other than Some/Nothing to these functions raises
`InvalidShape`. Python's ``None`` is not an Option.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fey._shape import invalid_shape
from fey.errors import NotSome
from fey.types.option import Nothing, NothingType, Option, Some

__all__ = [
    'bind',
    'is_none',
    'is_some',
    'map',
    'unwrap',
    'unwrap_or',
    'wrap',
    'wrap_not_none',
]

_EXPECTED = 'Option'


def wrap[T](value: T) -> Some[T]:
    """Wrap a value in Some, including None.

    Examples:
        >>> wrap(None)
        Some(value=None)
        >>> wrap(Some(15))
        Some(value=Some(value=15))
    """
    return Some(value)


def wrap_not_none[T](value: T | None) -> Option[T]:
    """Wrap a value in Some unless it is None, in which case return Nothing.

    Examples:
        >>> wrap_not_none(42)
        Some(value=42)
        >>> wrap_not_none(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)


def is_some(o: Option[Any]) -> bool:
    """Return True for Some, False for Nothing.

    Raises:
        InvalidShape: If `o` is not an Option.
    """
    match o:
        case Some():
            return True
        case NothingType():
            return False
        case _:
            raise invalid_shape(o, _EXPECTED)


def is_none(o: Option[Any]) -> bool:
    """Return True for Nothing, False for Some.

    Raises:
        InvalidShape: If `o` is not an Option.
    """
    return not is_some(o)


def unwrap[T](o: Option[T]) -> T:
    """Return the value of a Some.

    Raises:
        NotSome: If `o` is Nothing.
        InvalidShape: If `o` is not an Option.
    """
    match o:
        case Some(value):
            return value
        case NothingType():
            raise NotSome(o)
        case _:
            raise invalid_shape(o, _EXPECTED)


def unwrap_or[T, D](o: Option[T], default: D) -> T | D:
    """Return the value of a Some, or `default` for Nothing.

    Raises:
        InvalidShape: If `o` is not an Option.
    """
    match o:
        case Some(value):
            return value
        case NothingType():
            return default
        case _:
            raise invalid_shape(o, _EXPECTED)


def map[T, U](o: Option[T], f: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Apply `f` to the value of a Some and wrap the return value in Some.

    Nothing is returned unchanged and `f` is not called.

    Raises:
        InvalidShape: If `o` is not an Option.
    """
    match o:
        case Some(value):
            return Some(f(value))
        case NothingType():
            return o
        case _:
            raise invalid_shape(o, _EXPECTED)


def bind[T](o: Option[T], f: Callable[[T], Any]) -> Any:
    """Apply `f` to the value of a Some and return its result as-is.

    Nothing is returned unchanged and `f` is not called.

    Examples:
        >>> bind(Some(42), lambda v: Some(v / 2))
        Some(value=21.0)
        >>> bind(Some(42), lambda v: v / 2)
        21.0

    Raises:
        InvalidShape: If `o` is not an Option.
    """
    match o:
        case Some(value):
            return f(value)
        case NothingType():
            return o
        case _:
            raise invalid_shape(o, _EXPECTED)
