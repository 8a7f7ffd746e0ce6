"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok is plain data: the operations on it live in `fey.result` so they can
    check the shape of whatever they are handed.

    Examples:
        >>> Ok(42)
        Ok(value=42)
        >>> match Ok(42):
        ...     case Ok(value):
        ...         print(value)
        42
    """

    value: T


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    The error is an opaque payload; fey never interprets it.

    Examples:
        >>> Err('boom')
        Err(error='boom')
    """

    error: E


type Result[T, E] = Ok[T] | Err[E]
