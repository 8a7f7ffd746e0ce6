"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    ``Some(None)`` is a present value that happens to be None. It is not Nothing.

    Examples:
        >>> Some(42)
        Some(value=42)
        >>> Some(None) == Nothing
        False
    """

    value: T


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Use the `Nothing` constant instead of instantiating directly.
    """

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
