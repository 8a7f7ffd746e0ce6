"""Error types: contract-violation exceptions and domain error tags.

Two kinds of errors live here and are never mixed:

- Domain error tags such as `NotFound` are ordinary values carried inside
  `Err(...)`. They flow through pipelines like any other payload.
- `FeyError` subclasses are raised for programmer errors: a value that is not a
  Result/Option, `unwrap` on the wrong variant, or an adapter given the wrong
  kind of container.

Messages are rendered when the exception is turned into a string, never when
it is raised. Payloads are opaque, so rendering is bounded and tolerates a
failing ``__repr__``.
"""

from __future__ import annotations

import builtins
import reprlib
from typing import Any

import msgspec

from fey._config import get_config
from fey.types.option import NothingType, Some
from fey.types.result import Err, Ok

__all__ = [
    'NOT_FOUND',
    'FeyError',
    'InvalidShape',
    'NotAFailure',
    'NotAMap',
    'NotAPairList',
    'NotASuccess',
    'NotFound',
    'NotFoundError',
    'NotSome',
    'render_value',
]


class _ValueRepr(reprlib.Repr):
    """Size-limited repr that looks inside Result/Option variants."""

    def repr_instance(self, x: Any, level: int) -> str:
        match x:
            case Ok(value):
                return f'Ok(value={self.repr1(value, level - 1)})'
            case Err(error):
                return f'Err(error={self.repr1(error, level - 1)})'
            case Some(value):
                return f'Some(value={self.repr1(value, level - 1)})'
            case NothingType():
                return 'Nothing'
        try:
            text = builtins.repr(x)
        except Exception:
            return f'<{type(x).__name__} object>'
        if len(text) > self.maxother:
            return f'{text[: self.maxother - 3]}...'
        return text


def render_value(value: Any) -> str:
    """Return a repr of `value` no longer than the configured ``repr_limit``.

    Containers are abbreviated before they are rendered, so a huge payload is
    never converted to a string in full. A ``__repr__`` that raises is shown
    as ``<TypeName object>``.
    """
    limit = get_config().repr_limit
    text = _ValueRepr(maxstring=limit, maxlong=limit, maxother=limit).repr(value)
    if len(text) <= limit:
        return text
    return f'{text[: limit - 3]}...'


# --- Domain error tags ---


class NotFound(msgspec.Struct, frozen=True, gc=False):
    """Lookup found nothing - struct variant for Result[T, NotFound]."""

    def to_exception(self) -> NotFoundError:
        """Convert to exception for raise-based code."""
        return NotFoundError()


NOT_FOUND = NotFound()
"""Default error tag for `wrap_not_none` and the lookup adapters."""


class FeyError(Exception):
    """Base class for every exception raised by fey."""


class NotFoundError(FeyError):
    """Lookup found nothing - exception variant."""

    def __init__(self) -> None:
        super().__init__('Not found')

    def to_struct(self) -> NotFound:
        """Convert to struct for Result-based code."""
        return NOT_FOUND


# --- Contract violations ---


class InvalidShape(FeyError, TypeError):
    """A value handed to the algebra is neither variant of the expected type.

    Attributes:
        value: The offending value.
        expected: Name of the expected container ("Result" or "Option").
    """

    def __init__(self, value: Any, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(value, expected)

    @property
    def rendered(self) -> str:
        """The value as shown in the message."""
        return render_value(self.value)

    def __str__(self) -> str:
        return f'{self.rendered} is not a valid {self.expected}'


class NotASuccess(FeyError):
    """`unwrap` was called on an Err."""

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(result)

    def __str__(self) -> str:
        return f'{render_value(self.result)} is not a success'


class NotAFailure(FeyError):
    """`unwrap_err` was called on an Ok."""

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(result)

    def __str__(self) -> str:
        return f'{render_value(self.result)} is not a failure'


class NotSome(FeyError):
    """`unwrap` was called on Nothing."""

    def __init__(self, option: Any) -> None:
        self.option = option
        super().__init__(option)

    def __str__(self) -> str:
        return f'{render_value(self.option)} is not some'


class NotAMap(FeyError, TypeError):
    """The mapping adapter was given something that is not a Mapping."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(value)

    @property
    def rendered(self) -> str:
        return render_value(self.value)

    def __str__(self) -> str:
        return f'expected a mapping, got: {self.rendered}'


class NotAPairList(FeyError, TypeError):
    """The pairs adapter was given something that is not a sequence of (key, value) pairs."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(value)

    @property
    def rendered(self) -> str:
        return render_value(self.value)

    def __str__(self) -> str:
        return f'expected a sequence of key-value pairs, got: {self.rendered}'
