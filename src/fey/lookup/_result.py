"""Shared helper for the Result flavour of the lookup adapters."""

from __future__ import annotations

from typing import Any

from fey.types.option import Option, Some
from fey.types.result import Err, Ok, Result


def found_or[T](found: Option[T], error: Any) -> Result[T, Any]:
    """Turn a lookup's Option into ``Ok(value)`` or ``Err(error)``."""
    match found:
        case Some(value):
            return Ok(value)
        case _:
            return Err(error)
