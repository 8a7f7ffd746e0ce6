"""Shape violations at the boundary of the Result/Option algebra.

Every combinator matches on its input first; the fallthrough case lands here.
"""

from __future__ import annotations

from typing import Any

from fey._logging import get_logger
from fey.errors import InvalidShape

__all__ = ['invalid_shape']

logger = get_logger(__name__)


def invalid_shape(value: Any, expected: str) -> InvalidShape:
    """Log and return the error for a value that is not a valid `expected`.

    The caller raises it, so the traceback points at the combinator.
    """
    exc = InvalidShape(value, expected)
    logger.debug('invalid_shape', expected=expected, value=exc.rendered)
    return exc
