"""Key lookup over mappings, returning Option or Result.

``d.get(key)`` returns None both for a missing key and for a key mapped to
None. Membership decides here: a present key always yields its value.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from fey._logging import get_logger
from fey.errors import NOT_FOUND, NotAMap
from fey.lookup._result import found_or
from fey.types.option import Nothing, Option, Some
from fey.types.result import Result

__all__ = ['get', 'get_result']

logger = get_logger(__name__)


def _require_mapping(value: Any) -> None:
    if not isinstance(value, Mapping):
        exc = NotAMap(value)
        logger.debug('not_a_map', value=exc.rendered)
        raise exc


def get[V](mapping: Mapping[Any, V], key: Hashable) -> Option[V]:
    """Return ``Some(mapping[key])`` if `key` is present, else Nothing.

    Examples:
        >>> get({'a': 1, 'b': None}, 'b')
        Some(value=None)
        >>> get({'a': 1}, 'c')
        Nothing

    Raises:
        NotAMap: If `mapping` is not a Mapping.
    """
    _require_mapping(mapping)
    if key in mapping:
        return Some(mapping[key])
    return Nothing


def get_result[V](mapping: Mapping[Any, V], key: Hashable, *, error: Any = NOT_FOUND) -> Result[V, Any]:
    """Return ``Ok(mapping[key])`` if `key` is present, else ``Err(error)``.

    Examples:
        >>> get_result({'a': 1, 'b': None}, 'b')
        Ok(value=None)
        >>> get_result({'a': 1}, 'c')
        Err(error=NotFound())

    Raises:
        NotAMap: If `mapping` is not a Mapping.
    """
    return found_or(get(mapping, key), error)
