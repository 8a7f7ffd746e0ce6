"""Pipe-friendly functions over Result values (Ok | Err).

Every function takes the Result as its first argument, so a pipeline of
fallible steps reads top to bottom without branching at each step:

    ```python
    from fey import result
    from fey.lookup import mapping

    order = mapping.get_result(orders, order_id)
    sku = result.map(order, lambda o: o['sku'])
    product = result.bind(sku, lambda s: result.wrap_not_none(catalog.find(s), 'sku_not_found'))
    name = result.map(product, lambda p: p.name)
    ```

`name` is either ``Ok(product_name)`` or the first failure on the way:
``Err(NotFound())`` from the order lookup or ``Err('sku_not_found')``.

`map` always re-wraps the return value of its function in Ok. `bind` and
`bind_error` return whatever their function returns, so a step decides for
itself whether it produces a plain value or a new Result.

Handing anything other than Ok/Err to these functions raises `InvalidShape`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fey._shape import invalid_shape
from fey.errors import NOT_FOUND, NotAFailure, NotASuccess
from fey.types.result import Err, Ok, Result

__all__ = [
    'bind',
    'bind_error',
    'is_err',
    'is_ok',
    'map',
    'unwrap',
    'unwrap_err',
    'unwrap_or',
    'wrap',
    'wrap_not_none',
]

_EXPECTED = 'Result'


def wrap[T](value: T) -> Ok[T]:
    """Wrap a value in Ok.

    The value is not inspected, so wrapping a Result nests it.

    Examples:
        >>> wrap(True)
        Ok(value=True)
        >>> wrap(Ok('forty two'))
        Ok(value=Ok(value='forty two'))
    """
    return Ok(value)


def wrap_not_none[T](value: T | None, error: Any = NOT_FOUND) -> Result[T, Any]:
    """Wrap a value in Ok unless it is None, in which case return Err(error).

    Args:
        value: The value to wrap.
        error: Error payload used when `value` is None. Defaults to `NOT_FOUND`.

    Examples:
        >>> wrap_not_none(42)
        Ok(value=42)
        >>> wrap_not_none(None)
        Err(error=NotFound())
        >>> wrap_not_none(None, 'number_missing')
        Err(error='number_missing')
    """
    if value is None:
        return Err(error)
    return Ok(value)


def is_ok(r: Result[Any, Any]) -> bool:
    """Return True for Ok, False for Err.

    Raises:
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Ok():
            return True
        case Err():
            return False
        case _:
            raise invalid_shape(r, _EXPECTED)


def is_err(r: Result[Any, Any]) -> bool:
    """Return True for Err, False for Ok.

    Raises:
        InvalidShape: If `r` is not a Result.
    """
    return not is_ok(r)


def unwrap[T](r: Result[T, Any]) -> T:
    """Return the value of an Ok.

    Raises:
        NotASuccess: If `r` is an Err.
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Ok(value):
            return value
        case Err():
            raise NotASuccess(r)
        case _:
            raise invalid_shape(r, _EXPECTED)


def unwrap_or[T, D](r: Result[T, Any], default: D) -> T | D:
    """Return the value of an Ok, or `default` for an Err.

    Raises:
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Ok(value):
            return value
        case Err():
            return default
        case _:
            raise invalid_shape(r, _EXPECTED)


def unwrap_err[E](r: Result[Any, E]) -> E:
    """Return the error of an Err.

    Raises:
        NotAFailure: If `r` is an Ok.
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Err(error):
            return error
        case Ok():
            raise NotAFailure(r)
        case _:
            raise invalid_shape(r, _EXPECTED)


def map[T, U, E](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply `f` to the value of an Ok and wrap the return value in Ok.

    An Err is returned unchanged and `f` is not called. Exceptions raised by
    `f` propagate as they are.

    Examples:
        >>> map(Ok(42), lambda v: v / 2)
        Ok(value=21.0)
        >>> map(Err('not_found'), lambda v: v / 2)
        Err(error='not_found')

    Raises:
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Ok(value):
            return Ok(f(value))
        case Err():
            return r
        case _:
            raise invalid_shape(r, _EXPECTED)


def bind[T](r: Result[T, Any], f: Callable[[T], Any]) -> Any:
    """Apply `f` to the value of an Ok and return its result as-is.

    Unlike `map`, nothing is wrapped: `f` usually returns a Result, but may
    return any value. An Err is returned unchanged and `f` is not called.

    Examples:
        >>> bind(Ok(42), lambda v: Ok(v / 2))
        Ok(value=21.0)
        >>> bind(Ok(42), lambda v: v / 2)
        21.0
        >>> bind(Err('not_found'), lambda v: Ok(v / 2))
        Err(error='not_found')

    Raises:
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Ok(value):
            return f(value)
        case Err():
            return r
        case _:
            raise invalid_shape(r, _EXPECTED)


def bind_error[T](r: Result[T, Any], f: Callable[[], Any]) -> Any:
    """Call `f` (no arguments) when `r` is an Err and return its result as-is.

    An Ok is returned unchanged and `f` is not called. Chained, this picks the
    first step that succeeds:

        ```python
        parsed = result.bind_error(parse_iso_datetime(text), lambda: parse_iso_date(text))
        parsed = result.bind_error(parsed, lambda: parse_timestamp(text))
        ```

    Examples:
        >>> bind_error(Err('not_found'), lambda: Ok(42))
        Ok(value=42)
        >>> bind_error(Ok(None), lambda: Ok(42))
        Ok(value=None)

    Raises:
        InvalidShape: If `r` is not a Result.
    """
    match r:
        case Err():
            return f()
        case Ok():
            return r
        case _:
            raise invalid_shape(r, _EXPECTED)
