"""Tests for the Result algebra (fey.result over Ok and Err)."""

import copy

import pytest
from hypothesis import given

from fey import NOT_FOUND, Err, InvalidShape, Nothing, NotAFailure, NotASuccess, NotFound, Ok, Some, result
from tests.strategies import error_tags, integers, malformed, present_values, results


class TestOkErrValues:
    """Tests for the Ok and Err variants themselves."""

    def test_ok_holds_value(self):
        """Ok exposes its payload as .value."""
        assert Ok(42).value == 42

    def test_err_holds_error(self):
        """Err exposes its payload as .error."""
        assert Err('boom').error == 'boom'

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('boom')
        with pytest.raises(AttributeError):
            err.error = 'other'  # type: ignore[misc]

    def test_equality_and_hashing(self):
        """Variants compare and hash by payload."""
        assert Ok(42) == Ok(42)
        assert Err('x') == Err('x')
        assert Ok(42) != Err(42)
        assert {Ok(1): 'one'}[Ok(1)] == 'one'

    def test_repr(self):
        """Variants have a readable repr."""
        assert repr(Ok(42)) == 'Ok(value=42)'
        assert repr(Err('x')) == "Err(error='x')"

    def test_pattern_matching(self):
        """Variants destructure with match/case."""
        match Err('boom'):
            case Ok(value):
                pytest.fail(f'matched Ok({value})')
            case Err(error):
                assert error == 'boom'

    def test_copy(self):
        """Ok can be copied."""
        assert copy.copy(Ok([1])) == Ok([1])


class TestWrap:
    """Tests for wrap and wrap_not_none."""

    def test_wrap_any_value(self):
        """wrap() always produces Ok."""
        assert result.wrap(True) == Ok(True)
        assert result.wrap(None) == Ok(None)

    def test_wrap_does_not_flatten(self):
        """wrap() nests an existing Result."""
        assert result.wrap(Ok('forty two')) == Ok(Ok('forty two'))

    def test_wrap_not_none_value(self):
        """wrap_not_none() wraps a present value in Ok."""
        assert result.wrap_not_none(42) == Ok(42)

    def test_wrap_not_none_default_error(self):
        """wrap_not_none(None) fails with NOT_FOUND."""
        assert result.wrap_not_none(None) == Err(NOT_FOUND)
        assert result.wrap_not_none(None) == Err(NotFound())

    def test_wrap_not_none_custom_error(self):
        """wrap_not_none() uses the caller's error tag."""
        assert result.wrap_not_none(None, 'number_missing') == Err('number_missing')

    def test_wrap_not_none_falsy_values_are_present(self):
        """Only None is absent; 0, '' and False are values."""
        assert result.wrap_not_none(0) == Ok(0)
        assert result.wrap_not_none('') == Ok('')
        assert result.wrap_not_none(False) == Ok(False)

    @given(present_values)
    def test_wrap_not_none_keeps_value(self, value):
        """Every non-None value comes back unchanged inside Ok."""
        assert result.wrap_not_none(value) == Ok(value)

    @given(error_tags)
    def test_wrap_not_none_round_trips_error(self, tag):
        """The error tag is carried opaquely."""
        assert result.unwrap_err(result.wrap_not_none(None, tag)) is tag


class TestPredicates:
    """Tests for is_ok and is_err."""

    def test_is_ok(self):
        assert result.is_ok(Ok(True)) is True
        assert result.is_ok(Err('not_found')) is False

    def test_is_err(self):
        assert result.is_err(Ok(True)) is False
        assert result.is_err(Err('not_found')) is True

    @given(results)
    def test_is_err_negates_is_ok(self, r):
        """is_err() is the negation of is_ok()."""
        assert result.is_err(r) is not result.is_ok(r)


class TestExtraction:
    """Tests for unwrap, unwrap_or and unwrap_err."""

    def test_unwrap_ok(self):
        assert result.unwrap(Ok(42)) == 42

    def test_unwrap_err_raises(self):
        """unwrap() on Err raises NotASuccess carrying the result."""
        with pytest.raises(NotASuccess, match=r"Err\(error='not_found'\) is not a success") as exc_info:
            result.unwrap(Err('not_found'))
        assert exc_info.value.result == Err('not_found')

    def test_unwrap_or(self):
        assert result.unwrap_or(Ok(42), 1567) == 42
        assert result.unwrap_or(Err('not_found'), 1567) == 1567

    def test_unwrap_or_keeps_ok_none(self):
        """A present None beats the default."""
        assert result.unwrap_or(Ok(None), 1567) is None

    def test_unwrap_err(self):
        assert result.unwrap_err(Err('not_found')) == 'not_found'

    def test_unwrap_err_on_ok_raises(self):
        """unwrap_err() on Ok raises NotAFailure."""
        with pytest.raises(NotAFailure, match=r'Ok\(value=42\) is not a failure'):
            result.unwrap_err(Ok(42))

    @given(integers, integers)
    def test_unwrap_or_contract(self, value, default):
        assert result.unwrap_or(Ok(value), default) == value
        assert result.unwrap_or(Err('e'), default) == default


class TestMap:
    """Tests for map."""

    def test_map_ok(self):
        assert result.map(Ok(42), lambda v: v / 2) == Ok(21.0)

    def test_map_err_unchanged(self):
        """map() returns the same Err object."""
        err = Err('not_found')
        assert result.map(err, lambda v: v / 2) is err

    def test_map_err_does_not_call_function(self):
        """A failing function is never reached on the Err path."""

        def explode(_):
            raise AssertionError('must not be called')

        assert result.map(Err('e'), explode) == Err('e')

    def test_map_calls_function_once(self):
        calls = []
        result.map(Ok(1), calls.append)
        assert calls == [1]

    def test_map_wraps_result_returned_by_function(self):
        """map() always re-wraps, even a Result."""
        assert result.map(Ok(1), Ok) == Ok(Ok(1))

    def test_map_propagates_function_exception(self):
        with pytest.raises(ZeroDivisionError):
            result.map(Ok(1), lambda v: v / 0)

    @given(error_tags)
    def test_map_identity_on_err(self, tag):
        assert result.map(Err(tag), lambda v: v) == Err(tag)


class TestBind:
    """Tests for bind."""

    def test_bind_ok_returning_result(self):
        assert result.bind(Ok(42), lambda v: Ok(v / 2)) == Ok(21.0)

    def test_bind_ok_returning_plain_value(self):
        """bind() does not wrap the function's return value."""
        assert result.bind(Ok(42), lambda v: v / 2) == 21.0

    def test_bind_ok_returning_err(self):
        assert result.bind(Ok(42), lambda _: Err('too_big')) == Err('too_big')

    def test_bind_err_short_circuits(self):
        """bind() on Err returns it unchanged without calling f."""
        calls = 0

        def step(v):
            nonlocal calls
            calls += 1
            return Ok(v)

        err = Err('not_found')
        assert result.bind(err, step) is err
        assert calls == 0

    def test_bind_propagates_function_exception(self):
        with pytest.raises(KeyError):
            result.bind(Ok({}), lambda d: d['missing'])


class TestBindError:
    """Tests for bind_error."""

    def test_bind_error_on_err_calls_function(self):
        assert result.bind_error(Err('not_found'), lambda: Ok(42)) == Ok(42)

    def test_bind_error_returns_function_value_as_is(self):
        assert result.bind_error(Err('not_found'), lambda: 42) == 42

    def test_bind_error_propagates_function_exception(self):
        def fallback():
            raise ConnectionError('replica down')

        with pytest.raises(ConnectionError, match='replica down'):
            result.bind_error(Err('timeout'), fallback)

    def test_bind_error_on_ok_short_circuits(self):
        """bind_error() on Ok returns it unchanged without calling f."""
        calls = 0

        def fallback():
            nonlocal calls
            calls += 1
            return Ok(42)

        ok = Ok(None)
        assert result.bind_error(ok, fallback) is ok
        assert calls == 0

    def test_bind_error_chain_takes_first_success(self):
        """Chained fallbacks stop at the first Ok."""
        attempts = []

        def attempt(name, outcome):
            def run():
                attempts.append(name)
                return outcome

            return run

        r = Err('bad_format')
        r = result.bind_error(r, attempt('iso_date', Err('bad_format')))
        r = result.bind_error(r, attempt('timestamp', Ok(1700000000)))
        r = result.bind_error(r, attempt('never', Ok(0)))
        assert r == Ok(1700000000)
        assert attempts == ['iso_date', 'timestamp']


class TestInvalidShape:
    """Every Result operation rejects values that are not Ok/Err."""

    OPERATIONS = [
        pytest.param(result.is_ok, id='is_ok'),
        pytest.param(result.is_err, id='is_err'),
        pytest.param(result.unwrap, id='unwrap'),
        pytest.param(result.unwrap_err, id='unwrap_err'),
        pytest.param(lambda r: result.unwrap_or(r, 0), id='unwrap_or'),
        pytest.param(lambda r: result.map(r, str), id='map'),
        pytest.param(lambda r: result.bind(r, str), id='bind'),
        pytest.param(lambda r: result.bind_error(r, str), id='bind_error'),
    ]

    @pytest.mark.parametrize('operation', OPERATIONS)
    @pytest.mark.parametrize('value', [42, 'string', None, ('ok', 1), Some(1), Nothing])
    def test_rejects_malformed(self, operation, value):
        with pytest.raises(InvalidShape) as exc_info:
            operation(value)
        assert exc_info.value.value is value
        assert exc_info.value.expected == 'Result'

    def test_message(self):
        with pytest.raises(InvalidShape, match='42 is not a valid Result'):
            result.is_ok(42)

    def test_is_type_error(self):
        """InvalidShape is also a TypeError."""
        with pytest.raises(TypeError):
            result.unwrap('some_atom')

    @given(malformed)
    def test_map_never_calls_function_on_malformed(self, value):
        calls = []
        with pytest.raises(InvalidShape):
            result.map(value, calls.append)
        assert calls == []


class TestFunctorLaws:
    """Property-based tests for map."""

    @given(integers)
    def test_map_applies_function(self, value):
        """map(Ok(v), f) == Ok(f(v))."""
        assert result.map(Ok(value), lambda x: x + 1) == Ok(value + 1)

    @given(results)
    def test_identity(self, r):
        """map(r, id) == r."""
        assert result.map(r, lambda x: x) == r

    @given(results)
    def test_composition(self, r):
        """map(map(r, f), g) == map(r, g . f)."""

        def f(x):
            return (x, 1)

        def g(x):
            return str(x)

        assert result.map(result.map(r, f), g) == result.map(r, lambda x: g(f(x)))


class TestBindLaws:
    """Property-based tests for bind."""

    @given(integers)
    def test_left_identity(self, value):
        """bind(wrap(a), f) == f(a)."""

        def f(x):
            return Ok(x * 2)

        assert result.bind(result.wrap(value), f) == f(value)

    @given(results)
    def test_right_identity(self, r):
        """bind(r, wrap) == r."""
        assert result.bind(r, result.wrap) == r

    @given(error_tags)
    def test_bind_error_symmetry(self, tag):
        """bind_error(Err(e), f) == f() and bind_error(Ok(v), f) == Ok(v)."""
        assert result.bind_error(Err(tag), lambda: Ok('recovered')) == Ok('recovered')
        assert result.bind_error(Ok(tag), lambda: Ok('recovered')) == Ok(tag)
