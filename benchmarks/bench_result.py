"""Benchmarks for the Result algebra.

Run with: pytest benchmarks/bench_result.py --benchmark-only -v
"""

from fey import Err, Ok, result

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestResultCreation:
    """Benchmark Result creation."""

    def test_wrap(self, benchmark):
        benchmark(result.wrap, 42)

    def test_wrap_not_none_miss(self, benchmark):
        benchmark(result.wrap_not_none, None)


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestResultCombinators:
    """Benchmark single combinator calls."""

    def test_ok_map(self, benchmark):
        ok = Ok(5)
        benchmark(result.map, ok, lambda x: x * 2)

    def test_err_map(self, benchmark):
        err = Err('error')
        benchmark(result.map, err, lambda x: x * 2)

    def test_ok_bind(self, benchmark):
        ok = Ok(5)
        benchmark(result.bind, ok, lambda x: Ok(x * 2))

    def test_err_bind_error(self, benchmark):
        err = Err('error')
        benchmark(result.bind_error, err, lambda: Ok(0))

    def test_ok_unwrap_or(self, benchmark):
        ok = Ok(5)
        benchmark(result.unwrap_or, ok, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestResultChaining:
    """Benchmark chained Result operations."""

    def test_ok_chain_3(self, benchmark):
        """3-step chain on Ok."""

        def chain():
            r = result.map(Ok(5), lambda x: x + 1)
            r = result.map(r, lambda x: x * 2)
            return result.bind(r, lambda x: Ok(x - 1))

        benchmark(chain)

    def test_err_chain_3(self, benchmark):
        """3-step chain on Err (short-circuits)."""

        def chain():
            r = result.map(Err('e'), lambda x: x + 1)
            r = result.map(r, lambda x: x * 2)
            return result.bind(r, lambda x: Ok(x - 1))

        benchmark(chain)

    def test_create_1000_ok(self, benchmark):
        def create():
            return [Ok(i) for i in range(1000)]

        benchmark(create)
