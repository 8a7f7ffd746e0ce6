"""Benchmarks for the Option algebra and lookup adapters.

Run with: pytest benchmarks/bench_option.py --benchmark-only -v
"""

from fey import Nothing, Some, option
from fey.lookup import mapping, pairs, sequence

# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestOptionCombinators:
    """Benchmark Option combinator calls."""

    def test_some_map(self, benchmark):
        some = Some(5)
        benchmark(option.map, some, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        benchmark(option.map, Nothing, lambda x: x * 2)

    def test_some_bind(self, benchmark):
        some = Some(5)
        benchmark(option.bind, some, lambda x: Some(x * 2))

    def test_nothing_unwrap_or(self, benchmark):
        benchmark(option.unwrap_or, Nothing, 0)

    def test_some_is_some(self, benchmark):
        some = Some(5)
        benchmark(option.is_some, some)


# =============================================================================
# Lookup benchmarks
# =============================================================================


class TestLookups:
    """Benchmark lookup adapters against plain lookups."""

    def test_dict_get_baseline(self, benchmark):
        data = {i: i for i in range(100)}
        benchmark(data.get, 50)

    def test_mapping_get(self, benchmark):
        data = {i: i for i in range(100)}
        benchmark(mapping.get, data, 50)

    def test_find_at_index_list(self, benchmark):
        items = list(range(100))
        benchmark(sequence.find_at_index, items, 50)

    def test_find_matching(self, benchmark):
        items = list(range(100))
        benchmark(sequence.find_matching, items, lambda x: x == 50)

    def test_pairs_get(self, benchmark):
        items = [(str(i), i) for i in range(100)]
        benchmark(pairs.get, items, '50')
