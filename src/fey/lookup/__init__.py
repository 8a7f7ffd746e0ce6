"""Lookup adapters: sequence, mapping and pair-list lookups as Option/Result."""

from fey.lookup import mapping, pairs, sequence

__all__ = [
    'mapping',
    'pairs',
    'sequence',
]
