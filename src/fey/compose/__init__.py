"""Composition utilities: pipe() function."""

from fey.compose.pipe import pipe

__all__ = ['pipe']
