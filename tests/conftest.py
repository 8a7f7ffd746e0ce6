"""Pytest configuration and shared fixtures for fey tests."""

import logging

import pytest


@pytest.fixture
def fresh_config(monkeypatch):
    """Drop the cached configuration and FEY_* variables for the test."""
    import fey._config

    for name in ('FEY_LOG_LEVEL', 'FEY_LOG_JSON', 'FEY_REPR_LIMIT'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(fey._config, '_config', None)
    yield
    monkeypatch.setattr(fey._config, '_config', None)


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by configure_logging and reset the root level."""
    import structlog

    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
