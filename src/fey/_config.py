"""Library configuration: FeyConfig, environment detection, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fey._logging import configure_logging

__all__ = [
    'FeyConfig',
    'get_config',
    'init',
]

DEFAULT_REPR_LIMIT = 200
MIN_REPR_LIMIT = 16
MAX_REPR_LIMIT = 10_000

_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class FeyConfig:
    """Configuration for fey.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render log events as JSON (True) or for the console (False).
        repr_limit: Maximum length of a rendered value in error messages and log events.
    """

    log_level: str | None = None
    json_output: bool = True
    repr_limit: int = DEFAULT_REPR_LIMIT


# Active configuration (set by init() or built lazily by get_config())
_config: FeyConfig | None = None


def _clamp_repr_limit(limit: int) -> int:
    return max(MIN_REPR_LIMIT, min(MAX_REPR_LIMIT, limit))


def _detect_log_level() -> str | None:
    """Read FEY_LOG_LEVEL; an empty or missing value means no logging setup."""
    level = os.environ.get('FEY_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read FEY_LOG_JSON; anything but an explicit false value keeps JSON output."""
    return os.environ.get('FEY_LOG_JSON', '').strip().lower() not in _FALSY


def _detect_repr_limit() -> int:
    """Read FEY_REPR_LIMIT, falling back to the default on invalid values."""
    raw = os.environ.get('FEY_REPR_LIMIT', '').strip()
    if not raw:
        return DEFAULT_REPR_LIMIT
    try:
        return _clamp_repr_limit(int(raw))
    except ValueError:
        logging.warning("Invalid FEY_REPR_LIMIT value '%s', using %d", raw, DEFAULT_REPR_LIMIT)
        return DEFAULT_REPR_LIMIT


def _from_environment() -> FeyConfig:
    return FeyConfig(
        log_level=_detect_log_level(),
        json_output=_detect_json_output(),
        repr_limit=_detect_repr_limit(),
    )


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    repr_limit: int | None = None,
) -> FeyConfig:
    """Initialize fey with the given configuration.

    Explicit arguments win over FEY_* environment variables.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = read FEY_LOG_LEVEL.
        json_output: JSON or console log rendering. None = read FEY_LOG_JSON.
        repr_limit: Maximum rendered value length. None = read FEY_REPR_LIMIT.

    Returns:
        The FeyConfig that was set.

    Example:
        ```python
        import fey

        fey.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config

    env = _from_environment()
    _config = FeyConfig(
        log_level=log_level.upper() if log_level is not None else env.log_level,
        json_output=json_output if json_output is not None else env.json_output,
        repr_limit=_clamp_repr_limit(repr_limit) if repr_limit is not None else env.repr_limit,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> FeyConfig:
    """Get the active configuration.

    When init() has not been called, the configuration is read from the
    environment once and cached. Logging is not configured in that case.
    """
    global _config

    if _config is None:
        _config = _from_environment()
    return _config
