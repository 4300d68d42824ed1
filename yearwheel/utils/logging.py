"""Root logger setup shared by the CLI and the settings view model."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "YEARWHEEL_LOG_LEVEL"
DEBUG_ENV_VAR = "YEARWHEEL_DEBUG"

# Loggers of the HTTP stack behind the holiday feed.
HTTP_LOGGERS = ("urllib3", "requests")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a level; unknown input gives ``fallback``."""
    if isinstance(value, int):
        return value
    token = (value or "").strip()
    if not token:
        return fallback
    if token.isdigit():
        return int(token)
    level = logging.getLevelName(token.upper())
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when the caller decides.

    ``YEARWHEEL_LOG_LEVEL`` (name or number) wins over a truthy ``YEARWHEEL_DEBUG``.
    """
    env = os.environ if environ is None else environ
    explicit = (env.get(LEVEL_ENV_VAR) or "").strip()
    if explicit:
        return parse_level(explicit)
    if (env.get(DEBUG_ENV_VAR) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_forces_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def _set_levels(level: int) -> int:
    logging.getLogger().setLevel(level)
    # urllib3 connection chatter only shows while debugging.
    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    return level


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the console handler once and return the effective root level."""
    forced = env_level()
    level = forced if forced is not None else parse_level(default_level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    return _set_levels(level)


def apply_preferences(debug_enabled: bool) -> int:
    """Follow the user's debug toggle unless the environment pins a level."""
    forced = env_level()
    if forced is not None:
        return _set_levels(forced)
    return _set_levels(logging.DEBUG if debug_enabled else logging.INFO)
