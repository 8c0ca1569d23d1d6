"""Application configuration loader for tle_parser."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = [
    "AppConfig",
    "load_config",
]

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_MAX_INPUT = 80


@dataclass(frozen=True)
class AppConfig:
    """Logging options derived from the environment."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = True
    log_max_input: int = DEFAULT_LOG_MAX_INPUT


_TRUE_SET = {"1", "true", "yes", "on"}
_FALSE_SET = {"0", "false", "no", "off"}


def _to_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_SET:
        return True
    if lowered in _FALSE_SET:
        return False
    return default


def _to_int(value: Optional[str], default: int) -> int:
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load configuration from environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    level = env_map.get("TLE_PARSER_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    return AppConfig(
        log_level=level.strip().upper(),
        log_json=_to_bool(env_map.get("TLE_PARSER_LOG_JSON"), default=True),
        log_max_input=_to_int(env_map.get("TLE_PARSER_LOG_MAX_INPUT"), DEFAULT_LOG_MAX_INPUT),
    )
