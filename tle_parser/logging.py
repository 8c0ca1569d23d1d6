"""Structured logging helpers for tle-parser."""

from __future__ import annotations

import contextlib
import contextvars
import datetime as _dt
import json
import logging
import sys
from typing import Any, Dict, Iterable, Optional

from .config import AppConfig, load_config

_LOGGER_NAME = "tle_parser"
_CONTEXT: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "tle_parser_log_context", default={}
)
_PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(level: Optional[str | int], config: AppConfig) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = config.log_level
    try:
        return int(level)
    except (TypeError, ValueError):
        numeric = logging.getLevelName(str(level).upper())
        if isinstance(numeric, int):
            return numeric
    return logging.WARNING


def _truncate(value: Any, limit: int) -> Any:
    if isinstance(value, str) and limit and len(value) > limit:
        return value[:limit] + "..."
    return value


class JSONFormatter(logging.Formatter):
    """Render log records as JSON with contextual metadata.

    Extras named in ``_TRUNCATED_FIELDS`` longer than ``max_value_length`` are
    cut, which keeps raw TLE payloads from flooding the log.
    """

    _TRUNCATED_FIELDS: Iterable[str] = {"raw"}

    _SKIP_FIELDS: Iterable[str] = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "msg",
        "message",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def __init__(self, max_value_length: int = 80) -> None:
        super().__init__()
        self.max_value_length = max_value_length

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _dt.datetime.now(_dt.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = _CONTEXT.get()
        if context:
            payload["context"] = dict(context)

        extras = {
            key: _truncate(value, self.max_value_length) if key in self._TRUNCATED_FIELDS else value
            for key, value in record.__dict__.items()
            if key not in self._SKIP_FIELDS
        }
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=repr, sort_keys=False)


def configure_logging(
    level: Optional[str | int] = None,
    stream: Optional[Any] = None,
    force: bool = False,
    config: Optional[AppConfig] = None,
) -> logging.Logger:
    """Configure the package logger.

    ``level`` overrides ``config.log_level``; ``config`` defaults to
    :func:`~tle_parser.config.load_config`.
    """

    config = config or load_config()
    logger = logging.getLogger(_LOGGER_NAME)
    if force:
        logger.handlers.clear()
    if logger.handlers and not force:
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.log_json:
        handler.setFormatter(JSONFormatter(max_value_length=config.log_max_input))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level, config))
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger of the package logger."""

    base = _LOGGER_NAME
    if not name:
        return logging.getLogger(base)
    if name.startswith(base):
        return logging.getLogger(name)
    return logging.getLogger(f"{base}.{name}")


@contextlib.contextmanager
def log_context(**kwargs: Any):
    """Context manager to bind contextual metadata to emitted logs."""

    current = dict(_CONTEXT.get())
    current.update({k: v for k, v in kwargs.items() if v is not None})
    token = _CONTEXT.set(current)
    try:
        yield
    finally:
        _CONTEXT.reset(token)


__all__ = ["JSONFormatter", "configure_logging", "get_logger", "log_context"]
