from __future__ import annotations

"""Logging helpers that standardize argflags logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the base 'argflags' logger.
    - get_logger: Namespaced logger factory ('argflags.*').
    - trace_parse: per-token tracing gated by ARGFLAGS_TRACE.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from argflags.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = 'argflags'


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'argflags.parsing').
        - msg: Formatted message string.
        - version: argflags.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Imported lazily: argflags/__init__ imports this module.
            from argflags import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv('ARGFLAGS_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'argflags' logger once and return it.

    A second call only adjusts the level; the handler installed by the first
    call is kept.
    """
    base = logging.getLogger(BASE_LOGGER)
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def reset_base_logger() -> None:
    """Drop handlers installed by setup_base_logger (used between CLI runs)."""
    base = logging.getLogger(BASE_LOGGER)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.propagate = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger under 'argflags'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER}.{name}')


def is_trace_enabled() -> bool:
    return os.getenv('ARGFLAGS_TRACE') == '1'


def trace_parse(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit a debug record for a tokenizer decision when ARGFLAGS_TRACE=1.

    The context is attached both to the message text and, for the JSON
    formatter, to the record as 'context'.
    """
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
