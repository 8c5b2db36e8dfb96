from __future__ import annotations

import logging
from typing import Optional, TextIO

from argflags.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Hands out 'argflags.*' loggers, configuring the base logger on demand."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream

    def get_logger(self, name: str) -> logging.Logger:
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        return get_logger(name)
