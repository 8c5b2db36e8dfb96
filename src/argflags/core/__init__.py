from __future__ import annotations

"""Public surface for argflags.core: result model and protocol types."""

from argflags.core.interfaces import (
    FlagTokenizerProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
)
from argflags.core.models import (
    PRESENT,
    FlagValue,
    FlagValueError,
    ParseResult,
    PresenceFlag,
    StringValue,
)

__all__ = [
    'FlagTokenizerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PRESENT',
    'FlagValue',
    'FlagValueError',
    'ParseResult',
    'PresenceFlag',
    'StringValue',
]
