from __future__ import annotations

from argflags.cli import ArgFlags, main
from argflags.core.models import (
    PRESENT,
    FlagValue,
    FlagValueError,
    ParseResult,
    PresenceFlag,
    StringValue,
)
from argflags.logging.helpers import get_logger
from argflags.parsing.tokenizer import ClassifiedToken, FlagTokenizer, TokenRole, parse_flags

__version__ = '1.0.0'


__all__ = [
    'ArgFlags',
    'main',
    'parse_flags',
    'FlagTokenizer',
    'ClassifiedToken',
    'TokenRole',
    'ParseResult',
    'FlagValue',
    'StringValue',
    'PresenceFlag',
    'PRESENT',
    'FlagValueError',
    'get_logger',
]
