from __future__ import annotations
from typing import Protocol, Sequence, runtime_checkable

from argflags.core.models import ParseResult


@runtime_checkable
class FlagTokenizerProtocol(Protocol):
    """Turns an argv-style token sequence into flags and positionals."""

    def parse(self, tokens: Sequence[str]) -> ParseResult: ...
