from __future__ import annotations

"""
FlagTokenizer – single-pass classifier for argv-style token lists.

Each token is classified exactly once, left to right, with one token of
lookahead:

    * ``--name=value`` names a long flag with an inline value (split on the
      first ``=`` only).
    * ``--name`` / ``-n`` name a flag; the next token becomes its value unless
      it is missing or starts with ``-``, in which case the flag is
      presence-only.
    * Anything else, including a lone ``-``, is positional.

Short flags are never clustered (``-abc`` names the flag ``abc``) and never
split on ``=``. A later occurrence of a flag overwrites an earlier one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence

from argflags.constants import LONG_PREFIX, SHORT_PREFIX, VALUE_SEPARATOR
from argflags.core.interfaces.logging import LoggerLikeProtocol
from argflags.core.models import PRESENT, FlagValue, ParseResult, StringValue
from argflags.logging.helpers import get_logger, trace_parse


class TokenRole(str, Enum):
    FLAG = 'flag'
    VALUE = 'value'
    POSITIONAL = 'positional'


@dataclass(frozen=True)
class ClassifiedToken:
    """One input token and what it was consumed as.

    Attributes:
        index: Position of the token in the input sequence.
        token: The token, verbatim.
        role: How the token was consumed.
        name: Flag name for FLAG and VALUE entries, else None.
        value: The value recorded for the flag when this token settled it
            (FLAG with inline value or presence-only, and VALUE entries).
    """
    index: int
    token: str
    role: TokenRole
    name: Optional[str] = None
    value: Optional[FlagValue] = None


class FlagTokenizer:
    """Split a token sequence into flags and positional arguments."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('parsing')

    @staticmethod
    def flag_name(token: str) -> Optional[str]:
        """Return the flag name carried by *token*, or None when positional.

        Long flags keep an inline ``=value`` suffix; callers split it.
        """
        if token.startswith(LONG_PREFIX):
            return token[len(LONG_PREFIX):]
        if token.startswith(SHORT_PREFIX) and len(token) > len(SHORT_PREFIX):
            return token[len(SHORT_PREFIX):]
        return None

    @staticmethod
    def is_value(token: str) -> bool:
        """A lookahead token can serve as a value unless it starts with '-'."""
        return not token.startswith(SHORT_PREFIX)

    def classify(self, tokens: Sequence[str]) -> Iterator[ClassifiedToken]:
        i, n = (0, len(tokens))
        while i < n:
            tok = tokens[i]
            name = self.flag_name(tok)

            if name is None:
                trace_parse(self._log, 'positional', index=i, token=tok)
                yield ClassifiedToken(i, tok, TokenRole.POSITIONAL)
                i += 1
                continue

            if tok.startswith(LONG_PREFIX) and VALUE_SEPARATOR in name:
                name, inline = name.split(VALUE_SEPARATOR, 1)
                trace_parse(self._log, 'inline value', index=i, flag=name)
                yield ClassifiedToken(i, tok, TokenRole.FLAG, name, StringValue(inline))
                i += 1
                continue

            if i + 1 < n and self.is_value(tokens[i + 1]):
                trace_parse(self._log, 'flag with value', index=i, flag=name)
                yield ClassifiedToken(i, tok, TokenRole.FLAG, name)
                yield ClassifiedToken(i + 1, tokens[i + 1], TokenRole.VALUE, name, StringValue(tokens[i + 1]))
                i += 2
                continue

            trace_parse(self._log, 'presence flag', index=i, flag=name)
            yield ClassifiedToken(i, tok, TokenRole.FLAG, name, PRESENT)
            i += 1

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        flags: Dict[str, FlagValue] = {}
        args: List[str] = []
        for item in self.classify(tokens):
            if item.role is TokenRole.POSITIONAL:
                args.append(item.token)
            elif item.value is not None:
                if item.name in flags:
                    trace_parse(self._log, 'flag overwritten', flag=item.name)
                flags[item.name] = item.value
        return ParseResult(flags=flags, args=tuple(args))


def parse_flags(tokens: Sequence[str]) -> ParseResult:
    """Parse *tokens* into flags and positional arguments."""
    return FlagTokenizer().parse(tokens)
