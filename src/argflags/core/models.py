from __future__ import annotations

"""Result model for the flag tokenizer.

A flag value is one of two variants:

    * :class:`StringValue` – the flag carried an explicit value.
    * :class:`PresenceFlag` – the flag appeared on its own.

Keeping the variants explicit avoids truthiness checks downstream: an empty
string value (``--name=``) and a bare ``--name`` are different things.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union


class FlagValueError(ValueError):
    """Raised when a flag is required to carry a string value and does not."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f'flag {name!r} {reason}')
        self.name = name
        self.reason = reason


@dataclass(frozen=True)
class StringValue:
    text: str

    def as_str(self) -> Optional[str]:
        return self.text

    def to_raw(self) -> Union[str, bool]:
        return self.text


@dataclass(frozen=True)
class PresenceFlag:
    """A flag given without a value; serializes as ``True``."""

    def as_str(self) -> Optional[str]:
        return None

    def to_raw(self) -> Union[str, bool]:
        return True


PRESENT = PresenceFlag()

FlagValue = Union[StringValue, PresenceFlag]


def _freeze(flags: Mapping[str, FlagValue]) -> Mapping[str, FlagValue]:
    return MappingProxyType(dict(flags))


@dataclass(frozen=True)
class ParseResult:
    """Flags and positional arguments produced by a single tokenizer pass.

    The result unpacks as a pair::

        flags, args = parse_flags(["-p", "8080", "file.txt"])
    """
    __hash__ = None  # mapping proxies are unhashable

    flags: Mapping[str, FlagValue] = field(default_factory=dict)
    args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'flags', _freeze(self.flags))
        object.__setattr__(self, 'args', tuple(self.args))

    def __iter__(self) -> Iterator[Any]:
        yield self.flags
        yield self.args

    def get_str(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the string value of *name*, or *default* when absent or presence-only."""
        value = self.flags.get(name)
        if value is None:
            return default
        text = value.as_str()
        return default if text is None else text

    def is_present(self, name: str) -> bool:
        return name in self.flags

    def is_presence_flag(self, name: str) -> bool:
        return isinstance(self.flags.get(name), PresenceFlag)

    def require_str(self, name: str) -> str:
        value = self.flags.get(name)
        if value is None:
            raise FlagValueError(name, 'is missing')
        text = value.as_str()
        if text is None:
            raise FlagValueError(name, 'was given without a value')
        return text

    def to_dict(self) -> Dict[str, Any]:
        flags: Dict[str, Union[str, bool]] = {name: value.to_raw() for name, value in self.flags.items()}
        args: List[str] = list(self.args)
        return {'flags': flags, 'args': args}
