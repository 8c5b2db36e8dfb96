from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface argflags writes to: tokenizer traces and CLI errors."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
