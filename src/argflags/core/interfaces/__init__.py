from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .tokenizer import FlagTokenizerProtocol

__all__ = [
    'FlagTokenizerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
