from .ignore import IgnoreMatcherProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .walker import WalkerProtocol

__all__ = [
    'IgnoreMatcherProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'WalkerProtocol',
]
