from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .process import ProcessRunnerProtocol
from .resolve import IncludeResolverProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ProcessRunnerProtocol',
    'IncludeResolverProtocol',
]
