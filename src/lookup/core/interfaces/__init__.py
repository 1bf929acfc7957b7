from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import LineSourceProtocol, OpenerProtocol, OpenerRegistryProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'LineSourceProtocol',
    'OpenerProtocol',
    'OpenerRegistryProtocol',
]
