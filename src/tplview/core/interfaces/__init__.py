from .factories import ExecutorFactoryProtocol, PathResolverFactoryProtocol
from .fs import PathResolverProtocol
from .hooks import HookProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .templating import ScriptExecutorProtocol

__all__ = [
    'ExecutorFactoryProtocol',
    'PathResolverFactoryProtocol',
    'PathResolverProtocol',
    'HookProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ScriptExecutorProtocol',
]
