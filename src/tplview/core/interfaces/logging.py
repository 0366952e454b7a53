from __future__ import annotations

"""Logging seams for tplview components.

Components that only emit records (the config registry, the layout
renderer, the hook registry, fault reporting) accept any object matching
`LoggerLikeProtocol`, so a `logging.Logger`, a `logging.LoggerAdapter` or a
test double can be injected. The CLI obtains its loggers through a
`LoggerFactoryProtocol`.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """The levels tplview emits at: debug traces, route warnings, fault errors."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures logging once and hands out 'tplview.<area>' loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
