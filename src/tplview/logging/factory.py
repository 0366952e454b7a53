from __future__ import annotations

import logging
from typing import Optional, TextIO

from tplview.core.interfaces.logging import LoggerFactoryProtocol
from tplview.logging.helpers import setup_base_logger, get_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Configure the 'tplview' base logger and hand out area loggers.

    The base logger is (re)configured by the first `get_logger` call of each
    factory, so a factory built with ``json_logs=True`` switches an already
    configured process over to JSON records.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_flags(cls, *, json_logs: bool = False, verbose: bool = False,
                   stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Map the CLI switches: warnings only by default, everything with -v."""
        return cls(json_logs=json_logs, level=logging.DEBUG if verbose else logging.WARNING, stream=stream)

    @property
    def json_logs(self) -> bool:
        return self._json

    @property
    def level(self) -> int:
        return self._level

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
