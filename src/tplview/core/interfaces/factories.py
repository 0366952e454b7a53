# src/tplview/core/interfaces/factories.py
"""
core.interfaces.factories – Protocols for DI factories (executor/path resolver).

These protocols standardize the dependency-injection surface so higher-level
composition (e.g., ViewBuilder) can accept pluggable factories without
depending on concrete implementations.
"""

import logging
from typing import Protocol, runtime_checkable

from tplview.core.interfaces.fs import PathResolverProtocol
from tplview.core.interfaces.templating import ScriptExecutorProtocol


@runtime_checkable
class ExecutorFactoryProtocol(Protocol):
    """Factory that builds a ScriptExecutorProtocol."""

    def __call__(self, logger: logging.Logger) -> ScriptExecutorProtocol:  # pragma: no cover - interface
        ...


@runtime_checkable
class PathResolverFactoryProtocol(Protocol):
    """Factory that creates a PathResolverProtocol instance."""

    def __call__(self) -> PathResolverProtocol:  # pragma: no cover - interface
        ...
