from __future__ import annotations

"""Public surface for tplview.core.

This module exposes the error hierarchy, value objects and protocol types
for downstream consumers. The intent is to provide a stable import location:

    from tplview.core import ExecutionFault, TemplateConfig, ScriptExecutorProtocol
"""

from tplview.core.errors import (
    ConfigError,
    ExecutionFault,
    ResolutionFailure,
    RouteNotFound,
    TplviewError,
)
from tplview.core.models import Request, Response, TemplateConfig
from tplview.core.interfaces.fs import PathResolverProtocol
from tplview.core.interfaces.hooks import HookProtocol
from tplview.core.interfaces.templating import ScriptExecutorProtocol

__all__ = [
    # Errors
    "TplviewError",
    "ExecutionFault",
    "ResolutionFailure",
    "ConfigError",
    "RouteNotFound",
    # Models
    "TemplateConfig",
    "Request",
    "Response",
    # Protocols
    "PathResolverProtocol",
    "HookProtocol",
    "ScriptExecutorProtocol",
]
