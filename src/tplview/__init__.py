from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from tplview.constants import DIAGNOSTIC_MARKER, YIELD_NAME
from tplview.config.registry import ConfigRegistry, get_global_config_registry
from tplview.core.errors import (
    ConfigError,
    ExecutionFault,
    ResolutionFailure,
    RouteNotFound,
    TplviewError,
)
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.core.models import Request, Response, TemplateConfig
from tplview.rendering.diagnostics import fault_to_text
from tplview.rendering.executor import JinjaScriptExecutor, PassthroughExecutor
from tplview.rendering.path_resolver import DefaultPathResolver, TemplatePathResolver
from tplview.rendering.renderer import LayoutRenderer
from tplview.rendering.template import Template
from tplview.runtime.app import App
from tplview.runtime.container import ViewBuilder, ViewConfig
from tplview.logging.helpers import get_logger

__version__ = '0.3.0'


def template_factory(
    *,
    registry: Optional[ConfigRegistry] = None,
    executor: Optional[ScriptExecutorProtocol] = None,
    template: Optional[Mapping[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
):
    """Factory helper that returns a wired TemplateFactory.

    Falls back to the process-wide registry and a JinjaScriptExecutor when
    none is provided; *template* settings are merged into the registry.
    """
    cfg = ViewConfig(
        logger=logger or get_logger('view'),
        registry=registry,
        template=dict(template or {}),
        executor=executor,
    )
    return ViewBuilder.from_config(cfg).build()


__all__ = [
    'App',
    'ConfigError',
    'ConfigRegistry',
    'DIAGNOSTIC_MARKER',
    'DefaultPathResolver',
    'ExecutionFault',
    'JinjaScriptExecutor',
    'LayoutRenderer',
    'PassthroughExecutor',
    'Request',
    'ResolutionFailure',
    'Response',
    'RouteNotFound',
    'Template',
    'TemplateConfig',
    'TemplatePathResolver',
    'TplviewError',
    'ViewBuilder',
    'ViewConfig',
    'YIELD_NAME',
    'fault_to_text',
    'get_global_config_registry',
    'template_factory',
]
