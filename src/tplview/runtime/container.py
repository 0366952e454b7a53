from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from tplview.config.registry import ConfigRegistry, get_global_config_registry
from tplview.core.interfaces.factories import (
    ExecutorFactoryProtocol,
    PathResolverFactoryProtocol,
)
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.constants import MAX_LAYOUT_DEPTH
from tplview.logging.helpers import get_logger
from tplview.rendering.factories import (
    DefaultExecutorFactory,
    DefaultPathResolverFactory,
    TemplateFactory,
)
from tplview.rendering.renderer import LayoutRenderer


@dataclass(frozen=True)
class ViewConfig:
    """Immutable configuration blob used to seed the ViewBuilder."""
    logger: logging.Logger = field(default_factory=lambda: get_logger('view'))
    registry: Optional[ConfigRegistry] = None
    template: Mapping[str, Any] = field(default_factory=dict)
    max_layout_depth: int = MAX_LAYOUT_DEPTH

    # Optional overrides / DI hooks
    executor: Optional[ScriptExecutorProtocol] = None
    executor_factory: Optional[ExecutorFactoryProtocol] = None
    path_resolver_factory: Optional[PathResolverFactoryProtocol] = None


@dataclass
class ViewBuilder:
    """Composable builder that wires default factories into a TemplateFactory."""
    logger: logging.Logger
    registry: ConfigRegistry
    max_layout_depth: int = MAX_LAYOUT_DEPTH
    executor: Optional[ScriptExecutorProtocol] = None
    executor_factory: Optional[ExecutorFactoryProtocol] = None
    path_resolver_factory: Optional[PathResolverFactoryProtocol] = None

    @classmethod
    def from_config(cls, cfg: ViewConfig) -> 'ViewBuilder':
        """Build a new ViewBuilder from a single ViewConfig.

        ``cfg.template`` is merged into the registry (the process-wide one
        when ``cfg.registry`` is not given).
        """
        registry = cfg.registry or get_global_config_registry(cfg.logger)
        if cfg.template:
            registry.merge(cfg.template)
        return cls(
            logger=cfg.logger,
            registry=registry,
            max_layout_depth=cfg.max_layout_depth,
            executor=cfg.executor,
            executor_factory=cfg.executor_factory,
            path_resolver_factory=cfg.path_resolver_factory,
        )

    def build(self) -> TemplateFactory:
        """Materialize a TemplateFactory with the currently wired factories."""
        ex_factory = self.executor_factory or DefaultExecutorFactory()
        pr_factory = self.path_resolver_factory or DefaultPathResolverFactory()

        executor = self.executor or ex_factory(self.logger)
        return TemplateFactory(
            registry=self.registry,
            executor=executor,
            resolver=pr_factory(),
            renderer=LayoutRenderer(max_depth=self.max_layout_depth, logger=self.logger),
            logger=self.logger,
        )
