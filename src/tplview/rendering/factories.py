"""
rendering.factories – Default DI factories for executors, path resolvers and Templates.

These classes are thin facades around the concrete implementations so
callers can inject them via Protocol-based factories without importing
implementation details at the composition sites.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from tplview.config.registry import ConfigRegistry
from tplview.core.interfaces.factories import (
    ExecutorFactoryProtocol,
    PathResolverFactoryProtocol,
)
from tplview.core.interfaces.fs import PathResolverProtocol
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.rendering.executor import JinjaScriptExecutor
from tplview.rendering.path_resolver import TemplatePathResolver
from tplview.rendering.renderer import LayoutRenderer
from tplview.rendering.template import Template


class DefaultExecutorFactory(ExecutorFactoryProtocol):
    """Default factory for ScriptExecutorProtocol.

    Example:
        >>> factory = DefaultExecutorFactory()
        >>> executor = factory(logger)
    """

    def __init__(
        self,
        builder: Optional[Callable[[logging.Logger], ScriptExecutorProtocol]] = None
    ) -> None:
        self._builder = builder or (lambda lg: JinjaScriptExecutor(logger=lg))

    def __call__(self, logger: logging.Logger) -> ScriptExecutorProtocol:  # type: ignore[override]
        return self._builder(logger)


class DefaultPathResolverFactory(PathResolverFactoryProtocol):
    """Default factory for PathResolverProtocol.

    Example:
        >>> factory = DefaultPathResolverFactory()
        >>> resolver = factory()
    """

    def __init__(
        self,
        builder: Optional[Callable[[], PathResolverProtocol]] = None
    ) -> None:
        self._builder = builder or (lambda: TemplatePathResolver())

    def __call__(self) -> PathResolverProtocol:  # type: ignore[override]
        return self._builder()


class TemplateFactory:
    """Build Templates that share one registry, executor, resolver and renderer.

    Example:
        >>> make = TemplateFactory(registry=registry, executor=executor)
        >>> make('index', {'title': 'Home'}).content()
    """

    def __init__(
        self,
        *,
        registry: ConfigRegistry,
        executor: ScriptExecutorProtocol,
        resolver: Optional[PathResolverProtocol] = None,
        renderer: Optional[LayoutRenderer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.registry = registry
        self.executor = executor
        self._resolver = resolver or TemplatePathResolver()
        self._renderer = renderer or LayoutRenderer(logger=logger)
        self._log = logger

    def __call__(self, name: str, variables: Optional[Mapping[str, Any]] = None) -> Template:
        return Template(
            name,
            variables,
            config=self.registry,
            executor=self.executor,
            resolver=self._resolver,
            renderer=self._renderer,
            logger=self._log,
        )
