"""
template – The file-backed, cacheable Template object.

A Template is created per render request, configured (path, layout, format,
variables), rendered once and discarded. Its parsed output is cached on the
instance, so repeated ``content()`` calls never re-run the template file
until ``clear_cached_content()`` is called.

Configuration accessors follow a get/set convention: called without an
argument they return the effective value, called with one they store it and
return the Template so calls can be chained::

    Template('index').path('/srv/views').layout('site').set('user', user)
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from tplview.config.registry import ConfigRegistry, get_global_config_registry
from tplview.constants import VIEW_NAME, YIELD_NAME
from tplview.core.errors import ExecutionFault
from tplview.core.interfaces.fs import PathResolverProtocol
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.core.models import TemplateConfig
from tplview.logging.helpers import get_logger
from tplview.rendering.diagnostics import report_fault
from tplview.rendering.executor import get_default_executor
from tplview.rendering.path_resolver import TemplatePathResolver
from tplview.rendering.renderer import LayoutRenderer

LayoutSetting = Union[None, bool, str]

_UNSET: Any = object()


class Template:
    """Named template resolved against a ConfigRegistry.

    The layout setting has three states: ``None`` (defer to the registry's
    ``auto_layout``), a layout name, or ``False`` (no layout, even when the
    registry configures one).
    """

    def __init__(
        self,
        name: str,
        variables: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[ConfigRegistry] = None,
        executor: Optional[ScriptExecutorProtocol] = None,
        resolver: Optional[PathResolverProtocol] = None,
        renderer: Optional[LayoutRenderer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._name = name
        self._vars: Dict[str, Any] = dict(variables or {})
        self._path: Optional[str] = None
        self._layout: LayoutSetting = None
        self._format: Optional[str] = None
        self._content: Optional[str] = None
        self._log = logger or get_logger('render')
        self._registry = config or get_global_config_registry(self._log)
        self._executor = executor or get_default_executor(self._log)
        self._resolver = resolver or TemplatePathResolver()
        self._renderer = renderer or LayoutRenderer(logger=self._log)

    # Identity & resolution ---------------------------------------------------

    def file(self) -> str:
        """Return the template name exactly as supplied."""
        return self._name

    def file_name(self) -> str:
        """Return the bare file name: name plus format and extension."""
        return self._resolver.file_name(self._name, self.config(), self._format)

    def path(self, path: Optional[str] = _UNSET) -> Any:
        """Get the effective directory, or set the instance override (``None`` clears it)."""
        if path is _UNSET:
            return self._resolver.directory(self._path, self.config().path)
        self._path = path
        return self

    def full_path(self) -> Path:
        return self._resolver.full_path(self.path(), self.file_name())

    def format(self, fmt: Optional[str] = _UNSET) -> Any:
        if fmt is _UNSET:
            return self._format or self.config().default_format
        self._format = fmt
        return self

    def config(self) -> TemplateConfig:
        return self._registry.get()

    @property
    def executor(self) -> ScriptExecutorProtocol:
        return self._executor

    # Layout ------------------------------------------------------------------

    def layout(self, layout: LayoutSetting = _UNSET) -> Any:
        """Get the layout setting, or set it (a name, ``False`` or ``None``)."""
        if layout is _UNSET:
            return self._layout
        if layout is True:
            raise ValueError("layout() accepts a layout name, False or None")
        self._layout = layout if layout != '' else False
        return self

    def effective_layout(self) -> Optional[str]:
        """Return the layout name that applies right now, if any."""
        if self._layout is False:
            return None
        if self._layout:
            return self._layout
        return self.config().auto_layout_name

    def layout_template(self, name: str, child_output: str) -> 'Template':
        """Build the transient layout Template wrapping *child_output*.

        The layout inherits the child's variables plus the reserved yield
        binding, lives under ``path_layouts`` and starts with its own layout
        disabled; a layout file may still request a further one explicitly.
        """
        variables = dict(self._vars)
        variables[YIELD_NAME] = child_output
        tpl = Template(
            name,
            variables,
            config=self._registry,
            executor=self._executor,
            resolver=self._resolver,
            renderer=self._renderer,
            logger=self._log,
        )
        tpl._format = self._format
        return tpl.path(self.config().path_layouts).layout(False)

    # Variables ---------------------------------------------------------------

    def set(self, key: Union[str, Mapping[str, Any]], value: Any = _UNSET) -> 'Template':
        """Bind one variable, or every item of a mapping."""
        if isinstance(key, Mapping):
            if value is not _UNSET:
                raise TypeError("set() takes a mapping or a key and a value, not both")
            self._vars.update(key)
        else:
            if value is _UNSET:
                raise TypeError(f"set({key!r}) is missing a value")
            self._vars[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._vars.get(key, default)

    def variables(self) -> Dict[str, Any]:
        return dict(self._vars)

    def bindings(self) -> Dict[str, Any]:
        """Variables handed to the executor; ``view`` is this Template unless bound."""
        return {VIEW_NAME: self, **self._vars}

    # Rendering ---------------------------------------------------------------

    def content(self, parse: bool = True) -> str:
        """Return the rendered text, wrapped in the effective layout.

        Parsed output is computed once and cached; ``parse=False`` always
        re-reads the raw files and never touches the cache.
        """
        if parse and self._content is not None:
            return self._content
        output = self._renderer.render(self, parse=parse)
        if parse:
            self._content = output
        return output

    def render_or_fail(self) -> str:
        """Render, letting an ExecutionFault reach the caller."""
        return self.content()

    def render_or_diagnostic(self) -> str:
        """Render, replacing an ExecutionFault with diagnostic text."""
        try:
            return self.content()
        except ExecutionFault as fault:
            return report_fault(self._name, fault, logger=self._log)

    def is_rendered(self) -> bool:
        return self._content is not None

    def clear_cached_content(self) -> 'Template':
        self._content = None
        return self

    def __str__(self) -> str:
        return self.render_or_diagnostic()

    def __repr__(self) -> str:
        return f"<Template {self._name!r} layout={self._layout!r} rendered={self.is_rendered()}>"
