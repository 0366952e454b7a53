from __future__ import annotations

"""
Configuration registry for template settings.

This module exposes:
  * `ConfigRegistry`: holds the effective `TemplateConfig` and applies
    partial merges (only supplied keys are overwritten).
  * `get_global_config_registry`: process-wide registry used when a Template
    or App is built without an explicit one.

The registry performs a type-shape check only (unknown keys are rejected).
Paths are never touched here; a wrong path surfaces later as a
`ResolutionFailure` when the template is evaluated.
"""

import os
from contextlib import contextmanager
from dataclasses import fields, replace
from typing import Any, Iterator, Mapping, Optional, Union

from tplview.core.errors import ConfigError
from tplview.core.models import TemplateConfig
from tplview.core.interfaces.logging import LoggerLikeProtocol
from tplview.logging.helpers import get_logger

ConfigLike = Union[TemplateConfig, Mapping[str, Any]]

_KEYS = frozenset(f.name for f in fields(TemplateConfig))

_ENV_KEYS = {
    'TPLVIEW_TEMPLATE_PATH': 'path',
    'TPLVIEW_LAYOUT_PATH': 'path_layouts',
    'TPLVIEW_AUTO_LAYOUT': 'auto_layout',
}


class ConfigRegistry:
    """Mutable holder of the effective TemplateConfig.

    Snapshots are immutable `TemplateConfig` instances, so `snapshot()` and
    `restore()` give callers (tests in particular) an explicit save/restore
    contract instead of implicit global cleanup.
    """

    def __init__(
        self,
        defaults: Optional[ConfigLike] = None,
        *,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('config')
        self._defaults = self._apply(TemplateConfig(), defaults)
        self._current = self._defaults

    @classmethod
    def from_env(cls, *, logger: Optional[LoggerLikeProtocol] = None) -> 'ConfigRegistry':
        """Build a registry whose defaults honour the TPLVIEW_* variables."""
        seeded = {key: os.environ[var] for var, key in _ENV_KEYS.items() if os.getenv(var)}
        return cls(seeded, logger=logger)

    @staticmethod
    def _normalize(partial: Optional[ConfigLike]) -> dict:
        if partial is None:
            return {}
        if isinstance(partial, TemplateConfig):
            return {f.name: getattr(partial, f.name) for f in fields(TemplateConfig)}
        if not isinstance(partial, Mapping):
            raise ConfigError(f"configuration must be a mapping, got {type(partial).__name__}")
        unknown = sorted(set(partial) - _KEYS)
        if unknown:
            raise ConfigError(f"unknown template configuration keys: {', '.join(unknown)}")
        return dict(partial)

    @classmethod
    def _apply(cls, base: TemplateConfig, partial: Optional[ConfigLike]) -> TemplateConfig:
        values = cls._normalize(partial)
        if 'auto_layout' in values and not values['auto_layout']:
            values['auto_layout'] = None
        return replace(base, **values) if values else base

    def get(self) -> TemplateConfig:
        """Return the current effective configuration."""
        return self._current

    def merge(self, partial: ConfigLike) -> TemplateConfig:
        """Overwrite only the keys present in *partial* and return the result."""
        self._current = self._apply(self._current, partial)
        self._log.debug('template config merged → %r', self._current)
        return self._current

    def snapshot(self) -> TemplateConfig:
        return self._current

    def restore(self, snapshot: TemplateConfig) -> None:
        self._current = snapshot

    def reset(self) -> TemplateConfig:
        """Drop every merge and return to the registry defaults."""
        self._current = self._defaults
        return self._current

    @contextmanager
    def override(self, **values: Any) -> Iterator[TemplateConfig]:
        """Temporarily merge *values*; the previous snapshot is restored on exit."""
        saved = self.snapshot()
        try:
            yield self.merge(values)
        finally:
            self.restore(saved)


_GLOBAL_REGISTRY: Optional[ConfigRegistry] = None


def get_global_config_registry(logger: Optional[LoggerLikeProtocol] = None) -> ConfigRegistry:
    global _GLOBAL_REGISTRY
    if _GLOBAL_REGISTRY is None:
        _GLOBAL_REGISTRY = ConfigRegistry.from_env(logger=logger)
    return _GLOBAL_REGISTRY
