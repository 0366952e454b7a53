from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from tplview.core.models import TemplateConfig


@runtime_checkable
class PathResolverProtocol(Protocol):
    def file_name(self, name: str, config: TemplateConfig, fmt: Optional[str] = None) -> str:
        ...

    def directory(self, override: Optional[str], root: str) -> str:
        ...

    def full_path(self, directory: str, file_name: str) -> Path:
        ...
