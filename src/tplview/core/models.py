from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TemplateConfig:
    """Effective template settings held by a ConfigRegistry.

    ``auto_layout`` set to ``None``, ``False`` or ``""`` disables the
    registry-level default layout.
    """
    path: str = './templates/'
    path_layouts: str = './templates/layouts/'
    auto_layout: Optional[str] = None
    default_format: str = 'html'
    default_extension: str = 'j2'

    @property
    def auto_layout_name(self) -> Optional[str]:
        return self.auto_layout or None


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Response:
    """Mutable response produced by the App pipeline.

    ``raw`` keeps whatever the route handler returned (a Template, a string
    or another Response) so hooks and callers can inspect it.
    """
    status: int = 200
    body: str = ''
    headers: Dict[str, str] = field(default_factory=dict)
    raw: Any = None

    def content(self) -> str:
        return self.body
