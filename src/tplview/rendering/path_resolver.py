from __future__ import annotations
"""
Path resolver utilities.

Maps a template name onto its file on disk:

- `file_name` appends the ``.{format}.{extension}`` pattern to the name.
- `directory` picks the instance override over the configured root.
- `full_path` joins both; existence is checked by the script executor.

All three are pure functions of their arguments and never touch the disk.
"""

from pathlib import Path
from typing import Optional

from tplview.core.interfaces.fs import PathResolverProtocol
from tplview.core.models import TemplateConfig


class TemplatePathResolver(PathResolverProtocol):
    """Default resolver for template and layout files."""

    def file_name(self, name: str, config: TemplateConfig, fmt: Optional[str] = None) -> str:
        """Return *name* followed by the configured format and extension."""
        parts = [name, fmt or config.default_format, config.default_extension]
        return '.'.join(p for p in parts if p)

    def directory(self, override: Optional[str], root: str) -> str:
        """Return *override* when set (even to ""), otherwise the configured *root*."""
        return root if override is None else override

    def full_path(self, directory: str, file_name: str) -> Path:
        return Path(directory).expanduser() / file_name


DefaultPathResolver = TemplatePathResolver
