from __future__ import annotations

"""Exception hierarchy for tplview.

Rendering failures are always reported as :class:`ExecutionFault` (or its
:class:`ResolutionFailure` subclass) so callers can catch a single type,
whatever the script executor raised underneath.
"""

from pathlib import Path
from typing import Optional


class TplviewError(Exception):
    """Base class for every error raised by tplview."""


class ExecutionFault(TplviewError):
    """Raised when a template file cannot be evaluated.

    Attributes:
        template: Name (or path) of the template being rendered, if known.
        cause: The underlying exception, also chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        template: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.template = template
        self.cause = cause

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ''


class ResolutionFailure(ExecutionFault):
    """Raised when the file for a template name does not exist."""

    def __init__(
        self,
        path: Path | str,
        *,
        template: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.path = Path(path)
        super().__init__(
            f"template file not found: {self.path}",
            template=template,
            cause=cause,
        )


class ConfigError(TplviewError, ValueError):
    """Raised when a configuration merge carries unknown keys."""


class RouteNotFound(TplviewError, LookupError):
    """Raised when no handler is registered for a request path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"no route for path {path!r}")
