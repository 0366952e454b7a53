from __future__ import annotations

"""Small logging helpers to standardize tplview logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'tplview' logger.
    - get_logger: Namespaced logger factory ('tplview.*').
    - trace_render utilities gated by TPLVIEW_TRACE_RENDER.
"""

import logging
import os
from typing import Optional, TextIO

from tplview.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'tplview.render').
        - msg: Formatted message string.
        - version: tplview.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the tplview version without importing the package eagerly.

        Returns:
            str: Version string or 'unknown' if it cannot be determined.
        """
        try:
            from tplview import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("TPLVIEW_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


_BASE_HANDLER_FLAG = "_tplview_base"


def _make_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JsonLogFormatter()
    return logging.Formatter("%(levelname)s: %(message)s")


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'tplview' logger and return it.

    The stream handler is installed once. Later calls reuse it and only
    update the level, the formatter and (when given) the stream, so
    switching between plain and JSON output within one process works.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("tplview")
    base.setLevel(level)
    base.propagate = False

    handler = next((h for h in base.handlers if getattr(h, _BASE_HANDLER_FLAG, False)), None)
    if handler is None:
        import sys as _sys

        handler = logging.StreamHandler(stream or _sys.stderr)
        setattr(handler, _BASE_HANDLER_FLAG, True)
        base.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    handler.setFormatter(_make_formatter(json_logs))
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'tplview'."""
    if not name or name == "tplview":
        return logging.getLogger("tplview")
    if name.startswith("tplview"):
        return logging.getLogger(name)
    return logging.getLogger(f"tplview.{name}")


def is_trace_render_enabled() -> bool:
    """Check if render tracing is enabled via env flag."""
    return os.getenv("TPLVIEW_TRACE_RENDER") == "1"


def trace_render(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity render traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context attached to the record.
    """
    if not is_trace_render_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
