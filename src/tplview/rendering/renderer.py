"""
Renderer component for tplview.

This module provides:
  • LayoutRenderer – runs a Template's file through its script executor and
    wraps the output in the effective layout, recursively.

Notes
-----
• The layout decision is taken after the child file has been evaluated, so a
  template may pick (or drop) its layout while it runs.
• A layout is rendered as a transient Template bound to the child's
  variables plus the reserved ``yield`` variable. It starts with its own
  layout disabled; further nesting happens only when a layout file asks for
  it explicitly, and the chain is cut at MAX_LAYOUT_DEPTH.
• In raw mode nothing is evaluated: the result is the raw text of the
  outermost file, i.e. the layout with its yield marker left literal.
"""

from typing import TYPE_CHECKING, Optional

from tplview.constants import MAX_LAYOUT_DEPTH
from tplview.core.errors import ExecutionFault
from tplview.core.interfaces.logging import LoggerLikeProtocol
from tplview.logging.helpers import get_logger, trace_render

if TYPE_CHECKING:  # pragma: no cover
    from tplview.rendering.template import Template


class LayoutRenderer:
    """Evaluate a Template and compose it into its layout chain."""

    def __init__(
        self,
        *,
        max_depth: int = MAX_LAYOUT_DEPTH,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._max_depth = max_depth
        self._log = logger or get_logger('render')

    def render(self, template: 'Template', *, parse: bool = True) -> str:
        """Return the final text for *template* (layout-wrapped when applicable)."""
        return self._compose(template, parse=parse, depth=0)

    def _compose(self, template: 'Template', *, parse: bool, depth: int) -> str:
        if depth > self._max_depth:
            raise ExecutionFault(
                f"layout chain exceeds {self._max_depth} levels",
                template=template.file(),
            )

        path = template.full_path()
        trace_render(self._log, 'render', template=template.file(), path=str(path), parse=parse)
        output = template.executor.execute(path, template.bindings(), parse=parse)

        layout_name = template.effective_layout()
        if not layout_name:
            return output

        self._log.debug('wrapping %r in layout %r', template.file(), layout_name)
        layout = template.layout_template(layout_name, output)
        return self._compose(layout, parse=parse, depth=depth + 1)
