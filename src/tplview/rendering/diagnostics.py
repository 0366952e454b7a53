"""
diagnostics – Turn rendering faults into inert, displayable text.

Used wherever a render has no caller-side fault handler (``str(template)``,
``Template.render_or_diagnostic``). The text names the template and the
fault message; tracebacks are never included.
"""

from typing import Optional

from tplview.constants import DIAGNOSTIC_MARKER
from tplview.core.errors import ExecutionFault
from tplview.core.interfaces.logging import LoggerLikeProtocol
from tplview.logging.helpers import get_logger


def fault_to_text(template_name: str, fault: ExecutionFault) -> str:
    """Return the fixed diagnostic line for *fault* raised by *template_name*."""
    message = fault.message or type(fault.cause or fault).__name__
    return f"{DIAGNOSTIC_MARKER} '{template_name}': {message}"


def report_fault(
    template_name: str,
    fault: ExecutionFault,
    *,
    logger: Optional[LoggerLikeProtocol] = None,
) -> str:
    """Log *fault* and return its diagnostic text."""
    log = logger or get_logger('render')
    log.error('✘ template %r failed: %s', template_name, fault)
    return fault_to_text(template_name, fault)
