from __future__ import annotations

"""
Minimal hook registry for the response pipeline.

This registry provides:
- `register(event, callback)`
- `hooks(event)`
- `dispatch(event, *args)`

Event names are normalized (case-insensitive, '-' and '_' equivalent) and
the camel-case spelling ``beforeResponseHandler`` is accepted as an alias of
``before_response``. Callbacks run in registration order; an exception
raised by a callback propagates to the pipeline, which turns it into an
error response.
"""

from typing import Any, Callable, Dict, List, Optional

from tplview.core.interfaces.logging import LoggerLikeProtocol
from tplview.logging.helpers import get_logger

BEFORE_RESPONSE = 'before_response'

_ALIASES: Dict[str, str] = {
    'beforeresponsehandler': BEFORE_RESPONSE,
    'beforeresponse': BEFORE_RESPONSE,
    'before_response_handler': BEFORE_RESPONSE,
}


def normalize_event(event: str) -> str:
    key = (event or '').strip().lower().replace('-', '_')
    if not key:
        raise ValueError('event name must be non-empty')
    return _ALIASES.get(key, key)


class HookRegistry:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._hooks: Dict[str, List[Callable[..., Any]]] = {}
        self._log = logger or get_logger('hooks')

    def register(self, event: str, callback: Callable[..., Any]) -> None:
        if not callable(callback):
            raise TypeError(f'hook for {event!r} is not callable')
        self._hooks.setdefault(normalize_event(event), []).append(callback)

    def hooks(self, event: str) -> List[Callable[..., Any]]:
        return list(self._hooks.get(normalize_event(event), ()))

    def dispatch(self, event: str, *args: Any) -> int:
        """Invoke every callback registered for *event*; return how many ran."""
        callbacks = self.hooks(event)
        for fn in callbacks:
            self._log.debug('→ hook %s: %r', event, fn)
            fn(*args)
        return len(callbacks)
