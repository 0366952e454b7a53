from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from tplview.core.models import Request, Response


@runtime_checkable
class HookProtocol(Protocol):
    """Callback invoked by the response pipeline before the body is produced.

    *raw* is the value returned by the route handler, typically a Template
    that has not been rendered yet; hooks may mutate its bindings or layout.
    """

    def __call__(self, request: Request, response: Response, raw: Any) -> None:
        ...
