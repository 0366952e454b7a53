from __future__ import annotations

"""
Minimal response pipeline around tplview Templates.

The App maps request paths onto handlers, lets ``before_response`` hooks
adjust the handler's (still unrendered) result, and produces the response
body. Rendering faults never escape `run`: an ExecutionFault, or any other
exception raised by a handler or hook, becomes a 500 response with a fixed
body, and an unknown path becomes a 404.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from tplview.config.registry import ConfigRegistry
from tplview.constants import NOT_FOUND_BODY, SERVER_ERROR_BODY
from tplview.core.errors import ExecutionFault, RouteNotFound
from tplview.core.interfaces.hooks import HookProtocol
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.core.models import Request, Response
from tplview.logging.helpers import get_logger
from tplview.rendering.template import Template
from tplview.runtime.container import ViewBuilder, ViewConfig
from tplview.runtime.hooks import BEFORE_RESPONSE, HookRegistry

Handler = Callable[[Request], Any]


def normalize_path(path: str) -> str:
    """'/test/' and 'test' designate the same route."""
    return '/'.join(seg for seg in (path or '').split('/') if seg)


class App:
    """Route requests to handlers and turn their results into Responses.

    Example:
        >>> app = App({'template': {'path': 'views/'}})
        >>> app.path('home', lambda request: app.template('home'))
        >>> app.run(Request('GET', '/home/')).status
        200
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        registry: Optional[ConfigRegistry] = None,
        executor: Optional[ScriptExecutorProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('app')
        template_cfg = dict((config or {}).get('template') or {})
        builder = ViewBuilder.from_config(
            ViewConfig(logger=self._log, registry=registry, template=template_cfg, executor=executor)
        )
        self._templates = builder.build()
        self._routes: Dict[str, Handler] = {}
        self._hooks = HookRegistry(logger=self._log)

    @property
    def registry(self) -> ConfigRegistry:
        return self._templates.registry

    # Registration ------------------------------------------------------------

    def path(self, path: str, handler: Optional[Handler] = None) -> Any:
        """Register *handler* for *path*; usable as a decorator."""
        if handler is None:
            def _decorator(fn: Handler) -> Handler:
                self.path(path, fn)
                return fn
            return _decorator
        self._routes[normalize_path(path)] = handler
        return handler

    route = path

    def on(self, event: str, callback: Optional[Callable[..., Any]] = None) -> Any:
        """Register a hook for *event*; usable as a decorator."""
        if callback is None:
            def _decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
                self._hooks.register(event, fn)
                return fn
            return _decorator
        self._hooks.register(event, callback)
        return callback

    def before_response(self, callback: HookProtocol) -> Any:
        return self.on(BEFORE_RESPONSE, callback)

    def template(self, name: str, variables: Optional[Mapping[str, Any]] = None) -> Template:
        """Return an unrendered Template wired to this app's registry and executor."""
        return self._templates(name, variables)

    # Dispatch ----------------------------------------------------------------

    def _match(self, path: str) -> Handler:
        key = normalize_path(path)
        try:
            return self._routes[key]
        except KeyError:
            raise RouteNotFound(key) from None

    def run(self, request: Union[Request, str], path: Optional[str] = None) -> Response:
        """Dispatch *request* (or a method/path pair) and return the Response."""
        if not isinstance(request, Request):
            request = Request(request, path or '')

        try:
            handler = self._match(request.path)
        except RouteNotFound as exc:
            self._log.warning('⚠  %s %s: %s', request.method, request.path, exc)
            return Response(status=404, body=NOT_FOUND_BODY)

        response = Response()
        try:
            raw = handler(request)
            response.raw = raw
            self._hooks.dispatch(BEFORE_RESPONSE, request, response, raw)
            self._finalize(response, raw)
        except ExecutionFault as fault:
            self._log.error('✘ %s %s: template failed: %s', request.method, request.path, fault)
            return self._server_error(response)
        except Exception as exc:  # noqa: BLE001 - handler errors must not crash the host
            self._log.error('✘ %s %s: unhandled error: %s', request.method, request.path, exc)
            return self._server_error(response)
        return response

    @staticmethod
    def _finalize(response: Response, raw: Any) -> None:
        if isinstance(raw, Response):
            response.status = raw.status
            response.headers.update(raw.headers)
            response.body = raw.body
        elif isinstance(raw, Template):
            response.body = raw.render_or_fail()
        elif raw is None:
            response.body = ''
        else:
            response.body = str(raw)

    @staticmethod
    def _server_error(response: Response) -> Response:
        response.status = 500
        response.body = SERVER_ERROR_BODY
        return response
