from __future__ import annotations

import uuid
from typing import Any, Callable

import structlog
from starlette.datastructures import Headers, MutableHeaders

from gauchoride.observability.request_context import RequestInfo, current_request


class RequestContextMiddleware:
    """Binds request_id/method/path for logging and exposes the ambient request."""

    header_name = "X-Request-ID"

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(self.header_name) or str(uuid.uuid4())
        method = scope.get("method", "")
        path = scope.get("path", "")
        raw_path = scope.get("raw_path")
        # Percent-encoded, as the client sent it; never includes the query string.
        uri = raw_path.split(b"?", 1)[0].decode("latin-1") if raw_path else path

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=path,
            method=method,
        )
        token = current_request.set(RequestInfo(method=method, uri=uri))
        # Read back by the catch-all error handler, which runs outside this middleware.
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_wrapper(message: dict[str, Any]) -> None:
            if message.get("type") == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers[self.header_name] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            current_request.reset(token)
            structlog.contextvars.clear_contextvars()
