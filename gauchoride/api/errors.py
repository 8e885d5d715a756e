from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gauchoride.observability.middleware import RequestContextMiddleware


def install_error_handlers(app: FastAPI) -> None:
    """Register a catch-all handler for unexpected errors."""

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        structlog.get_logger("errors").exception(
            "unhandled_error",
            method=request.method,
            path=request.url.path,
        )
        headers = {}
        # This handler runs outside RequestContextMiddleware, so echo its id here.
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            headers[RequestContextMiddleware.header_name] = request_id
        return JSONResponse(status_code=500, content={"error": "internal_error"}, headers=headers)
