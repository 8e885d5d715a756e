from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestInfo:
    method: str
    uri: str


current_request: ContextVar[RequestInfo | None] = ContextVar("current_request", default=None)


def get_current_request() -> RequestInfo | None:
    """Return the request being handled, or None outside an HTTP request."""

    return current_request.get()
