"""Log which handler serves each request.

One line per request, emitted just before the handler runs::

    ===== GET /api/systemInfo handled by system_info in gauchoride.api.system_info

Handlers whose declaring type is on the stoplist (e.g. the frontend proxy,
which would otherwise log every static asset) are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

import structlog

from gauchoride.observability.request_context import get_current_request


HANDLER_LOG_FORMAT = "===== {method} {uri} handled by {function_name} in {declaring_type}"


@dataclass(frozen=True)
class HandlerInfo:
    declaring_type: str
    function_name: str

    @classmethod
    def for_endpoint(cls, endpoint: Callable[..., Any]) -> HandlerInfo:
        module = getattr(endpoint, "__module__", None) or ""
        qualname = getattr(endpoint, "__qualname__", None) or getattr(endpoint, "__name__", "")
        # Callable instances and partials carry no __name__ of their own.
        name = getattr(endpoint, "__name__", None) or type(endpoint).__name__

        # Methods: "Controller.get_users" -> declaring type "<module>.Controller".
        owner = qualname.rpartition(".")[0]
        if "<locals>" in owner:
            owner = ""
        declaring_type = f"{module}.{owner}" if module and owner else module or owner
        return cls(declaring_type=declaring_type, function_name=name)


def format_handler_line(method: str, uri: str, function_name: str, declaring_type: str) -> str:
    return HANDLER_LOG_FORMAT.format(
        method=method,
        uri=uri,
        function_name=function_name,
        declaring_type=declaring_type,
    )


class RequestLogger:
    def __init__(self, stoplist: Iterable[str] = ()) -> None:
        self._stoplist = frozenset(stoplist)

    @property
    def stoplist(self) -> frozenset[str]:
        return self._stoplist

    def before_handler(self, handler: HandlerInfo) -> None:
        request = get_current_request()
        if request is None:
            return
        if handler.declaring_type in self._stoplist:
            return

        structlog.get_logger("request").info(
            format_handler_line(
                method=request.method,
                uri=request.uri,
                function_name=handler.function_name,
                declaring_type=handler.declaring_type,
            )
        )


_request_logger: RequestLogger | None = None


def set_request_logger(request_logger: RequestLogger | None) -> None:
    global _request_logger
    _request_logger = request_logger


def get_request_logger() -> RequestLogger:
    global _request_logger
    if _request_logger is None:
        _request_logger = RequestLogger()
    return _request_logger
