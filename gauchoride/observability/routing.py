from __future__ import annotations

from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute

from gauchoride.observability.request_logging import HandlerInfo, get_request_logger


class LoggedRoute(APIRoute):
    """APIRoute that runs the request logger before every handler call.

    Use with ``APIRouter(route_class=LoggedRoute)``.
    """

    @property
    def handler_info(self) -> HandlerInfo:
        return HandlerInfo.for_endpoint(self.endpoint)

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()
        # Resolved once at registration; the endpoint never changes afterwards.
        handler_info = self.handler_info

        async def route_handler(request: Request) -> Response:
            get_request_logger().before_handler(handler_info)
            return await original_route_handler(request)

        return route_handler
