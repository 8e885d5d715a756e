"""Forward unmatched GETs to the frontend dev server.

Lets the backend serve the UI during development without CORS. Registered
last so every API route takes precedence; kept off the request log.
"""

from __future__ import annotations

import httpx
import structlog
from fastapi import APIRouter, HTTPException, Request, Response

from gauchoride.config import get_settings
from gauchoride.observability.routing import LoggedRoute

router = APIRouter(tags=["frontend"], route_class=LoggedRoute, include_in_schema=False)

_client: httpx.AsyncClient | None = None


def set_proxy_client(client: httpx.AsyncClient | None) -> None:
    global _client
    _client = client


def get_proxy_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        settings = get_settings()
        _client = httpx.AsyncClient(base_url=settings.frontend_dev_url, timeout=settings.frontend_proxy_timeout)
    return _client


async def close_proxy_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


@router.get("/{path:path}")
async def proxy_frontend(path: str, request: Request) -> Response:
    client = get_proxy_client()
    try:
        upstream = await client.get(f"/{path}", params=list(request.query_params.multi_items()))
    except httpx.HTTPError as exc:
        structlog.get_logger("frontend_proxy").warning(
            "frontend_unreachable",
            path=f"/{path}",
            error=str(exc),
        )
        raise HTTPException(status_code=502, detail="Frontend dev server unavailable") from exc

    headers = {}
    content_type = upstream.headers.get("content-type")
    if content_type:
        headers["content-type"] = content_type
    return Response(content=upstream.content, status_code=upstream.status_code, headers=headers)
