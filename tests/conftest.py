from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from gauchoride.api.frontend_proxy import set_proxy_client
from gauchoride.config import get_settings
from gauchoride.main import create_app
from gauchoride.observability.request_logging import set_request_logger


def _frontend_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/missing":
        return httpx.Response(404, text="not found", headers={"content-type": "text/plain"})
    return httpx.Response(
        200,
        text=f"<html>frontend {request.url.path}</html>",
        headers={"content-type": "text/html; charset=utf-8"},
    )


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("START_QTR", "20231")
    monkeypatch.setenv("END_QTR", "20234")
    monkeypatch.setenv("SOURCE_REPO", "https://github.com/ucsb-cs156/proj-gauchoride")
    monkeypatch.setenv("GIT_COMMIT_ID", "abc1234")
    monkeypatch.setenv("GIT_COMMIT_MESSAGE", "Fix footer layout")
    for name in ("GIT_COMMIT_URL", "REQUEST_LOG_STOPLIST", "SHOW_DOCS_LINK", "DB_CONSOLE_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    set_proxy_client(
        httpx.AsyncClient(
            transport=httpx.MockTransport(_frontend_handler),
            base_url="http://frontend.test",
        )
    )

    yield

    set_proxy_client(None)
    set_request_logger(None)
    get_settings.cache_clear()


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
