from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gauchoride.api.errors import install_error_handlers
from gauchoride.api.frontend_proxy import close_proxy_client
from gauchoride.api.frontend_proxy import router as frontend_proxy_router
from gauchoride.api.system_info import router as system_info_router
from gauchoride.config import get_settings
from gauchoride.observability.logging import configure_logging
from gauchoride.observability.middleware import RequestContextMiddleware
from gauchoride.observability.request_logging import RequestLogger, set_request_logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await close_proxy_client()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    set_request_logger(RequestLogger(stoplist=settings.request_log_stoplist))

    docs_url = "/docs" if settings.show_docs_link else None
    app = FastAPI(title="GauchoRide", version="0.1.0", docs_url=docs_url, redoc_url=None, lifespan=lifespan)
    app.add_middleware(RequestContextMiddleware)
    install_error_handlers(app)

    app.include_router(system_info_router)
    # Catch-all; must stay last.
    app.include_router(frontend_proxy_router)
    return app


app = create_app()
