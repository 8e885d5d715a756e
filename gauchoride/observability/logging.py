from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


# Loggers that should write through our handler instead of their own.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_handler: logging.Handler | None = None


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handler() -> logging.Handler:
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=pre_chain,
        )
    )
    return handler


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route structlog and stdlib records through one JSON stdout handler.

    The handler and structlog processors are built once; the level is applied
    on every call so each app created picks up its own ``LOG_LEVEL``.
    """

    global _handler
    if _handler is None:
        _handler = _build_handler()

    level = resolve_level(level)

    root = logging.getLogger()
    root.handlers = [_handler]
    root.setLevel(level)

    for name in SERVER_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers = [_handler]
        logger.propagate = False
        logger.setLevel(level)
