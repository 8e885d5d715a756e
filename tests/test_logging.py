import logging

import pytest

from gauchoride.config import get_settings
from gauchoride.main import create_app
from gauchoride.observability.logging import SERVER_LOGGERS, configure_logging, resolve_level


@pytest.fixture
def restore_level():
    yield
    configure_logging(logging.INFO)


def test_each_app_applies_its_own_log_level(monkeypatch: pytest.MonkeyPatch, restore_level) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    create_app()
    assert logging.getLogger().level == logging.DEBUG
    assert all(logging.getLogger(name).level == logging.DEBUG for name in SERVER_LOGGERS)

    monkeypatch.setenv("LOG_LEVEL", "warning")
    get_settings.cache_clear()
    create_app()
    assert logging.getLogger().level == logging.WARNING
    assert all(logging.getLogger(name).level == logging.WARNING for name in SERVER_LOGGERS)


def test_handler_is_shared_across_calls(restore_level) -> None:
    configure_logging("INFO")
    handler = logging.getLogger().handlers[0]
    configure_logging("ERROR")

    assert logging.getLogger().handlers == [handler]
    assert logging.getLogger("uvicorn.access").handlers == [handler]
    assert logging.getLogger("uvicorn.access").propagate is False


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Error ") == logging.ERROR
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level("chatty") == logging.INFO
