from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from uber_service.config import get_settings
from uber_service.main import create_app
from uber_service.service import UberService


class RecordingLogger:
    """Stands in for the structlog logger; keeps every call in order."""

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def _record(self, level: str, event: str, **fields: Any) -> None:
        self.records.append({"level": level, "event": event, **fields})

    def info(self, event: str, **fields: Any) -> None:
        self._record("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._record("warning", event, **fields)

    def exception(self, event: str, **fields: Any) -> None:
        self._record("error", event, **fields)

    def events(self, name: str) -> list[dict[str, Any]]:
        return [r for r in self.records if r["event"] == name]


class FakeDatabase:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.closed = False

    def describe(self) -> str:
        self.calls.append("describe")
        return "sqlite:///:memory:"

    def close(self) -> None:
        self.calls.append("close")
        self.closed = True


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_FORMAT", "json")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def fake_database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def service(recording_logger: RecordingLogger, fake_database: FakeDatabase) -> UberService:
    return UberService(settings=get_settings(), database=fake_database, logger=recording_logger)


@pytest.fixture
async def api_client(service: UberService) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=create_app(service))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def restore_root_logging() -> None:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
