"""
Pytest configuration and shared fixtures.

Uses SQLite in-memory via aiosqlite for the database settings store, and
httpx.MockTransport in place of the Slack webhook.
"""
from __future__ import annotations

import json
from typing import Any, AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from alertbridge.models.base import Base
from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor, MonitorStatus
from alertbridge.services.settings_service import InMemorySettingsStore

SQLITE_URL = "sqlite+aiosqlite:///:memory:"

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/xxx"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create a fresh in-memory SQLite engine per test function."""
    engine = create_async_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


class WebhookRecorder:
    """Fake webhook endpoint recording every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b"ok"
        self.error: Exception | None = None
        self.on_request: Callable[[httpx.Request], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def webhook() -> WebhookRecorder:
    return WebhookRecorder()


@pytest_asyncio.fixture
async def http_client(webhook: WebhookRecorder) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(webhook.handler)) as client:
        yield client


@pytest.fixture
def slack_config() -> dict[str, Any]:
    return {
        "type": "slack",
        "slackwebhookURL": WEBHOOK_URL,
        "slackchannel": "#ops",
        "slackusername": "bot",
        "slackiconemo": ":bell:",
    }


@pytest.fixture
def http_monitor() -> MonitorDescriptor:
    return MonitorDescriptor(id=42, name="Test API", type="http", url="https://api.example.com/health")


@pytest.fixture
def make_heartbeat() -> Callable[..., HeartbeatDescriptor]:
    """Factory for heartbeat snapshots."""
    def _make(status: MonitorStatus = MonitorStatus.DOWN) -> HeartbeatDescriptor:
        return HeartbeatDescriptor(
            status=status,
            timezone="Europe/Berlin",
            localDateTime="2026-01-01 10:00:00",
            msg="timeout",
        )
    return _make
