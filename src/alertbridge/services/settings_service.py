from __future__ import annotations

from typing import Any, Protocol

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from alertbridge.models.setting import Setting

logger = structlog.get_logger(__name__)

PRIMARY_BASE_URL = "primaryBaseURL"
GENERAL = "general"


class SettingsStore(Protocol):
    """Persistent key/value settings shared across notifications."""

    async def get(self, key: str) -> Any | None:
        ...

    async def set(self, key: str, value: Any, type_: str | None = None) -> None:
        ...


class InMemorySettingsStore:
    """Dict-backed settings store."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self.values: dict[str, Any] = dict(initial or {})
        self.types: dict[str, str | None] = {}

    async def get(self, key: str) -> Any | None:
        return self.values.get(key)

    async def set(self, key: str, value: Any, type_: str | None = None) -> None:
        self.values[key] = value
        self.types[key] = type_


class DatabaseSettingsStore:
    """Settings store backed by the ``setting`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get(self, key: str) -> Any | None:
        """
        Read a setting.

        Args:
            key: Setting key

        Returns:
            Stored value, or None if the key is unset
        """
        async with self.session_factory() as session:
            result = await session.execute(select(Setting.value).where(Setting.key == key))
            return result.scalar_one_or_none()

    async def set(self, key: str, value: Any, type_: str | None = None) -> None:
        """
        Insert or update a setting.

        Args:
            key: Setting key
            value: JSON-serializable value
            type_: Optional setting group, e.g. "general"
        """
        async with self.session_factory() as session:
            result = await session.execute(select(Setting).where(Setting.key == key))
            setting = result.scalar_one_or_none()

            if setting is None:
                session.add(Setting(key=key, value=value, type=type_))
            else:
                setting.value = value
                if type_ is not None:
                    setting.type = type_

            await session.commit()

        logger.info("setting_saved", key=key, type=type_)


async def get_primary_base_url(store: SettingsStore) -> str | None:
    """Primary base URL without a trailing slash, or None when unset."""
    value = await store.get(PRIMARY_BASE_URL)
    if not value:
        return None
    return str(value).rstrip("/")
