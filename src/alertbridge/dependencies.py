from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from alertbridge.config import Settings, get_settings
from alertbridge.database import AsyncSessionLocal
from alertbridge.services.notification_service import NotificationService
from alertbridge.services.settings_service import DatabaseSettingsStore, SettingsStore


def get_settings_store() -> SettingsStore:
    """Dependency to get the persistent settings store."""
    return DatabaseSettingsStore(AsyncSessionLocal)


SettingsStoreDep = Annotated[SettingsStore, Depends(get_settings_store)]


def get_notification_service(
    store: SettingsStoreDep,
    settings: Settings = Depends(get_settings),
) -> NotificationService:
    """Dependency to get the notification service."""
    return NotificationService(settings_store=store, timeout=settings.http_timeout)


NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]
