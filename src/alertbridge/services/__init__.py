from __future__ import annotations

from alertbridge.services.settings_service import (
    GENERAL,
    PRIMARY_BASE_URL,
    DatabaseSettingsStore,
    InMemorySettingsStore,
    SettingsStore,
    get_primary_base_url,
)

__all__ = [
    "GENERAL",
    "PRIMARY_BASE_URL",
    "SettingsStore",
    "InMemorySettingsStore",
    "DatabaseSettingsStore",
    "get_primary_base_url",
]
