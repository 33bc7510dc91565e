from __future__ import annotations

from alertbridge.api.v1 import notifications, settings

__all__ = [
    "notifications",
    "settings",
]
