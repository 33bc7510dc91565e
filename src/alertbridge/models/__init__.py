from __future__ import annotations

from alertbridge.models.base import Base
from alertbridge.models.setting import Setting

__all__ = [
    "Base",
    "Setting",
]
