from __future__ import annotations

from alertbridge.utils.exceptions import (
    AlertBridgeException,
    NotificationDeliveryError,
    UnknownProviderError,
    to_delivery_error,
)
from alertbridge.utils.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "AlertBridgeException",
    "NotificationDeliveryError",
    "UnknownProviderError",
    "to_delivery_error",
]
