from __future__ import annotations

from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor, MonitorStatus
from alertbridge.schemas.notification import (
    NotificationConfig,
    NotificationResult,
    NotificationSendRequest,
    PrimaryBaseURL,
    SlackNotificationConfig,
)

__all__ = [
    "MonitorStatus",
    "MonitorDescriptor",
    "HeartbeatDescriptor",
    "NotificationConfig",
    "SlackNotificationConfig",
    "NotificationSendRequest",
    "NotificationResult",
    "PrimaryBaseURL",
]
