from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor
from alertbridge.schemas.notification import NotificationConfig

OK_MESSAGE = "Sent Successfully."


class NotificationProvider(ABC):
    """Delivers a notification to one kind of chat service."""

    name: str

    @abstractmethod
    async def send(
        self,
        config: NotificationConfig | Mapping[str, Any],
        message: str,
        monitor: MonitorDescriptor | None = None,
        heartbeat: HeartbeatDescriptor | None = None,
    ) -> str:
        """
        Send a notification.

        Args:
            config: Notification form of the target service
            message: Message text
            monitor: Monitor the alert is about, if any
            heartbeat: Status snapshot that triggered the alert, if any

        Returns:
            Acknowledgement message

        Raises:
            NotificationDeliveryError: If the request failed
        """
        pass
