from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from alertbridge.alerting import get_provider_class
from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor
from alertbridge.schemas.notification import NotificationConfig
from alertbridge.services.settings_service import SettingsStore
from alertbridge.utils.exceptions import NotificationDeliveryError

logger = structlog.get_logger(__name__)

TEST_MESSAGE = "Test message"


class NotificationService:
    """Dispatch notifications to the provider matching their type."""

    def __init__(
        self,
        settings_store: SettingsStore,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.settings_store = settings_store
        self.http_client = http_client
        self.timeout = timeout

    async def send(
        self,
        config: NotificationConfig | Mapping[str, Any],
        message: str,
        monitor: MonitorDescriptor | None = None,
        heartbeat: HeartbeatDescriptor | None = None,
    ) -> str:
        """
        Send a notification through its provider.

        Args:
            config: Notification form, ``type`` selects the provider
            message: Message text
            monitor: Monitor the alert is about, if any
            heartbeat: Status snapshot that triggered the alert, if any

        Returns:
            Acknowledgement message from the provider

        Raises:
            UnknownProviderError: If no provider handles ``config.type``
            NotificationDeliveryError: If delivery failed
        """
        if not isinstance(config, NotificationConfig):
            config = NotificationConfig.model_validate(config)

        provider_cls = get_provider_class(config.type)
        provider = provider_cls(
            settings_store=self.settings_store,
            http_client=self.http_client,
            timeout=self.timeout,
        )

        try:
            result = await provider.send(config, message, monitor, heartbeat)
        except NotificationDeliveryError as exc:
            logger.error(
                "notification_failed",
                provider=config.type,
                notification=config.name,
                status_code=exc.status_code,
                error=str(exc),
            )
            raise

        logger.info(
            "notification_sent",
            provider=config.type,
            notification=config.name,
            monitor_id=monitor.id if monitor else None,
        )
        return result

    async def send_test(self, config: NotificationConfig | Mapping[str, Any]) -> str:
        """Send a context-free test message."""
        return await self.send(config, TEST_MESSAGE)
