from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from alertbridge.alerting.base import OK_MESSAGE, NotificationProvider
from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor
from alertbridge.schemas.notification import NotificationConfig, SlackNotificationConfig
from alertbridge.services.settings_service import (
    GENERAL,
    PRIMARY_BASE_URL,
    SettingsStore,
    get_primary_base_url,
)
from alertbridge.utils.exceptions import to_delivery_error
from alertbridge.utils.monitor_links import extract_address, monitor_relative_url

logger = structlog.get_logger(__name__)

ALERT_TITLE = "Alertbridge Alert"
CHANNEL_MENTION = " <!channel>"
COLOR_UP = "#2eb886"
COLOR_DOWN = "#e01e5a"


class SlackNotificationProvider(NotificationProvider):
    """Send notifications to a Slack incoming webhook."""

    name = "slack"

    def __init__(
        self,
        settings_store: SettingsStore,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.settings_store = settings_store
        self.http_client = http_client
        self.timeout = timeout

    @staticmethod
    def build_actions(
        base_url: str | None, monitor: MonitorDescriptor | None
    ) -> list[dict[str, Any]]:
        """
        Build the buttons of a rich message.

        Args:
            base_url: Primary base URL of the dashboard, may be unset
            monitor: Monitor the alert is about

        Returns:
            Dashboard button first, then site button, each only when resolvable
        """
        actions: list[dict[str, Any]] = []

        if base_url and monitor is not None:
            actions.append(
                {
                    "type": "button",
                    "text": {"type": "plain_text", "text": "Visit Alertbridge"},
                    "value": "Alertbridge",
                    "url": base_url + monitor_relative_url(monitor.id),
                }
            )

        address = extract_address(monitor)
        if address:
            actions.append(
                {
                    "type": "button",
                    "text": {"type": "plain_text", "text": "Visit site"},
                    "value": "Site",
                    "url": address,
                }
            )

        return actions

    @classmethod
    def build_blocks(
        cls,
        base_url: str | None,
        monitor: MonitorDescriptor | None,
        heartbeat: HeartbeatDescriptor,
        title: str,
        message: str,
    ) -> list[dict[str, Any]]:
        """
        Build the header, details and actions blocks of a rich message.

        Args:
            base_url: Primary base URL of the dashboard, may be unset
            monitor: Monitor the alert is about
            heartbeat: Status snapshot that triggered the alert
            title: Header text
            message: Message body

        Returns:
            Slack blocks in display order
        """
        blocks: list[dict[str, Any]] = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": title},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Message*\n{message}"},
                    {
                        "type": "mrkdwn",
                        "text": f"*Time ({heartbeat.timezone})*\n{heartbeat.local_date_time}",
                    },
                ],
            },
        ]

        actions = cls.build_actions(base_url, monitor)
        if actions:
            blocks.append({"type": "actions", "elements": actions})

        return blocks

    async def deprecate_button_url(self, url: str) -> None:
        """
        Move the legacy ``slackbutton`` URL into the primary base URL setting.

        Does nothing when a primary base URL is already configured.
        """
        current = await self.settings_store.get(PRIMARY_BASE_URL)

        if not current:
            logger.warning("slack_button_url_migrated", primary_base_url=url)
            await self.settings_store.set(PRIMARY_BASE_URL, url, GENERAL)
        else:
            logger.debug("slack_button_url_migration_skipped")

    async def send(
        self,
        config: NotificationConfig | Mapping[str, Any],
        message: str,
        monitor: MonitorDescriptor | None = None,
        heartbeat: HeartbeatDescriptor | None = None,
    ) -> str:
        """
        Send a message to Slack.

        Without a heartbeat a plain text message is posted. With one, the
        message gets a coloured attachment with header, details and buttons.

        Raises:
            NotificationDeliveryError: If the webhook request failed
        """
        slack_config = SlackNotificationConfig.from_config(config)

        if slack_config.channel_notify:
            message += CHANNEL_MENTION

        try:
            if heartbeat is None:
                await self._post(
                    slack_config.webhook_url or "", self._payload(slack_config, message)
                )
                logger.info("slack_notification_sent", channel=slack_config.channel, rich=False)
                return OK_MESSAGE

            base_url = await get_primary_base_url(self.settings_store)

            data = self._payload(slack_config, f"{ALERT_TITLE}\n{message}")
            data["attachments"] = [
                {
                    "color": COLOR_UP if heartbeat.is_up else COLOR_DOWN,
                    "blocks": self.build_blocks(
                        base_url, monitor, heartbeat, ALERT_TITLE, message
                    ),
                }
            ]

            if slack_config.button_url:
                try:
                    await self.deprecate_button_url(slack_config.button_url)
                except Exception as exc:
                    logger.error(
                        "slack_button_url_migration_failed",
                        error=str(exc),
                        exc_info=True,
                    )

            await self._post(slack_config.webhook_url or "", data)
            logger.info(
                "slack_notification_sent",
                channel=slack_config.channel,
                rich=True,
                monitor_id=monitor.id if monitor else None,
                status=heartbeat.status.name,
            )
            return OK_MESSAGE

        except httpx.HTTPError as exc:
            logger.error(
                "slack_notification_failed",
                channel=slack_config.channel,
                error=str(exc),
            )
            raise to_delivery_error(self.name, exc) from exc

    @staticmethod
    def _payload(config: SlackNotificationConfig, text: str) -> dict[str, Any]:
        data: dict[str, Any] = {
            "text": text,
            "channel": config.channel,
            "username": config.username,
            "icon_emoji": config.icon_emoji,
        }
        # Unset form fields are left out rather than sent as null
        return {key: value for key, value in data.items() if value is not None}

    async def _post(self, url: str, payload: dict[str, Any]) -> httpx.Response:
        if self.http_client is not None:
            response = await self.http_client.post(url, json=payload)
        else:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.post(url, json=payload)

        response.raise_for_status()
        return response
