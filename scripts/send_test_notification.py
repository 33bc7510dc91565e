#!/usr/bin/env python3
"""Send a test message to a Slack webhook."""
from __future__ import annotations

import argparse
import asyncio
from datetime import datetime, timezone

from alertbridge.config import get_settings
from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor, MonitorStatus
from alertbridge.services.notification_service import TEST_MESSAGE, NotificationService
from alertbridge.services.settings_service import InMemorySettingsStore, PRIMARY_BASE_URL
from alertbridge.utils.exceptions import NotificationDeliveryError
from alertbridge.utils.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

settings = get_settings()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("webhook_url", help="Slack incoming webhook URL")
    parser.add_argument("--channel", default=None)
    parser.add_argument("--username", default=None)
    parser.add_argument("--icon-emoji", default=None)
    parser.add_argument("--notify-channel", action="store_true")
    parser.add_argument("--message", default=TEST_MESSAGE)
    parser.add_argument(
        "--rich",
        choices=["up", "down"],
        default=None,
        help="attach a sample heartbeat with this status",
    )
    parser.add_argument("--base-url", default=None, help="primary base URL for dashboard links")
    parser.add_argument("--monitor-url", default="https://example.com")
    return parser.parse_args()


async def main() -> int:
    """Send one notification and report the outcome."""
    args = parse_args()

    store = InMemorySettingsStore()
    if args.base_url:
        await store.set(PRIMARY_BASE_URL, args.base_url)

    config = {
        "type": "slack",
        "slackwebhookURL": args.webhook_url,
        "slackchannel": args.channel,
        "slackusername": args.username,
        "slackiconemo": args.icon_emoji,
        "slackchannelnotify": args.notify_channel,
    }

    monitor = None
    heartbeat = None
    if args.rich:
        monitor = MonitorDescriptor(id=1, name="Sample", type="http", url=args.monitor_url)
        heartbeat = HeartbeatDescriptor(
            status=MonitorStatus.UP if args.rich == "up" else MonitorStatus.DOWN,
            timezone="UTC",
            localDateTime=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
        )

    service = NotificationService(settings_store=store, timeout=settings.http_timeout)
    try:
        msg = await service.send(config, args.message, monitor, heartbeat)
    except NotificationDeliveryError as exc:
        logger.error("test_notification_failed", status_code=exc.status_code, error=str(exc))
        return 1

    logger.info("test_notification_done", result=msg)
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
