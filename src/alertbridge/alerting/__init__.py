from __future__ import annotations

from alertbridge.alerting.base import OK_MESSAGE, NotificationProvider
from alertbridge.alerting.slack import SlackNotificationProvider
from alertbridge.utils.exceptions import UnknownProviderError

PROVIDERS: dict[str, type[NotificationProvider]] = {
    SlackNotificationProvider.name: SlackNotificationProvider,
}


def get_provider_class(name: str) -> type[NotificationProvider]:
    """Look up the provider registered for a notification type."""
    try:
        return PROVIDERS[name]
    except KeyError:
        raise UnknownProviderError(name) from None


__all__ = [
    "OK_MESSAGE",
    "PROVIDERS",
    "NotificationProvider",
    "SlackNotificationProvider",
    "get_provider_class",
]
