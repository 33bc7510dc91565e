from __future__ import annotations

import json

import httpx


class AlertBridgeException(Exception):
    """Base exception for alertbridge."""

    pass


class UnknownProviderError(AlertBridgeException):
    """Raised when a notification type has no registered provider."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Notification type {name!r} is not supported")


class NotificationDeliveryError(AlertBridgeException):
    """Raised when a webhook request fails at the transport or HTTP level."""

    def __init__(
        self,
        provider: str,
        reason: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        self.provider = provider
        self.reason = reason
        self.status_code = status_code
        self.body = body
        super().__init__(reason)


def _response_body(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, str):
        return data
    return json.dumps(data)


def to_delivery_error(provider: str, exc: httpx.HTTPError) -> NotificationDeliveryError:
    """
    Normalize an httpx failure into a NotificationDeliveryError.

    Status and body are attached when the server answered; network-level
    failures carry neither.

    Args:
        provider: Name of the provider that issued the request
        exc: Error raised by httpx

    Returns:
        Normalized delivery error, ready to be raised
    """
    status_code: int | None = None
    body: str | None = None

    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        body = _response_body(exc.response) or None

    reason = f"Error: {exc} "
    if body:
        reason += body

    return NotificationDeliveryError(
        provider=provider,
        reason=reason,
        status_code=status_code,
        body=body,
    )
