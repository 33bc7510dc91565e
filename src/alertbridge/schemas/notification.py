from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from alertbridge.schemas.heartbeat import HeartbeatDescriptor
from alertbridge.schemas.monitor import MonitorDescriptor


class NotificationConfig(BaseModel):
    """Notification form as stored by the caller; provider keys pass through."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(default="slack", min_length=1, max_length=50)
    name: str | None = None


class SlackNotificationConfig(BaseModel):
    """Slack fields of a notification config, keyed by their form names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    webhook_url: str | None = Field(None, alias="slackwebhookURL")
    channel: str | None = Field(None, alias="slackchannel")
    username: str | None = Field(None, alias="slackusername")
    icon_emoji: str | None = Field(None, alias="slackiconemo")
    channel_notify: bool = Field(default=False, alias="slackchannelnotify")
    # Deprecated: migrated into the primary base URL setting on send
    button_url: str | None = Field(None, alias="slackbutton")

    @field_validator("channel_notify", mode="before")
    @classmethod
    def parse_channel_notify(cls, v):
        """Treat an unset checkbox as unchecked."""
        if v is None:
            return False
        return v

    @classmethod
    def from_config(
        cls, config: NotificationConfig | Mapping[str, Any]
    ) -> SlackNotificationConfig:
        """Parse the Slack fields out of a generic notification config."""
        if isinstance(config, SlackNotificationConfig):
            return config
        if isinstance(config, BaseModel):
            config = config.model_dump()
        return cls.model_validate(config)


class NotificationSendRequest(BaseModel):
    """Schema for sending a notification with optional alert context."""

    notification: NotificationConfig
    message: str
    monitor: MonitorDescriptor | None = None
    heartbeat: HeartbeatDescriptor | None = None


class NotificationResult(BaseModel):
    """Schema for the outcome of a send."""

    ok: bool
    msg: str


class PrimaryBaseURL(BaseModel):
    """Schema for reading and updating the primary base URL setting."""

    primary_base_url: str | None = Field(None, max_length=2048)
