from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class MonitorStatus(IntEnum):
    """Heartbeat status values shared with the monitoring subsystem."""

    DOWN = 0
    UP = 1
    PENDING = 2
    MAINTENANCE = 3


class MonitorDescriptor(BaseModel):
    """Read-only view of the monitored resource attached to an alert."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str | None = Field(None, max_length=255)
    type: str = Field(default="http", max_length=50)
    url: str | None = None
    hostname: str | None = None
    port: int | None = Field(None, ge=0, le=65535)
