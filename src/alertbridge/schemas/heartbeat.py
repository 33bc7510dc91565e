from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from alertbridge.schemas.monitor import MonitorStatus


class HeartbeatDescriptor(BaseModel):
    """
    Point-in-time status snapshot of a monitor.

    ``timezone`` and ``local_date_time`` are rendered as received; they are
    never parsed or converted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    status: MonitorStatus
    timezone: str
    local_date_time: str = Field(alias="localDateTime")
    msg: str = ""
    time: str | None = None

    @property
    def is_up(self) -> bool:
        return self.status == MonitorStatus.UP
