from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from alertbridge.models.base import Base


class Setting(Base):
    """Key/value application setting, grouped by type."""

    __tablename__ = "setting"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    key: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    type: Mapped[str | None] = mapped_column(String(20), nullable=True)

    def __repr__(self) -> str:
        return f"<Setting(key='{self.key}', type='{self.type}')>"
