#!/usr/bin/env python3
"""Run the notification API."""
from __future__ import annotations

import uvicorn

from alertbridge.config import get_settings

settings = get_settings()


if __name__ == "__main__":
    uvicorn.run(
        "alertbridge.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
