"""Slack-compatible alert notifications for monitored resources."""
from __future__ import annotations

__version__ = "1.0.0"
