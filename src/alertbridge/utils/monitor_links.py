from __future__ import annotations

from alertbridge.schemas.monitor import MonitorDescriptor

# Monitor types whose address is a host, optionally with a port
HOST_PORT_TYPES = frozenset(
    {"port", "dns", "gamedig", "steam", "mqtt", "radius", "tailscale-ping", "smtp"}
)

# Monitor types with nothing reachable to link to
NO_ADDRESS_TYPES = frozenset({"push", "group"})

_BARE_SCHEMES = ("", "http://", "https://")


def monitor_relative_url(monitor_id: int) -> str:
    """Dashboard path of a monitor, relative to the primary base URL."""
    return f"/dashboard/{monitor_id}"


def extract_address(monitor: MonitorDescriptor | None) -> str:
    """
    Public address of the monitored resource.

    Args:
        monitor: Monitor attached to the alert

    Returns:
        URL or host[:port] of the resource, or "" when there is none
    """
    if monitor is None or monitor.type in NO_ADDRESS_TYPES:
        return ""

    if monitor.type == "ping":
        return monitor.hostname or ""

    if monitor.type in HOST_PORT_TYPES:
        if not monitor.hostname:
            return ""
        if monitor.port:
            return f"{monitor.hostname}:{monitor.port}"
        return monitor.hostname

    url = (monitor.url or "").strip()
    if url in _BARE_SCHEMES:
        return ""
    return url
