from __future__ import annotations

from dataclasses import dataclass

from appointease.domain.value_objects.enums import ConnectionStatus


@dataclass(frozen=True, slots=True)
class ConnectionIndicator:
    color: str
    title: str


_INDICATORS: dict[str, ConnectionIndicator] = {
    ConnectionStatus.CONNECTED: ConnectionIndicator("green", "Connected"),
    ConnectionStatus.DISCONNECTED: ConnectionIndicator("red", "Disconnected"),
    ConnectionStatus.RECONNECTING: ConnectionIndicator("yellow", "Reconnecting"),
    ConnectionStatus.ERROR: ConnectionIndicator("red", "Connection Error"),
}

UNKNOWN_INDICATOR = ConnectionIndicator("gray", "Unknown Status")


def indicator_for(status: str | None) -> ConnectionIndicator:
    """Map a connection status to the dot colour and hover title shown in the chat header."""
    if status is None:
        return UNKNOWN_INDICATOR
    return _INDICATORS.get(status, UNKNOWN_INDICATOR)
