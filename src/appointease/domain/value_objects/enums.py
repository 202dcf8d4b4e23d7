from __future__ import annotations

from enum import StrEnum


class ConnectionStatus(StrEnum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    RECONNECTING = "reconnecting"
    ERROR = "error"


class UserRole(StrEnum):
    USER = "User"
    PROVIDER = "ServiceProvider"


class RepeatFrequency(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class RepeatEndType(StrEnum):
    DATE = "date"
    OCCURRENCES = "occurrences"
    NEVER = "never"


class CalendarView(StrEnum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
