from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Message:
    id: str
    sender_id: str
    sender_name: str | None
    receiver_id: str
    content: str
    timestamp: datetime
    is_read: bool = False

    def mark_read(self) -> Message:
        if self.is_read:
            return self
        return replace(self, is_read=True)


@dataclass(frozen=True, slots=True)
class BusinessOwner:
    id: str
    name: str
