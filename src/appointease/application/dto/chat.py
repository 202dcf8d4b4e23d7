from __future__ import annotations

from dataclasses import dataclass

from appointease.domain.entities.message import Message
from appointease.domain.value_objects.enums import ConnectionStatus


@dataclass(frozen=True, slots=True)
class ChatState:
    """Point-in-time copy of a chat store, safe to hand to a view."""

    messages: tuple[Message, ...]
    active_chat: str | None
    connection_status: ConnectionStatus
    unread_count: int
    is_chat_open: bool
    is_loading: bool
