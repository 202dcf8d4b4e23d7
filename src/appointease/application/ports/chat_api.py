from __future__ import annotations

from typing import Protocol

from appointease.domain.entities.message import BusinessOwner, Message


class ChatApi(Protocol):
    async def get_messages(self, counterparty_id: str) -> list[Message]:
        """History between the signed-in user and a counterparty, in backend order."""
        ...

    async def send_message(self, content: str, receiver_id: str) -> Message: ...

    async def mark_as_read(self, message_id: str) -> bool: ...

    async def get_unread_count(self) -> int: ...

    async def get_business_owners(self) -> list[BusinessOwner]: ...
