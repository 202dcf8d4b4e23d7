from __future__ import annotations

from appointease.domain.entities.message import BusinessOwner, Message
from appointease.infrastructure.http.client import ApiClient
from appointease.infrastructure.http.mappers import payload_to_business_owner, payload_to_message
from appointease.infrastructure.http.schemas import (
    BusinessOwnerPayload,
    MessagePayload,
    SendMessagePayload,
    SuccessPayload,
    UnreadCountPayload,
)


class ChatApi(ApiClient):
    """Implements application.ports.chat_api.ChatApi."""

    async def get_messages(self, counterparty_id: str) -> list[Message]:
        data = await self._json("GET", f"/chat/messages/{counterparty_id}")
        return [payload_to_message(p) for p in self._parse_list(MessagePayload, data or [])]

    async def send_message(self, content: str, receiver_id: str) -> Message:
        body = SendMessagePayload(receiver_id=receiver_id, content=content)
        data = await self._json("POST", "/chat/send", json=body.model_dump(by_alias=True))
        return payload_to_message(self._parse(MessagePayload, data))

    async def mark_as_read(self, message_id: str) -> bool:
        data = await self._json("POST", f"/chat/messages/{message_id}/read")
        if data is None:
            return True
        return self._parse(SuccessPayload, data).success

    async def get_unread_count(self) -> int:
        data = await self._json("GET", "/chat/unread-count")
        return self._parse(UnreadCountPayload, data or {}).count

    async def get_business_owners(self) -> list[BusinessOwner]:
        data = await self._json("GET", "/chat/business-owners")
        return [payload_to_business_owner(p) for p in self._parse_list(BusinessOwnerPayload, data or [])]
