from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class MessageResponse(BaseModel):
    id: str
    sender_id: str
    sender_name: str | None
    receiver_id: str
    content: str
    timestamp: datetime
    is_read: bool

    model_config = {"from_attributes": True}


class ConnectionIndicatorResponse(BaseModel):
    status: str
    color: str
    title: str


class ChatStateResponse(BaseModel):
    messages: list[MessageResponse]
    active_chat: str | None
    connection: ConnectionIndicatorResponse
    unread_count: int
    is_chat_open: bool
    is_loading: bool
    input_enabled: bool


class BusinessOwnerResponse(BaseModel):
    id: str
    name: str

    model_config = {"from_attributes": True}


class SendMessageRequest(BaseModel):
    content: str
    receiver_id: str | None = None


class SendMessageResponse(BaseModel):
    sent: bool


class ToggleChatResponse(BaseModel):
    is_chat_open: bool


class MarkReadResponse(BaseModel):
    marked: bool


class OpenChatResponse(BaseModel):
    marked: int
