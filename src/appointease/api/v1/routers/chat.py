from __future__ import annotations

import logging

from fastapi import APIRouter

from appointease.api.deps import ChatApiDep, ChatStoreDep, CurrentPrincipal
from appointease.api.v1.schemas.chat import (
    BusinessOwnerResponse,
    ChatStateResponse,
    ConnectionIndicatorResponse,
    MarkReadResponse,
    MessageResponse,
    OpenChatResponse,
    SendMessageRequest,
    SendMessageResponse,
    ToggleChatResponse,
)
from appointease.application.exceptions import ValidationError
from appointease.application.state.chat_store import ChatStore
from appointease.domain.value_objects.connection_indicator import indicator_for
from appointease.domain.value_objects.enums import UserRole

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


def _state(store: ChatStore) -> ChatStateResponse:
    snapshot = store.snapshot()
    indicator = indicator_for(snapshot.connection_status)
    return ChatStateResponse(
        messages=[MessageResponse.model_validate(m, from_attributes=True) for m in snapshot.messages],
        active_chat=snapshot.active_chat,
        connection=ConnectionIndicatorResponse(
            status=snapshot.connection_status,
            color=indicator.color,
            title=indicator.title,
        ),
        unread_count=snapshot.unread_count,
        is_chat_open=snapshot.is_chat_open,
        is_loading=snapshot.is_loading,
        input_enabled=store.input_enabled,
    )


@router.get("/state", response_model=ChatStateResponse)
async def get_state(store: ChatStoreDep) -> ChatStateResponse:
    return _state(store)


@router.post("/toggle", response_model=ToggleChatResponse)
async def toggle_chat(store: ChatStoreDep) -> ToggleChatResponse:
    return ToggleChatResponse(is_chat_open=store.toggle_chat())


@router.post("/open", response_model=OpenChatResponse)
async def open_chat(store: ChatStoreDep) -> OpenChatResponse:
    """Mark everything addressed to the caller in the open conversation as read."""
    return OpenChatResponse(marked=await store.open_chat())


@router.get("/business-owners", response_model=list[BusinessOwnerResponse])
async def list_business_owners(
    principal: CurrentPrincipal,
    store: ChatStoreDep,
    api: ChatApiDep,
) -> list[BusinessOwnerResponse]:
    if principal.role != UserRole.USER:
        return []
    owners = await api.get_business_owners()
    # A lone provider is selected straight away.
    if len(owners) == 1 and store.active_chat != owners[0].id:
        await store.load_messages(owners[0].id)
    return [BusinessOwnerResponse.model_validate(o, from_attributes=True) for o in owners]


@router.put("/active/{counterparty_id}", response_model=ChatStateResponse)
async def select_counterparty(counterparty_id: str, store: ChatStoreDep) -> ChatStateResponse:
    await store.load_messages(counterparty_id)
    return _state(store)


@router.post("/messages", response_model=SendMessageResponse)
async def send_message(body: SendMessageRequest, store: ChatStoreDep) -> SendMessageResponse:
    receiver_id = body.receiver_id or store.active_chat
    if receiver_id is None:
        raise ValidationError("Select a business owner to start chatting")
    sent = await store.send_message(body.content, receiver_id)
    return SendMessageResponse(sent=sent)


@router.post("/messages/{message_id}/read", response_model=MarkReadResponse)
async def mark_as_read(message_id: str, store: ChatStoreDep) -> MarkReadResponse:
    return MarkReadResponse(marked=await store.mark_as_read(message_id))
