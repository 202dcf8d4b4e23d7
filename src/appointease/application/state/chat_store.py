"""Client-side chat state for one signed-in account."""
from __future__ import annotations

import logging

from appointease.application.dto.chat import ChatState
from appointease.application.exceptions import (
    AppError,
    BackendUnavailableError,
    ForbiddenError,
    UpstreamError,
)
from appointease.application.ports.chat_api import ChatApi
from appointease.domain.entities.message import Message
from appointease.domain.value_objects.enums import ConnectionStatus

logger = logging.getLogger(__name__)


class ChatStore:
    """Single source of truth for the current conversation and connection state.

    Network failures are logged and degrade the state (empty list, ``False``,
    no-op); they never propagate to the caller. There is no retry: the next
    user action or poll simply tries again.
    """

    def __init__(self, api: ChatApi, user_id: str) -> None:
        self._api = api
        self._user_id = user_id
        self._messages: list[Message] = []
        self._active_chat: str | None = None
        self._connection_status = ConnectionStatus.DISCONNECTED
        self._unread_count = 0
        self._is_chat_open = False
        self._in_flight = 0
        self._pending_reads: set[str] = set()
        self._load_seq = 0
        self._auth_rejected = False

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    @property
    def active_chat(self) -> str | None:
        return self._active_chat

    @property
    def connection_status(self) -> ConnectionStatus:
        return self._connection_status

    @property
    def unread_count(self) -> int:
        return self._unread_count

    @property
    def is_chat_open(self) -> bool:
        return self._is_chat_open

    @property
    def auth_rejected(self) -> bool:
        """The backend refused the session token on the latest call."""
        return self._auth_rejected

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    def snapshot(self) -> ChatState:
        return ChatState(
            messages=tuple(self._messages),
            active_chat=self._active_chat,
            connection_status=self._connection_status,
            unread_count=self._unread_count,
            is_chat_open=self._is_chat_open,
            is_loading=self.is_loading,
        )

    def rebind(self, api: ChatApi) -> None:
        """Swap the backend client, e.g. after the account signed in again."""
        self._api = api
        self._auth_rejected = False

    def toggle_chat(self) -> bool:
        self._is_chat_open = not self._is_chat_open
        return self._is_chat_open

    def set_active_chat(self, counterparty_id: str | None) -> None:
        self._active_chat = counterparty_id

    @property
    def input_enabled(self) -> bool:
        return (
            self._active_chat is not None
            and not self.is_loading
            and self._connection_status == ConnectionStatus.CONNECTED
        )

    def can_send(self, text: str) -> bool:
        return bool(text.strip()) and self.input_enabled

    async def connect(self) -> None:
        """First contact with the backend; establishes the connection status."""
        await self.refresh_unread_count()

    async def refresh_unread_count(self) -> None:
        try:
            count = await self._api.get_unread_count()
        except AppError as exc:
            logger.exception("Error fetching unread count for user %s", self._user_id)
            self._record_failure(exc)
            return
        self._record_success()
        self._unread_count = count

    async def load_messages(self, counterparty_id: str) -> None:
        """Replace the message list with the history shared with ``counterparty_id``."""
        self._load_seq += 1
        seq = self._load_seq
        self._active_chat = counterparty_id
        self._in_flight += 1
        try:
            messages = await self._api.get_messages(counterparty_id)
        except AppError as exc:
            logger.exception("Error loading messages with %s", counterparty_id)
            self._record_failure(exc)
            if seq == self._load_seq:
                self._messages = []
            return
        finally:
            self._in_flight -= 1

        self._record_success()
        # A newer selection supersedes this response.
        if seq != self._load_seq:
            logger.debug("Discarding stale history for %s", counterparty_id)
            return
        self._messages = list(messages)
        await self.refresh_unread_count()

    async def send_message(self, text: str, counterparty_id: str) -> bool:
        """Send ``text`` and append the confirmed message. Returns success.

        Blank text and a non-connected store are rejected without a backend call.
        """
        if not text.strip():
            return False
        if self._connection_status != ConnectionStatus.CONNECTED:
            logger.info("Refusing to send while %s", self._connection_status)
            return False

        self._in_flight += 1
        try:
            message = await self._api.send_message(text, counterparty_id)
        except AppError as exc:
            logger.exception("Error sending message to %s", counterparty_id)
            self._record_failure(exc)
            return False
        finally:
            self._in_flight -= 1

        self._record_success()
        if counterparty_id == self._active_chat:
            self._messages = [*self._messages, message]
        return True

    async def mark_as_read(self, message_id: str) -> bool:
        """Mark a message read once. Returns True only for the call that flipped it."""
        message = self._find(message_id)
        if message is None or message.is_read or message_id in self._pending_reads:
            return False

        self._pending_reads.add(message_id)
        try:
            success = await self._api.mark_as_read(message_id)
        except AppError as exc:
            logger.exception("Error marking message %s as read", message_id)
            self._record_failure(exc)
            return False
        finally:
            self._pending_reads.discard(message_id)

        self._record_success()
        if not success:
            return False
        self._messages = [m.mark_read() if m.id == message_id else m for m in self._messages]
        await self.refresh_unread_count()
        return True

    async def open_chat(self) -> int:
        """Mark every unread message addressed to this user as read; returns how many flipped."""
        flipped = 0
        for message in list(self._messages):
            if not message.is_read and message.receiver_id == self._user_id:
                if await self.mark_as_read(message.id):
                    flipped += 1
        return flipped

    async def poll(self) -> None:
        # load_messages refreshes the unread count itself.
        if self._active_chat is None:
            await self.refresh_unread_count()
        else:
            await self.load_messages(self._active_chat)

    def _find(self, message_id: str) -> Message | None:
        for message in self._messages:
            if message.id == message_id:
                return message
        return None

    def _record_success(self) -> None:
        self._connection_status = ConnectionStatus.CONNECTED
        self._auth_rejected = False

    def _record_failure(self, exc: AppError) -> None:
        if isinstance(exc, BackendUnavailableError):
            if self._connection_status == ConnectionStatus.CONNECTED:
                self._connection_status = ConnectionStatus.RECONNECTING
            else:
                self._connection_status = ConnectionStatus.DISCONNECTED
        elif isinstance(exc, ForbiddenError):
            self._auth_rejected = True
            self._connection_status = ConnectionStatus.ERROR
        elif isinstance(exc, UpstreamError):
            self._connection_status = ConnectionStatus.ERROR
        else:
            # The backend answered; only the request itself was rejected.
            self._connection_status = ConnectionStatus.CONNECTED
