"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

import jwt
import pytest

from appointease.application.dto.principal import Principal
from appointease.application.exceptions import AppError
from appointease.domain.entities.message import BusinessOwner, Message
from appointease.domain.entities.template import DaySchedule, Template, TimeRange
from appointease.domain.value_objects.enums import UserRole

USER_ID = "user1"
PROVIDER_ID = "provider1"


@pytest.fixture
def user_principal() -> Principal:
    return Principal(user_id=USER_ID, role=UserRole.USER, token="user-token", name="John Doe")


@pytest.fixture
def provider_principal() -> Principal:
    return Principal(user_id=PROVIDER_ID, role=UserRole.PROVIDER, token="provider-token", name="Dr. Smith")


def make_token(secret: str, sub: str = USER_ID, role: str = UserRole.USER, algorithm: str = "HS256") -> str:
    return jwt.encode({"sub": sub, "role": role, "name": "Test"}, secret, algorithm=algorithm)


def make_message(
    *,
    message_id: str | None = None,
    sender_id: str = PROVIDER_ID,
    receiver_id: str = USER_ID,
    content: str = "hello",
    is_read: bool = False,
) -> Message:
    return Message(
        id=message_id or f"msg_{uuid.uuid4().hex[:8]}",
        sender_id=sender_id,
        sender_name=None,
        receiver_id=receiver_id,
        content=content,
        timestamp=datetime.now(timezone.utc),
        is_read=is_read,
    )


def make_template(
    name: str = "Weekdays",
    ranges: list[tuple[str, str]] | None = None,
    days: int = 1,
) -> Template:
    ranges = ranges if ranges is not None else [("09:00", "10:00")]
    return Template(
        name=name,
        description="",
        day_schedules=[
            DaySchedule(
                id=f"day_{d}",
                day_index=d,
                time_ranges=[
                    TimeRange(id=f"time_{d}_{i}", start_time=start, end_time=end)
                    for i, (start, end) in enumerate(ranges)
                ],
            )
            for d in range(days)
        ],
    )


@dataclass
class FakeChatApi:
    """In-memory chat backend. Set ``fail_with`` to make every call raise."""

    conversations: dict[str, list[Message]] = field(default_factory=dict)
    owners: list[BusinessOwner] = field(default_factory=list)
    unread: int = 0
    fail_with: AppError | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)
    user_id: str = USER_ID

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def get_messages(self, counterparty_id: str) -> list[Message]:
        self.calls.append(("get_messages", counterparty_id))
        self._maybe_fail()
        return list(self.conversations.get(counterparty_id, []))

    async def send_message(self, content: str, receiver_id: str) -> Message:
        self.calls.append(("send_message", (content, receiver_id)))
        self._maybe_fail()
        message = make_message(sender_id=self.user_id, receiver_id=receiver_id, content=content)
        self.conversations.setdefault(receiver_id, []).append(message)
        return message

    async def mark_as_read(self, message_id: str) -> bool:
        self.calls.append(("mark_as_read", message_id))
        self._maybe_fail()
        for messages in self.conversations.values():
            for i, m in enumerate(messages):
                if m.id == message_id:
                    messages[i] = m.mark_read()
                    self.unread = max(self.unread - 1, 0)
                    return True
        return False

    async def get_unread_count(self) -> int:
        self.calls.append(("get_unread_count", None))
        self._maybe_fail()
        return self.unread

    async def get_business_owners(self) -> list[BusinessOwner]:
        self.calls.append(("get_business_owners", None))
        self._maybe_fail()
        return list(self.owners)

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)


@dataclass
class FakeTemplateStore:
    _data: dict[str, str] = field(default_factory=dict)

    async def load(self, user_id: str) -> str | None:
        return self._data.get(user_id)

    async def save(self, user_id: str, raw: str) -> None:
        self._data[user_id] = raw


@dataclass
class FakeTemplatesGateway:
    upserted: list[Template] = field(default_factory=list)

    async def upsert_template(self, template: Template) -> Template:
        self.upserted.append(template)
        return template

    async def get_templates(self) -> list[Template]:
        return list(self.upserted)


@dataclass
class FakeServicesGateway:
    created: list[dict] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    create_error: AppError | None = None
    upload_error: AppError | None = None

    async def create_service(self, service_data: dict) -> dict:
        if self.create_error is not None:
            raise self.create_error
        self.created.append(service_data)
        return {"id": len(self.created)}

    async def upload_service_image(
        self, service_id: str, filename: str, content: bytes, content_type: str,
    ) -> dict:
        if self.upload_error is not None:
            raise self.upload_error
        self.images.append(service_id)
        return {}


@dataclass
class FixedClock:
    at: datetime = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.at

    def today(self) -> date:
        return self.at.date()
