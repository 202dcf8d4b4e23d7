"""Backend JSON payloads. The backend speaks camelCase."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class TimeRangePayload(CamelModel):
    id: str
    start_time: str
    end_time: str
    selected: bool = False


class DaySchedulePayload(CamelModel):
    id: str
    day_index: int
    time_ranges: list[TimeRangePayload] = []


class TemplatePayload(CamelModel):
    id: int | None = None
    name: str
    description: str | None = None
    day_schedules: list[DaySchedulePayload] = []


class MessagePayload(CamelModel):
    id: str
    sender_id: str
    sender_name: str | None = None
    receiver_id: str
    content: str
    timestamp: datetime
    is_read: bool = False


class SendMessagePayload(CamelModel):
    receiver_id: str
    content: str


class BusinessOwnerPayload(CamelModel):
    id: str
    name: str


class UnreadCountPayload(CamelModel):
    count: int = 0


class SuccessPayload(CamelModel):
    success: bool = False


class StarredPayload(CamelModel):
    is_starred: bool = False
