from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from appointease.domain.entities.event import EventDraft, RepeatConfig
from appointease.domain.value_objects.enums import RepeatEndType, RepeatFrequency


class RepeatConfigRequest(BaseModel):
    enabled: bool = False
    frequency: RepeatFrequency = RepeatFrequency.WEEKLY
    interval: int = 1
    end_date: date | None = None
    end_after: int = 1
    end_type: RepeatEndType = RepeatEndType.NEVER

    def to_entity(self) -> RepeatConfig:
        return RepeatConfig(
            enabled=self.enabled,
            frequency=self.frequency,
            interval=self.interval,
            end_date=self.end_date,
            end_after=self.end_after,
            end_type=self.end_type,
        )


class RepeatPreviewRequest(BaseModel):
    start_date: date
    repeat_config: RepeatConfigRequest = Field(default_factory=RepeatConfigRequest)
    limit: int = Field(10, ge=1, le=366)


class RepeatPreviewResponse(BaseModel):
    dates: list[date]


class EventDraftRequest(BaseModel):
    name: str = ""
    description: str = ""
    duration: int = 60
    price: float | str = 0
    start_date: date | None = None
    schedule_data: list[dict[str, Any]] = []
    repeat_config: RepeatConfigRequest = Field(default_factory=RepeatConfigRequest)

    def to_entity(self) -> EventDraft:
        return EventDraft(
            name=self.name,
            description=self.description,
            duration=self.duration,
            price=self.price,
            start_date=self.start_date,
            schedule_data=self.schedule_data,
            repeat_config=self.repeat_config.to_entity(),
        )


class SubmitEventResponse(BaseModel):
    success: bool
    event_id: str | None = None
    error: str | None = None
