from __future__ import annotations

from appointease.domain.entities.message import BusinessOwner, Message
from appointease.domain.entities.template import DaySchedule, Template, TimeRange
from appointease.infrastructure.http.schemas import (
    BusinessOwnerPayload,
    DaySchedulePayload,
    MessagePayload,
    TemplatePayload,
    TimeRangePayload,
)


def payload_to_message(payload: MessagePayload) -> Message:
    return Message(
        id=payload.id,
        sender_id=payload.sender_id,
        sender_name=payload.sender_name,
        receiver_id=payload.receiver_id,
        content=payload.content,
        timestamp=payload.timestamp,
        is_read=payload.is_read,
    )


def payload_to_business_owner(payload: BusinessOwnerPayload) -> BusinessOwner:
    return BusinessOwner(id=payload.id, name=payload.name)


def payload_to_template(payload: TemplatePayload) -> Template:
    return Template(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        day_schedules=[
            DaySchedule(
                id=day.id,
                day_index=day.day_index,
                time_ranges=[
                    TimeRange(
                        id=r.id,
                        start_time=r.start_time,
                        end_time=r.end_time,
                        selected=r.selected,
                    )
                    for r in day.time_ranges
                ],
            )
            for day in payload.day_schedules
        ],
    )


def template_to_payload(entity: Template) -> TemplatePayload:
    return TemplatePayload(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        day_schedules=[
            DaySchedulePayload(
                id=day.id,
                day_index=day.day_index,
                time_ranges=[
                    TimeRangePayload(
                        id=r.id,
                        start_time=r.start_time,
                        end_time=r.end_time,
                        selected=r.selected,
                    )
                    for r in day.time_ranges
                ],
            )
            for day in entity.day_schedules
        ],
    )
