from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import Any

from appointease.application.dto.event import ImageUpload, SubmitResult
from appointease.application.exceptions import AppError, ValidationError
from appointease.application.ports.services_api import ServicesGateway
from appointease.domain.entities.event import EventDraft, RepeatConfig
from appointease.domain.value_objects.enums import RepeatEndType, RepeatFrequency

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields and set up your schedule"
DEFAULT_PREVIEW_LIMIT = 10


def validate_repeat_config(config: RepeatConfig) -> None:
    if not config.enabled:
        return
    if config.interval < 1:
        raise ValidationError("Repeat interval must be at least 1")
    if config.end_type == RepeatEndType.DATE and config.end_date is None:
        raise ValidationError("Choose the date the repetition ends")
    if config.end_type == RepeatEndType.OCCURRENCES and config.end_after < 1:
        raise ValidationError("Repeat at least once")


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _nth_occurrence(start: date, config: RepeatConfig, n: int) -> date:
    step = n * config.interval
    if config.frequency == RepeatFrequency.DAILY:
        return start + timedelta(days=step)
    if config.frequency == RepeatFrequency.WEEKLY:
        return start + timedelta(weeks=step)
    return _add_months(start, step)


def preview_occurrences(
    start_date: date,
    config: RepeatConfig,
    limit: int = DEFAULT_PREVIEW_LIMIT,
) -> list[date]:
    """Dates produced by the repeat settings, starting with ``start_date``.

    Monthly repeats keep the start day, clamped to the month's last day.
    A never-ending repeat is cut off at ``limit``.
    """
    validate_repeat_config(config)
    if not config.enabled:
        return [start_date]

    dates: list[date] = []
    n = 0
    while len(dates) < limit:
        current = _nth_occurrence(start_date, config, n)
        if config.end_type == RepeatEndType.DATE and config.end_date and current > config.end_date:
            break
        if config.end_type == RepeatEndType.OCCURRENCES and n >= config.end_after:
            break
        dates.append(current)
        n += 1
    return dates


def repeat_config_to_payload(config: RepeatConfig) -> dict[str, Any]:
    return {
        "enabled": config.enabled,
        "frequency": str(config.frequency),
        "interval": config.interval,
        "endDate": config.end_date.isoformat() if config.end_date else "",
        "endAfter": config.end_after,
        "endType": str(config.end_type),
    }


async def submit_event(
    draft: EventDraft,
    services: ServicesGateway,
    image: ImageUpload | None = None,
) -> SubmitResult:
    """Create a bookable service from the event form.

    A failed image upload does not fail the submission: the service exists.
    """
    if not draft.name or not draft.description or not draft.start_date or not draft.schedule_data:
        return SubmitResult(success=False, error=REQUIRED_FIELDS_MESSAGE)

    try:
        validate_repeat_config(draft.repeat_config)
        price = float(draft.price)
    except ValidationError as exc:
        return SubmitResult(success=False, error=exc.detail)
    except ValueError:
        return SubmitResult(success=False, error=f"Invalid price: {draft.price!r}")

    body = {
        "name": draft.name,
        "description": draft.description,
        "duration": draft.duration,
        "price": price,
        "startDate": draft.start_date.isoformat(),
        "scheduleData": draft.schedule_data,
        "repeatConfig": repeat_config_to_payload(draft.repeat_config),
    }

    try:
        created = await services.create_service(body)
    except AppError as exc:
        logger.exception("Failed to create event %r", draft.name)
        return SubmitResult(success=False, error=exc.detail or "Failed to create event")

    event_id = created.get("id")
    if image is not None and event_id is not None:
        try:
            await services.upload_service_image(
                str(event_id), image.filename, image.content, image.content_type,
            )
        except AppError:
            logger.warning("Failed to upload event image, but event %s was created", event_id)

    return SubmitResult(success=True, event_id=str(event_id) if event_id is not None else None)
