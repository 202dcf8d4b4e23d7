from __future__ import annotations

from datetime import date

import pytest

from appointease.application.dto.event import ImageUpload
from appointease.application.exceptions import UpstreamError, ValidationError
from appointease.domain.entities.event import EventDraft, RepeatConfig
from appointease.domain.value_objects.enums import RepeatEndType, RepeatFrequency
from appointease.services import event_service
from tests.conftest import FakeServicesGateway

START = date(2024, 1, 31)


def _draft(**overrides) -> EventDraft:
    values = {
        "name": "Haircut",
        "description": "Short back and sides",
        "duration": 30,
        "price": "25.50",
        "start_date": START,
        "schedule_data": [{"templateId": 1}],
    }
    values.update(overrides)
    return EventDraft(**values)


def test_preview_without_repeat_is_single_date():
    assert event_service.preview_occurrences(START, RepeatConfig()) == [START]


def test_preview_weekly_by_occurrences():
    config = RepeatConfig(
        enabled=True,
        frequency=RepeatFrequency.WEEKLY,
        interval=2,
        end_type=RepeatEndType.OCCURRENCES,
        end_after=3,
    )

    assert event_service.preview_occurrences(START, config) == [
        date(2024, 1, 31),
        date(2024, 2, 14),
        date(2024, 2, 28),
    ]


def test_preview_monthly_clamps_to_month_end():
    config = RepeatConfig(enabled=True, frequency=RepeatFrequency.MONTHLY, end_type=RepeatEndType.NEVER)

    assert event_service.preview_occurrences(START, config, limit=3) == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
    ]


def test_preview_daily_until_date():
    config = RepeatConfig(
        enabled=True,
        frequency=RepeatFrequency.DAILY,
        end_type=RepeatEndType.DATE,
        end_date=date(2024, 2, 2),
    )

    assert event_service.preview_occurrences(START, config) == [
        date(2024, 1, 31),
        date(2024, 2, 1),
        date(2024, 2, 2),
    ]


def test_invalid_repeat_config():
    with pytest.raises(ValidationError):
        event_service.validate_repeat_config(RepeatConfig(enabled=True, interval=0))
    with pytest.raises(ValidationError):
        event_service.validate_repeat_config(RepeatConfig(enabled=True, end_type=RepeatEndType.DATE))


@pytest.mark.asyncio
async def test_submit_requires_fields():
    gateway = FakeServicesGateway()

    result = await event_service.submit_event(_draft(schedule_data=[]), gateway)

    assert result.success is False
    assert result.error == event_service.REQUIRED_FIELDS_MESSAGE
    assert gateway.created == []


@pytest.mark.asyncio
async def test_submit_coerces_price_and_uploads_image():
    gateway = FakeServicesGateway()

    result = await event_service.submit_event(
        _draft(), gateway, ImageUpload("cut.png", b"png", "image/png"),
    )

    assert result.success is True
    assert result.event_id == "1"
    assert gateway.created[0]["price"] == 25.5
    assert gateway.created[0]["startDate"] == "2024-01-31"
    assert gateway.created[0]["repeatConfig"]["endType"] == "never"
    assert gateway.images == ["1"]


@pytest.mark.asyncio
async def test_submit_survives_image_failure():
    gateway = FakeServicesGateway(upload_error=UpstreamError("too big", 413))

    result = await event_service.submit_event(
        _draft(), gateway, ImageUpload("cut.png", b"png", "image/png"),
    )

    assert result.success is True


@pytest.mark.asyncio
async def test_submit_reports_backend_error():
    gateway = FakeServicesGateway(create_error=ValidationError("Name taken"))

    result = await event_service.submit_event(_draft(), gateway)

    assert result.success is False
    assert result.error == "Name taken"


@pytest.mark.asyncio
async def test_submit_rejects_bad_price():
    result = await event_service.submit_event(_draft(price="free"), FakeServicesGateway())

    assert result.success is False
    assert "price" in result.error
