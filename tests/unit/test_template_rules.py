from __future__ import annotations

import pytest

from appointease.application.exceptions import ValidationError
from appointease.application.policies.template_rules import (
    format_time,
    time_to_minutes,
    validate_template,
    validate_time_ranges,
)
from appointease.domain.entities.template import TimeRange
from tests.conftest import make_template


def _ranges(*pairs: tuple[str, str]) -> list[TimeRange]:
    return [TimeRange(id=f"r{i}", start_time=s, end_time=e) for i, (s, e) in enumerate(pairs)]


@pytest.mark.parametrize(
    ("value", "expected"),
    [("00:00", "12:00 AM"), ("09:30", "9:30 AM"), ("12:15", "12:15 PM"), ("23:59", "11:59 PM")],
)
def test_format_time(value, expected):
    assert format_time(value) == expected


def test_time_to_minutes_rejects_garbage():
    assert time_to_minutes("10:30") == 630
    with pytest.raises(ValidationError):
        time_to_minutes("noon")


def test_valid_day_has_no_errors():
    assert validate_time_ranges(_ranges(("09:00", "10:00"), ("10:00", "11:00"))) == []


def test_inverted_range_is_reported():
    errors = validate_time_ranges(_ranges(("11:00", "10:00")))

    assert errors == ["Time range 1: Start time must be before end time"]


def test_overlap_is_reported_in_start_order():
    errors = validate_time_ranges(_ranges(("13:00", "14:00"), ("09:00", "13:30")))

    assert errors == ["Time ranges 1 and 2: Overlapping times detected"]


def test_validate_template_requires_name_and_days():
    with pytest.raises(ValidationError, match="template name"):
        validate_template(make_template(name="  "))
    with pytest.raises(ValidationError, match="at least one day"):
        validate_template(make_template(days=0))


def test_validate_template_lists_conflicting_days():
    template = make_template(ranges=[("09:00", "11:00"), ("10:00", "12:00")], days=2)

    with pytest.raises(ValidationError) as excinfo:
        validate_template(template)

    assert "Day 1: Time ranges 1 and 2" in excinfo.value.detail
    assert "Day 2: Time ranges 1 and 2" in excinfo.value.detail
