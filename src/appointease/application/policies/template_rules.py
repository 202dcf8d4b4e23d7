from __future__ import annotations

from appointease.application.exceptions import ValidationError
from appointease.domain.entities.template import DaySchedule, Template, TimeRange

MINUTES_PER_DAY = 24 * 60
LAST_MINUTE = 23 * 60 + 59


def time_to_minutes(value: str) -> int:
    """Convert ``HH:MM`` to minutes since midnight."""
    try:
        hours, minutes = value.split(":")
        return int(hours) * 60 + int(minutes)
    except ValueError as exc:
        raise ValidationError(f"Invalid time: {value!r}") from exc


def minutes_to_time(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time(value: str) -> str:
    """``14:05`` -> ``2:05 PM``."""
    hours, minutes = value.split(":")
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {suffix}"


def sort_time_ranges(ranges: list[TimeRange]) -> list[TimeRange]:
    return sorted(ranges, key=lambda r: time_to_minutes(r.start_time))


def validate_time_ranges(ranges: list[TimeRange]) -> list[str]:
    """Return human-readable conflicts for one day; empty when the day is valid.

    Ranges are numbered in start-time order. Ranges that merely touch
    (one ends exactly when the next starts) do not overlap.
    """
    errors: list[str] = []
    ordered = sort_time_ranges(ranges)
    for i, current in enumerate(ordered):
        start = time_to_minutes(current.start_time)
        end = time_to_minutes(current.end_time)
        if start >= end:
            errors.append(f"Time range {i + 1}: Start time must be before end time")
        if i < len(ordered) - 1:
            next_start = time_to_minutes(ordered[i + 1].start_time)
            if end > next_start:
                errors.append(f"Time ranges {i + 1} and {i + 2}: Overlapping times detected")
    return errors


def day_errors(day: DaySchedule) -> str | None:
    errors = validate_time_ranges(day.time_ranges)
    return "; ".join(errors) if errors else None


def validate_template(template: Template) -> None:
    """Raise ValidationError unless the template can be saved."""
    if not template.name.strip():
        raise ValidationError("Please provide a template name")
    if not template.day_schedules:
        raise ValidationError("Please add at least one day")

    problems: list[str] = []
    for index, day in enumerate(template.day_schedules):
        errors = day_errors(day)
        if errors:
            problems.append(f"Day {index + 1}: {errors}")
    if problems:
        raise ValidationError(
            "Please fix the following time conflicts:\n\n" + "\n".join(problems)
        )
