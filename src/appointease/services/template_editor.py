"""Template editor form state.

Every operation takes a template and returns a new one; nothing is mutated
in place. Day indices always match list positions after an operation.
"""
from __future__ import annotations

import uuid
from dataclasses import replace

from appointease.application.policies.template_rules import (
    LAST_MINUTE,
    MINUTES_PER_DAY,
    day_errors,
    minutes_to_time,
    sort_time_ranges,
    time_to_minutes,
)
from appointease.domain.entities.template import DaySchedule, Template, TimeRange

DEFAULT_START = "09:00"
DEFAULT_END = "10:00"
GAP_MINUTES = 30
DEFAULT_LENGTH_MINUTES = 60


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def _reindex(days: list[DaySchedule]) -> list[DaySchedule]:
    return [replace(day, day_index=i) for i, day in enumerate(days)]


def _update_day(template: Template, day_id: str, ranges: list[TimeRange]) -> Template:
    return replace(
        template,
        day_schedules=[
            replace(day, time_ranges=ranges) if day.id == day_id else day
            for day in template.day_schedules
        ],
    )


def _find_day(template: Template, day_id: str) -> DaySchedule | None:
    return next((d for d in template.day_schedules if d.id == day_id), None)


def new_template() -> Template:
    return Template(name="", description="", day_schedules=[])


def add_day(template: Template) -> Template:
    day = DaySchedule(id=_new_id("day"), day_index=len(template.day_schedules), time_ranges=[])
    return replace(template, day_schedules=[*template.day_schedules, day])


def copy_day(template: Template, day_id: str) -> Template:
    source = _find_day(template, day_id)
    if source is None:
        return template
    copied = DaySchedule(
        id=_new_id("day"),
        day_index=len(template.day_schedules),
        time_ranges=[replace(r, id=_new_id("time")) for r in source.time_ranges],
    )
    return replace(template, day_schedules=[*template.day_schedules, copied])


def remove_day(template: Template, day_id: str) -> Template:
    remaining = [d for d in template.day_schedules if d.id != day_id]
    return replace(template, day_schedules=_reindex(remaining))


def move_day_up(template: Template, day_id: str) -> Template:
    days = list(template.day_schedules)
    index = next((i for i, d in enumerate(days) if d.id == day_id), -1)
    if index <= 0:
        return template
    days[index - 1], days[index] = days[index], days[index - 1]
    return replace(template, day_schedules=_reindex(days))


def move_day_down(template: Template, day_id: str) -> Template:
    days = list(template.day_schedules)
    index = next((i for i, d in enumerate(days) if d.id == day_id), -1)
    if index < 0 or index >= len(days) - 1:
        return template
    days[index + 1], days[index] = days[index], days[index + 1]
    return replace(template, day_schedules=_reindex(days))


def next_default_range(day: DaySchedule | None) -> tuple[str, str]:
    """Suggest a slot 30 minutes after the day's latest range, one hour long."""
    if day is None or not day.time_ranges:
        return DEFAULT_START, DEFAULT_END
    last = sort_time_ranges(day.time_ranges)[-1]
    start = time_to_minutes(last.end_time) + GAP_MINUTES
    if start >= MINUTES_PER_DAY:
        return DEFAULT_START, DEFAULT_END
    end = min(start + DEFAULT_LENGTH_MINUTES, LAST_MINUTE)
    return minutes_to_time(start), minutes_to_time(end)


def add_time_range(template: Template, day_id: str) -> Template:
    day = _find_day(template, day_id)
    if day is None:
        return template
    start, end = next_default_range(day)
    new_range = TimeRange(id=_new_id("time"), start_time=start, end_time=end, selected=False)
    return _update_day(template, day_id, sort_time_ranges([*day.time_ranges, new_range]))


def remove_time_range(template: Template, day_id: str, range_id: str) -> Template:
    day = _find_day(template, day_id)
    if day is None:
        return template
    return _update_day(template, day_id, [r for r in day.time_ranges if r.id != range_id])


def change_time_range(
    template: Template,
    day_id: str,
    range_id: str,
    *,
    start_time: str | None = None,
    end_time: str | None = None,
) -> Template:
    day = _find_day(template, day_id)
    if day is None:
        return template
    changed: list[TimeRange] = []
    for r in day.time_ranges:
        if r.id == range_id:
            r = replace(
                r,
                start_time=start_time if start_time is not None else r.start_time,
                end_time=end_time if end_time is not None else r.end_time,
            )
        changed.append(r)
    return _update_day(template, day_id, sort_time_ranges(changed))


def validation_errors(template: Template) -> dict[str, str]:
    """Day id -> joined conflicts, for days that have any."""
    errors: dict[str, str] = {}
    for day in template.day_schedules:
        problem = day_errors(day)
        if problem:
            errors[day.id] = problem
    return errors
