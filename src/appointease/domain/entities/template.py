from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TimeRange:
    id: str
    start_time: str
    end_time: str
    selected: bool = False


@dataclass(frozen=True, slots=True)
class DaySchedule:
    id: str
    day_index: int
    time_ranges: list[TimeRange] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Template:
    """A reusable weekly availability schedule owned by a provider."""

    name: str
    day_schedules: list[DaySchedule] = field(default_factory=list)
    description: str | None = None
    id: int | None = None
