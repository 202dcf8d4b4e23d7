from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from appointease.domain.value_objects.enums import RepeatEndType, RepeatFrequency


@dataclass(frozen=True, slots=True)
class RepeatConfig:
    enabled: bool = False
    frequency: RepeatFrequency = RepeatFrequency.WEEKLY
    interval: int = 1  # every N days/weeks/months
    end_date: date | None = None
    end_after: int = 1  # occurrences, used with RepeatEndType.OCCURRENCES
    end_type: RepeatEndType = RepeatEndType.NEVER


@dataclass(frozen=True, slots=True)
class EventDraft:
    name: str
    description: str
    duration: int
    price: float | str
    start_date: date | None
    schedule_data: list[dict[str, Any]] = field(default_factory=list)
    repeat_config: RepeatConfig = field(default_factory=RepeatConfig)
