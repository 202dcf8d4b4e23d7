from __future__ import annotations

from datetime import date
from typing import Any

from appointease.domain.value_objects.enums import CalendarView
from appointease.infrastructure.http.client import ApiClient


class CalendarApi(ApiClient):
    async def get_calendar(self, day: date | str, view: CalendarView = CalendarView.MONTH) -> Any:
        formatted = day.strftime("%Y-%m-%d") if isinstance(day, date) else day
        params = {"date": formatted, "type": str(view)}
        return await self._json("GET", "/calendar/get", params=params)
