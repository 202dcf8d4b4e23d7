from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from appointease.infrastructure.http.client import ApiClient

logger = logging.getLogger(__name__)


class AppointmentApi(ApiClient):
    async def create_appointment(self, appointment_data: dict[str, Any]) -> Any:
        return await self._json("POST", "/appointments/create", json=appointment_data)

    async def book_appointment(
        self,
        service_id: str,
        start_time: datetime,
        template_id: int,
        slot_id: str,
        day_id: str,
        segment_id: str,
        notes: str | None = None,
    ) -> Any:
        body = {
            "serviceId": service_id,
            "startTime": start_time.isoformat(),
            "templateId": template_id,
            "slotId": slot_id,
            "dayId": day_id,
            "segmentId": segment_id,
            "notes": notes,
        }
        return await self._json("POST", "/appointment/book", json=body)

    async def pay_appointment(self, appointment_id: str, payment_details: dict[str, Any]) -> Any:
        body = {"appointmentId": appointment_id, **payment_details}
        logger.debug("Payment request for appointment %s", appointment_id)
        return await self._json("POST", "/appointment/pay", json=body)
