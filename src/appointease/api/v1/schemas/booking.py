from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class BookAppointmentRequest(BaseModel):
    service_id: str
    start_time: datetime
    template_id: int
    slot_id: str
    day_id: str
    segment_id: str
    notes: str | None = None


class PayAppointmentRequest(BaseModel):
    payment_details: dict = {}


class SessionResponse(BaseModel):
    user_id: str
    role: str
    name: str | None
    valid: bool
