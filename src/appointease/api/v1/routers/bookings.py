from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter

from appointease.api.deps import AppointmentApiDep, AuthApiDep, CalendarApiDep, CurrentPrincipal
from appointease.api.v1.schemas.booking import (
    BookAppointmentRequest,
    PayAppointmentRequest,
    SessionResponse,
)
from appointease.domain.value_objects.enums import CalendarView

router = APIRouter(prefix="/api/v1", tags=["bookings"])


@router.get("/session", response_model=SessionResponse)
async def session(principal: CurrentPrincipal, api: AuthApiDep) -> SessionResponse:
    """Who the token belongs to, and whether the backend still accepts it."""
    return SessionResponse(
        user_id=principal.user_id,
        role=principal.role,
        name=principal.name,
        valid=await api.validate_token(),
    )


@router.get("/calendar")
async def get_calendar(
    api: CalendarApiDep,
    day: date,
    view: CalendarView = CalendarView.MONTH,
) -> Any:
    return await api.get_calendar(day, view)


@router.post("/appointments", status_code=201)
async def book_appointment(body: BookAppointmentRequest, api: AppointmentApiDep) -> Any:
    return await api.book_appointment(
        body.service_id,
        body.start_time,
        body.template_id,
        body.slot_id,
        body.day_id,
        body.segment_id,
        body.notes,
    )


@router.post("/appointments/{appointment_id}/pay")
async def pay_appointment(
    appointment_id: str,
    body: PayAppointmentRequest,
    api: AppointmentApiDep,
) -> Any:
    return await api.pay_appointment(appointment_id, body.payment_details)
