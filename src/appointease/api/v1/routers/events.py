from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile
from pydantic import ValidationError as PydanticValidationError

from appointease.api.deps import CurrentProvider, ServiceApiDep
from appointease.api.v1.schemas.event import (
    EventDraftRequest,
    RepeatPreviewRequest,
    RepeatPreviewResponse,
    SubmitEventResponse,
)
from appointease.application.dto.event import ImageUpload
from appointease.application.exceptions import ValidationError
from appointease.services import event_service

router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.post("/preview", response_model=RepeatPreviewResponse)
async def preview_repeat(body: RepeatPreviewRequest) -> RepeatPreviewResponse:
    dates = event_service.preview_occurrences(
        body.start_date, body.repeat_config.to_entity(), body.limit,
    )
    return RepeatPreviewResponse(dates=dates)


@router.post("", response_model=SubmitEventResponse, status_code=201)
async def submit_event(
    _principal: CurrentProvider,
    api: ServiceApiDep,
    draft: Annotated[str, Form(description="EventDraftRequest as JSON")],
    image: Annotated[UploadFile | None, File()] = None,
) -> SubmitEventResponse:
    """Multipart form: the event draft as JSON plus an optional image."""
    try:
        body = EventDraftRequest.model_validate_json(draft)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid event draft: {exc.error_count()} error(s)") from exc

    upload = None
    if image is not None and image.filename:
        upload = ImageUpload(
            filename=image.filename,
            content=await image.read(),
            content_type=image.content_type or "application/octet-stream",
        )

    result = await event_service.submit_event(body.to_entity(), api, upload)
    if not result.success:
        raise ValidationError(result.error or "Failed to create event")
    return SubmitEventResponse(success=True, event_id=result.event_id)
