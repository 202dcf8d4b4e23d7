from __future__ import annotations

from fastapi import APIRouter, Request, Response

from appointease.api.deps import (
    ClockDep,
    CurrentProvider,
    TemplatesApiDep,
    TemplateStoreDep,
)
from appointease.api.v1.schemas.template import TemplateValidationResponse
from appointease.application.exceptions import NotFoundError
from appointease.infrastructure.http.mappers import payload_to_template, template_to_payload
from appointease.infrastructure.http.schemas import TemplatePayload
from appointease.services import template_editor, template_service

router = APIRouter(prefix="/api/v1/templates", tags=["templates"])


@router.get("", response_model=list[TemplatePayload])
async def list_templates(principal: CurrentProvider, store: TemplateStoreDep) -> list[TemplatePayload]:
    templates = await template_service.load_templates(store, principal.user_id)
    return [template_to_payload(t) for t in templates]


@router.put("", response_model=list[TemplatePayload])
async def save_template(
    body: TemplatePayload,
    principal: CurrentProvider,
    store: TemplateStoreDep,
) -> list[TemplatePayload]:
    templates = await template_service.load_templates(store, principal.user_id)
    templates = template_service.save_template(templates, payload_to_template(body))
    await template_service.store_templates(store, principal.user_id, templates)
    return [template_to_payload(t) for t in templates]


@router.delete("/{name}", response_model=list[TemplatePayload])
async def delete_template(
    name: str,
    principal: CurrentProvider,
    store: TemplateStoreDep,
) -> list[TemplatePayload]:
    templates = await template_service.load_templates(store, principal.user_id)
    templates = template_service.delete_template(templates, name)
    await template_service.store_templates(store, principal.user_id, templates)
    return [template_to_payload(t) for t in templates]


@router.post("/validate", response_model=TemplateValidationResponse)
async def validate_template(body: TemplatePayload, _principal: CurrentProvider) -> TemplateValidationResponse:
    errors = template_editor.validation_errors(payload_to_template(body))
    return TemplateValidationResponse(valid=not errors, errors=errors)


@router.get("/export")
async def export_templates(
    principal: CurrentProvider,
    store: TemplateStoreDep,
    clock: ClockDep,
) -> Response:
    templates = await template_service.load_templates(store, principal.user_id)
    filename = template_service.export_filename(clock.today())
    return Response(
        content=template_service.export_templates(templates),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=list[TemplatePayload])
async def import_templates(
    request: Request,
    principal: CurrentProvider,
    store: TemplateStoreDep,
) -> list[TemplatePayload]:
    templates = template_service.import_templates(await request.body())
    await template_service.store_templates(store, principal.user_id, templates)
    return [template_to_payload(t) for t in templates]


@router.post("/{name}/publish", response_model=TemplatePayload)
async def publish_template(
    name: str,
    principal: CurrentProvider,
    store: TemplateStoreDep,
    api: TemplatesApiDep,
) -> TemplatePayload:
    templates = await template_service.load_templates(store, principal.user_id)
    template = next((t for t in templates if t.name == name), None)
    if template is None:
        raise NotFoundError(f"Template {name!r} not found")
    stored = await template_service.publish_template(api, template)
    return template_to_payload(stored)


@router.get("/remote", response_model=list[TemplatePayload])
async def list_remote_templates(_principal: CurrentProvider, api: TemplatesApiDep) -> list[TemplatePayload]:
    return [template_to_payload(t) for t in await api.get_templates()]
