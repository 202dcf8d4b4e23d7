from __future__ import annotations

from typing import Any

from appointease.domain.entities.template import Template
from appointease.infrastructure.http.client import ApiClient
from appointease.infrastructure.http.mappers import payload_to_template, template_to_payload
from appointease.infrastructure.http.schemas import TemplatePayload


class TemplatesApi(ApiClient):
    """Implements application.ports.templates_api.TemplatesGateway."""

    async def upsert_template(self, template: Template) -> Template:
        body = template_to_payload(template).model_dump(by_alias=True, exclude_none=True)
        data = await self._json("PUT", "/template/upsert", json=body)
        if not data:
            return template
        return payload_to_template(self._parse(TemplatePayload, data))

    async def get_templates(self) -> list[Template]:
        data = await self._json("GET", "/template/get")
        return [payload_to_template(p) for p in self._parse_list(TemplatePayload, data or [])]

    async def get_names(self) -> list[Any]:
        return await self._json("GET", "/template/getNames") or []

    async def get_template(self, template_id: int) -> Template:
        data = await self._json("GET", f"/template/get/{template_id}")
        return payload_to_template(self._parse(TemplatePayload, data))
