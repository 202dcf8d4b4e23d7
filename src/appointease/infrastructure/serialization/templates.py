"""JSON document format for exported template lists."""
from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from appointease.application.exceptions import ValidationError
from appointease.domain.entities.template import Template
from appointease.infrastructure.http.mappers import payload_to_template, template_to_payload
from appointease.infrastructure.http.schemas import TemplatePayload

_templates_adapter = TypeAdapter(list[TemplatePayload])


def serialize_templates(templates: list[Template]) -> str:
    payloads = [template_to_payload(t) for t in templates]
    return _templates_adapter.dump_json(payloads, by_alias=True, exclude_none=True).decode()


def _looks_like_template(item: Any) -> bool:
    return (
        isinstance(item, dict)
        and isinstance(item.get("name"), str)
        and isinstance(item.get("daySchedules"), list)
    )


def deserialize_templates(raw: str | bytes) -> list[Template]:
    """Parse an exported document, rejecting anything that is not a template list."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ValidationError("Failed to import templates. The file format is invalid.") from exc

    if not isinstance(data, list) or not all(_looks_like_template(t) for t in data):
        raise ValidationError("Invalid template format")

    try:
        payloads = _templates_adapter.validate_python(data)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid template format: {exc.error_count()} error(s)") from exc
    return [payload_to_template(p) for p in payloads]
