from __future__ import annotations

import logging
from datetime import date

from appointease.application.exceptions import NotFoundError, ValidationError
from appointease.application.policies.template_rules import validate_template
from appointease.application.ports.template_store import TemplateStore
from appointease.application.ports.templates_api import TemplatesGateway
from appointease.domain.entities.template import Template
from appointease.infrastructure.serialization.templates import (
    deserialize_templates,
    serialize_templates,
)

logger = logging.getLogger(__name__)

EXPORT_FILENAME_PREFIX = "calendar-templates"


def save_template(templates: list[Template], template: Template) -> list[Template]:
    """Validate ``template`` and upsert it by name. Returns the new list."""
    validate_template(template)
    if any(t.name == template.name for t in templates):
        return [template if t.name == template.name else t for t in templates]
    return [*templates, template]


def delete_template(templates: list[Template], name: str) -> list[Template]:
    remaining = [t for t in templates if t.name != name]
    if len(remaining) == len(templates):
        raise NotFoundError(f"Template {name!r} not found")
    return remaining


def export_templates(templates: list[Template]) -> str:
    """JSON array of exactly the given templates, in order."""
    return serialize_templates(templates)


def export_filename(today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}-{today.isoformat()}.json"


def import_templates(raw: str | bytes) -> list[Template]:
    """Parse an exported document. The result replaces the current list."""
    templates = deserialize_templates(raw)
    logger.info("Imported %d templates", len(templates))
    return templates


async def load_templates(store: TemplateStore, user_id: str) -> list[Template]:
    raw = await store.load(user_id)
    if not raw:
        return []
    try:
        return deserialize_templates(raw)
    except ValidationError:
        logger.exception("Error loading saved templates for %s", user_id)
        return []


async def store_templates(store: TemplateStore, user_id: str, templates: list[Template]) -> None:
    await store.save(user_id, serialize_templates(templates))


async def publish_template(api: TemplatesGateway, template: Template) -> Template:
    """Validate and push one template to the backend; returns the stored copy."""
    validate_template(template)
    return await api.upsert_template(template)
