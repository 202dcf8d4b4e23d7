from __future__ import annotations

from typing import Protocol

from appointease.domain.entities.template import Template


class TemplatesGateway(Protocol):
    async def upsert_template(self, template: Template) -> Template: ...

    async def get_templates(self) -> list[Template]: ...
