from __future__ import annotations

from pydantic import BaseModel


class TemplateValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, str]
