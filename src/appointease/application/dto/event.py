from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SubmitResult:
    success: bool
    event_id: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ImageUpload:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
