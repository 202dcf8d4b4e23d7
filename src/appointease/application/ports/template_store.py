from __future__ import annotations

from typing import Protocol


class TemplateStore(Protocol):
    """Raw key-value persistence for a provider's saved templates."""

    async def load(self, user_id: str) -> str | None: ...

    async def save(self, user_id: str, raw: str) -> None: ...
