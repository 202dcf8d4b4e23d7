from __future__ import annotations

from dataclasses import dataclass

from appointease.domain.value_objects.enums import UserRole


@dataclass(frozen=True, slots=True)
class Principal:
    """Signed-in account extracted from the session token."""

    user_id: str
    role: UserRole
    token: str
    name: str | None = None

    @property
    def is_provider(self) -> bool:
        return self.role == UserRole.PROVIDER

    @property
    def principal_key(self) -> str:
        """Unique key for the chat store registry."""
        return f"{self.role}:{self.user_id}"
