from __future__ import annotations

from typing import Any

from appointease.application.exceptions import ForbiddenError
from appointease.infrastructure.http.client import ApiClient


class AuthApi(ApiClient):
    async def login(self, email: str, password: str) -> Any:
        return await self._json("POST", "/login", json={"email": email, "password": password})

    async def register(self, email: str, password: str) -> Any:
        return await self._json("POST", "/register", json={"email": email, "password": password})

    async def logout(self) -> None:
        await self._request("POST", "/logout")

    async def validate_token(self) -> bool:
        """True when the backend still accepts the current token."""
        try:
            await self._request("GET", "/validate-token")
        except ForbiddenError:
            return False
        return True
