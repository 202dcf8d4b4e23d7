from __future__ import annotations

from typing import Any

from appointease.infrastructure.http.client import ApiClient


class ServiceApi(ApiClient):
    """Provider services. Implements application.ports.services_api.ServicesGateway."""

    async def create_service(self, service_data: dict[str, Any]) -> dict[str, Any]:
        return await self._json("POST", "/services/create", json=service_data) or {}

    async def update_service(self, service_id: str, service_data: dict[str, Any]) -> Any:
        return await self._json("PUT", f"/services/{service_id}/update", json=service_data)

    async def get_services(self) -> list[dict[str, Any]]:
        return await self._json("GET", "/services/get-all") or []

    async def get_service(self, service_id: str) -> dict[str, Any]:
        return await self._json("GET", f"/services/{service_id}")

    async def delete_service(self, service_id: str) -> None:
        await self._request("DELETE", f"/services/{service_id}/delete")

    async def upload_service_image(
        self, service_id: str, filename: str, content: bytes, content_type: str,
    ) -> dict[str, Any]:
        files = {"image": (filename, content, content_type)}
        return await self._json("POST", f"/services/{service_id}/upload-image", files=files) or {}
