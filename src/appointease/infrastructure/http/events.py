from __future__ import annotations

import logging
from typing import Any

from appointease.infrastructure.http.client import ApiClient
from appointease.infrastructure.http.schemas import StarredPayload

logger = logging.getLogger(__name__)


class EventApi(ApiClient):
    async def create_event(self, event_data: dict[str, Any]) -> Any:
        return await self._json("POST", "/event/create", json=event_data)

    async def update_event(self, event_id: str, event_data: dict[str, Any]) -> Any:
        return await self._json("PUT", f"/event/{event_id}/update", json=event_data)

    async def get_events(self) -> list[dict[str, Any]]:
        return await self._json("GET", "/event/list") or []

    async def get_event(self, event_id: str) -> dict[str, Any]:
        return await self._json("GET", f"/event/{event_id}")

    async def delete_event(self, event_id: str) -> None:
        await self._request("DELETE", f"/event/{event_id}/delete")

    async def upload_event_image(
        self, event_id: str, filename: str, content: bytes, content_type: str,
    ) -> Any:
        files = {"image": (filename, content, content_type)}
        return await self._json("POST", f"/event/{event_id}/upload-image", files=files)

    async def is_service_starred(self, service_id: str) -> bool:
        data = await self._json("GET", f"/services/{service_id}/is-starred")
        return self._parse(StarredPayload, data or {}).is_starred

    async def toggle_star_service(self, service_id: str) -> bool:
        """Star an unstarred service or unstar a starred one. Returns the new state."""
        starred = await self.is_service_starred(service_id)
        method = "DELETE" if starred else "POST"
        await self._request(method, f"/services/{service_id}/star")
        logger.debug("Service %s starred=%s", service_id, not starred)
        return not starred

    async def get_starred_services(self) -> list[dict[str, Any]]:
        return await self._json("GET", "/services/starred") or []
