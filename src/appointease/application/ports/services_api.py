from __future__ import annotations

from typing import Any, Protocol


class ServicesGateway(Protocol):
    async def create_service(self, service_data: dict[str, Any]) -> dict[str, Any]: ...

    async def upload_service_image(
        self, service_id: str, filename: str, content: bytes, content_type: str,
    ) -> dict[str, Any]: ...
