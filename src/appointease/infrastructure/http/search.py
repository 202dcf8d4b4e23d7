from __future__ import annotations

from typing import Any

from appointease.infrastructure.http.client import ApiClient

SUGGESTION_LIMIT = 5


class SearchApi(ApiClient):
    async def get_suggestions(self, query: str) -> Any:
        params = {"q": query, "fuzzy": "true", "limit": SUGGESTION_LIMIT}
        return await self._json("GET", "/search/suggest", params=params) or []

    async def get_search_results(self, query: str, result_type: str | None = None) -> Any:
        params: dict[str, Any] = {"q": query}
        if result_type:
            params["type"] = result_type
        return await self._json("GET", "/search", params=params) or []
