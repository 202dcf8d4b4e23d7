from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query

from appointease.api.deps import EventApiDep, SearchApiDep

router = APIRouter(prefix="/api/v1", tags=["discovery"])


@router.get("/search/suggestions")
async def search_suggestions(api: SearchApiDep, q: str = Query(..., min_length=1)) -> Any:
    return await api.get_suggestions(q)


@router.get("/search")
async def search(
    api: SearchApiDep,
    q: str = Query(..., min_length=1),
    result_type: str | None = Query(None, alias="type"),
) -> Any:
    return await api.get_search_results(q, result_type)


@router.get("/services/starred")
async def starred_services(api: EventApiDep) -> Any:
    return await api.get_starred_services()


@router.post("/services/{service_id}/star")
async def toggle_star(service_id: str, api: EventApiDep) -> dict[str, bool]:
    return {"starred": await api.toggle_star_service(service_id)}
