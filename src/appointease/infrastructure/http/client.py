"""Authenticated JSON-over-HTTPS access to the AppointEase backend."""
from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from appointease.application.exceptions import (
    BackendUnavailableError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from appointease.config import Settings
from appointease.infrastructure.http.correlation import HEADER, correlation_id_ctx

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def create_http_client(settings: Settings, **kwargs: Any) -> httpx.AsyncClient:
    """Shared connection pool for every API client."""
    return httpx.AsyncClient(
        base_url=settings.api_url,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        **kwargs,
    )


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            if body.get(key):
                return str(body[key])
    return response.reason_phrase


def raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    detail = _error_detail(response)
    code = response.status_code
    if code == 404:
        raise NotFoundError(detail)
    if code in (401, 403):
        raise ForbiddenError(detail)
    if code == 409:
        raise ConflictError(detail)
    if code in (400, 422):
        raise ValidationError(detail)
    raise UpstreamError(detail, status_code=code)


class ApiClient:
    """Base for the thin per-resource clients.

    Adds the bearer token when one is known, forwards the current request's
    correlation id and maps failures onto application exceptions.
    """

    def __init__(self, http: httpx.AsyncClient, token: str | None = None) -> None:
        self._http = http
        self._token = token

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        cid = correlation_id_ctx.get()
        if cid:
            headers[HEADER] = cid
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._http.request(
                method,
                path,
                json=json,
                params=params,
                files=files,
                headers=self._headers(),
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise BackendUnavailableError(f"{method} {path}: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        raise_for_status(response)
        return response

    async def _json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._request(method, path, **kwargs)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"{method} {path}: response is not JSON", response.status_code) from exc

    @staticmethod
    def _parse(model: type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            raise UpstreamError(f"Malformed {model.__name__} from backend") from exc

    @classmethod
    def _parse_list(cls, model: type[ModelT], data: Any) -> list[ModelT]:
        if not isinstance(data, list):
            raise UpstreamError(f"Expected a list of {model.__name__} from backend")
        return [cls._parse(model, item) for item in data]
