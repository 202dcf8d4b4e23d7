"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

import httpx
import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from appointease.application.dto.principal import Principal
from appointease.application.policies.permissions import assert_provider
from appointease.application.ports.auth import TokenDecoder
from appointease.application.ports.clock import Clock, SystemClock
from appointease.application.ports.template_store import TemplateStore
from appointease.application.state.chat_store import ChatStore
from appointease.application.state.registry import ChatStoreRegistry
from appointease.config import settings
from appointease.infrastructure.auth.session_token import SessionTokenDecoder
from appointease.infrastructure.http.appointments import AppointmentApi
from appointease.infrastructure.http.auth import AuthApi
from appointease.infrastructure.http.calendar import CalendarApi
from appointease.infrastructure.http.chat import ChatApi
from appointease.infrastructure.http.events import EventApi
from appointease.infrastructure.http.search import SearchApi
from appointease.infrastructure.http.services import ServiceApi
from appointease.infrastructure.http.templates import TemplatesApi

_bearer_scheme = HTTPBearer()

_decoder: TokenDecoder | None = None


def get_decoder() -> TokenDecoder:
    global _decoder  # noqa: PLW0603
    if _decoder is None:
        _decoder = SessionTokenDecoder(settings.JWT_SECRET, settings.JWT_ALGORITHM)
    return _decoder


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(_bearer_scheme)],
) -> Principal:
    try:
        return get_decoder().decode(credentials.credentials)
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_current_provider(principal: CurrentPrincipal) -> Principal:
    assert_provider(principal)
    return principal


CurrentProvider = Annotated[Principal, Depends(get_current_provider)]


def get_http(request: Request) -> httpx.AsyncClient:
    return request.app.state.http


HttpDep = Annotated[httpx.AsyncClient, Depends(get_http)]


def get_registry(request: Request) -> ChatStoreRegistry:
    return request.app.state.chat_registry


async def get_chat_store(
    principal: CurrentPrincipal,
    registry: Annotated[ChatStoreRegistry, Depends(get_registry)],
) -> ChatStore:
    return await registry.acquire(principal)


ChatStoreDep = Annotated[ChatStore, Depends(get_chat_store)]


def get_chat_api(principal: CurrentPrincipal, http: HttpDep) -> ChatApi:
    return ChatApi(http, principal.token)


def get_templates_api(principal: CurrentPrincipal, http: HttpDep) -> TemplatesApi:
    return TemplatesApi(http, principal.token)


def get_search_api(principal: CurrentPrincipal, http: HttpDep) -> SearchApi:
    return SearchApi(http, principal.token)


def get_event_api(principal: CurrentPrincipal, http: HttpDep) -> EventApi:
    return EventApi(http, principal.token)


def get_service_api(principal: CurrentPrincipal, http: HttpDep) -> ServiceApi:
    return ServiceApi(http, principal.token)


ChatApiDep = Annotated[ChatApi, Depends(get_chat_api)]
TemplatesApiDep = Annotated[TemplatesApi, Depends(get_templates_api)]
SearchApiDep = Annotated[SearchApi, Depends(get_search_api)]
EventApiDep = Annotated[EventApi, Depends(get_event_api)]
ServiceApiDep = Annotated[ServiceApi, Depends(get_service_api)]


def get_template_store(request: Request) -> TemplateStore:
    return request.app.state.template_store


TemplateStoreDep = Annotated[TemplateStore, Depends(get_template_store)]


def get_clock() -> Clock:
    return SystemClock()


ClockDep = Annotated[Clock, Depends(get_clock)]


def get_calendar_api(principal: CurrentPrincipal, http: HttpDep) -> CalendarApi:
    return CalendarApi(http, principal.token)


def get_appointment_api(principal: CurrentPrincipal, http: HttpDep) -> AppointmentApi:
    return AppointmentApi(http, principal.token)


def get_auth_api(principal: CurrentPrincipal, http: HttpDep) -> AuthApi:
    return AuthApi(http, principal.token)


CalendarApiDep = Annotated[CalendarApi, Depends(get_calendar_api)]
AppointmentApiDep = Annotated[AppointmentApi, Depends(get_appointment_api)]
AuthApiDep = Annotated[AuthApi, Depends(get_auth_api)]
