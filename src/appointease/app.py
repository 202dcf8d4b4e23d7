from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as aioredis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from appointease.api.middleware.correlation_id import CorrelationIdMiddleware
from appointease.api.middleware.metrics import RequestTimingMiddleware
from appointease.api.v1.routers import bookings, chat, discovery, events, health, templates
from appointease.application.dto.principal import Principal
from appointease.application.exceptions import (
    BackendUnavailableError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from appointease.application.state.registry import ChatStoreRegistry
from appointease.config import settings
from appointease.infrastructure.http.chat import ChatApi
from appointease.infrastructure.http.client import create_http_client
from appointease.infrastructure.storage.redis_templates import RedisTemplateStore
from appointease.workers.chat_poller import ChatPoller

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    app.state.http = create_http_client(settings)
    logger.info("Backend client created for %s", settings.api_url)

    app.state.redis = aioredis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
    )
    app.state.template_store = RedisTemplateStore(app.state.redis, settings.TEMPLATES_KEY_PREFIX)
    logger.info("Redis connection pool created")

    def _chat_api(principal: Principal) -> ChatApi:
        return ChatApi(app.state.http, principal.token)

    app.state.chat_registry = ChatStoreRegistry(_chat_api)
    poller = ChatPoller(app.state.chat_registry, settings.CHAT_POLL_INTERVAL)
    await poller.start()
    app.state.chat_poller = poller

    yield

    await poller.stop()
    await app.state.redis.aclose()
    await app.state.http.aclose()
    logger.info("Redis connection pool and backend client closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="AppointEase Client",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(templates.router)
    app.include_router(discovery.router)
    app.include_router(events.router)
    app.include_router(bookings.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(ForbiddenError)
    async def _forbidden(_req: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": exc.detail})

    @app.exception_handler(ConflictError)
    async def _conflict(_req: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})

    @app.exception_handler(BackendUnavailableError)
    async def _unavailable(_req: Request, exc: BackendUnavailableError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": exc.detail})

    @app.exception_handler(UpstreamError)
    async def _upstream(_req: Request, exc: UpstreamError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": exc.detail})
