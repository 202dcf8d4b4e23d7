"""Saved template lists in Redis, one key per provider."""
from __future__ import annotations

import logging

import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class RedisTemplateStore:
    """Implements application.ports.template_store.TemplateStore."""

    def __init__(self, redis: aioredis.Redis, key_prefix: str) -> None:
        self._redis = redis
        self._key_prefix = key_prefix

    def _key(self, user_id: str) -> str:
        return f"{self._key_prefix}:{user_id}"

    async def load(self, user_id: str) -> str | None:
        return await self._redis.get(self._key(user_id))

    async def save(self, user_id: str, raw: str) -> None:
        await self._redis.set(self._key(user_id), raw)
        logger.debug("Saved templates for %s (%d bytes)", user_id, len(raw))
