from __future__ import annotations

import pytest

from appointease.infrastructure.storage.redis_templates import RedisTemplateStore
from appointease.services import template_service
from tests.conftest import make_template


class FakeRedis:
    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value


@pytest.mark.asyncio
async def test_templates_are_keyed_per_provider():
    redis = FakeRedis()
    store = RedisTemplateStore(redis, "providerTemplates")

    await template_service.store_templates(store, "provider1", [make_template("A")])

    assert list(redis.data) == ["providerTemplates:provider1"]
    assert [t.name for t in await template_service.load_templates(store, "provider1")] == ["A"]
    assert await store.load("provider2") is None
