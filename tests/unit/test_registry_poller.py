from __future__ import annotations

import asyncio

import httpx
import pytest

from appointease.application.dto.principal import Principal
from appointease.application.exceptions import BackendUnavailableError, ForbiddenError
from appointease.application.state.registry import ChatStoreRegistry
from appointease.domain.value_objects.enums import ConnectionStatus, UserRole
from appointease.infrastructure.http.chat import ChatApi
from appointease.workers.chat_poller import ChatPoller
from tests.conftest import PROVIDER_ID, USER_ID, FakeChatApi, make_message


def _registry(apis: dict[str, FakeChatApi]) -> ChatStoreRegistry:
    def factory(principal: Principal) -> FakeChatApi:
        return apis.setdefault(principal.user_id, FakeChatApi(user_id=principal.user_id))

    return ChatStoreRegistry(factory)


@pytest.mark.asyncio
async def test_acquire_creates_and_connects_once(user_principal):
    apis: dict[str, FakeChatApi] = {}
    registry = _registry(apis)

    first, second = await asyncio.gather(
        registry.acquire(user_principal), registry.acquire(user_principal),
    )

    assert first is second
    assert len(registry) == 1
    assert apis[user_principal.user_id].count("get_unread_count") == 1
    assert first.connection_status == ConnectionStatus.CONNECTED


@pytest.mark.asyncio
async def test_separate_stores_per_account(user_principal, provider_principal):
    registry = _registry({})

    user_store = await registry.acquire(user_principal)
    provider_store = await registry.acquire(provider_principal)

    assert user_store is not provider_store
    registry.remove(user_principal.principal_key)
    assert registry.get(user_principal.principal_key) is None
    assert list(registry) == [provider_store]


@pytest.mark.asyncio
async def test_poll_once_refreshes_every_store(user_principal, provider_principal):
    apis: dict[str, FakeChatApi] = {}
    registry = _registry(apis)
    user_store = await registry.acquire(user_principal)
    await registry.acquire(provider_principal)
    await user_store.load_messages(PROVIDER_ID)

    apis[user_principal.user_id].unread = 2
    apis[user_principal.user_id].conversations[PROVIDER_ID] = [make_message()]

    polled = await ChatPoller(registry, interval=60).poll_once()

    assert polled == 2
    assert user_store.unread_count == 2
    assert len(user_store.messages) == 1


@pytest.mark.asyncio
async def test_poll_degrades_status_when_backend_goes_away(user_principal):
    apis: dict[str, FakeChatApi] = {}
    registry = _registry(apis)
    store = await registry.acquire(user_principal)

    apis[user_principal.user_id].fail_with = BackendUnavailableError("down")
    await ChatPoller(registry, interval=60).poll_once()

    assert store.connection_status == ConnectionStatus.RECONNECTING


@pytest.mark.asyncio
async def test_poller_start_stop():
    registry = _registry({})
    poller = ChatPoller(registry, interval=0.01)

    await poller.start()
    await asyncio.sleep(0.05)
    await poller.stop()
    await poller.stop()


@pytest.mark.asyncio
async def test_new_session_token_rebinds_store():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        auth = request.headers["Authorization"]
        seen.append(auth)
        if auth != "Bearer new":
            return httpx.Response(401, json={"message": "Token expired"})
        if request.url.path == "/chat/unread-count":
            return httpx.Response(200, json={"count": 0})
        return httpx.Response(200, json=[{
            "id": "m1",
            "senderId": PROVIDER_ID,
            "receiverId": USER_ID,
            "content": "hi",
            "timestamp": "2024-03-15T09:00:00Z",
        }])

    async with httpx.AsyncClient(base_url="http://backend.test", transport=httpx.MockTransport(handler)) as http:
        registry = ChatStoreRegistry(lambda principal: ChatApi(http, principal.token))
        old = await registry.acquire(Principal(user_id=USER_ID, role=UserRole.USER, token="old"))
        assert old.connection_status == ConnectionStatus.ERROR
        assert old.auth_rejected is True

        store = await registry.acquire(Principal(user_id=USER_ID, role=UserRole.USER, token="new"))
        await store.load_messages(PROVIDER_ID)

    assert store is old
    assert seen[-1] == "Bearer new"
    assert [m.id for m in store.messages] == ["m1"]
    assert store.connection_status == ConnectionStatus.CONNECTED
    assert store.auth_rejected is False


@pytest.mark.asyncio
async def test_same_token_keeps_client(user_principal):
    built: list[str] = []

    def factory(principal: Principal) -> FakeChatApi:
        built.append(principal.token)
        return FakeChatApi()

    registry = ChatStoreRegistry(factory)
    await registry.acquire(user_principal)
    await registry.acquire(user_principal)

    assert built == [user_principal.token]


@pytest.mark.asyncio
async def test_rejected_store_is_evicted_and_not_polled_again(user_principal, provider_principal):
    apis: dict[str, FakeChatApi] = {}
    registry = _registry(apis)
    await registry.acquire(user_principal)
    await registry.acquire(provider_principal)
    poller = ChatPoller(registry, interval=60)

    apis[user_principal.user_id].fail_with = ForbiddenError("Token expired")
    await poller.poll_once()

    assert registry.get(user_principal.principal_key) is None
    assert len(registry) == 1

    calls_before = len(apis[user_principal.user_id].calls)
    assert await poller.poll_once() == 1
    assert len(apis[user_principal.user_id].calls) == calls_before


@pytest.mark.asyncio
async def test_evicted_account_gets_fresh_store(user_principal):
    apis: dict[str, FakeChatApi] = {}
    registry = _registry(apis)
    first = await registry.acquire(user_principal)
    apis[user_principal.user_id].fail_with = ForbiddenError("Token expired")
    await ChatPoller(registry, interval=60).poll_once()

    apis[user_principal.user_id].fail_with = None
    second = await registry.acquire(user_principal)

    assert second is not first
    assert second.connection_status == ConnectionStatus.CONNECTED
