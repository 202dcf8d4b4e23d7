"""In-process registry of chat stores, one per signed-in account."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterator

from appointease.application.dto.principal import Principal
from appointease.application.ports.chat_api import ChatApi
from appointease.application.state.chat_store import ChatStore

logger = logging.getLogger(__name__)

ChatApiFactory = Callable[[Principal], ChatApi]


class ChatStoreRegistry:
    """Tracks chat stores per principal so polling and views share state.

    A store always talks to the backend with the token of the latest request
    for its account.
    """

    def __init__(self, api_factory: ChatApiFactory) -> None:
        self._api_factory = api_factory
        self._stores: dict[str, ChatStore] = {}
        self._tokens: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def acquire(self, principal: Principal) -> ChatStore:
        """Return the principal's store, creating and connecting it on first use."""
        key = principal.principal_key
        store = self._stores.get(key)
        if store is not None:
            self._refresh_token(key, store, principal)
            return store

        created = False
        async with self._lock:
            store = self._stores.get(key)
            if store is None:
                store = ChatStore(self._api_factory(principal), principal.user_id)
                self._stores[key] = store
                self._tokens[key] = principal.token
                created = True
                logger.debug("Chat store created: %s (total=%d)", key, len(self._stores))
        if created:
            await store.connect()
        else:
            self._refresh_token(key, store, principal)
        return store

    def _refresh_token(self, key: str, store: ChatStore, principal: Principal) -> None:
        if self._tokens.get(key) == principal.token:
            return
        store.rebind(self._api_factory(principal))
        self._tokens[key] = principal.token
        logger.info("Chat store %s rebound to a new session token", key)

    def get(self, principal_key: str) -> ChatStore | None:
        return self._stores.get(principal_key)

    def remove(self, principal_key: str) -> None:
        self._tokens.pop(principal_key, None)
        if self._stores.pop(principal_key, None) is not None:
            logger.debug("Chat store removed: %s", principal_key)

    def items(self) -> list[tuple[str, ChatStore]]:
        return list(self._stores.items())

    def __iter__(self) -> Iterator[ChatStore]:
        return iter(list(self._stores.values()))

    def __len__(self) -> int:
        return len(self._stores)
