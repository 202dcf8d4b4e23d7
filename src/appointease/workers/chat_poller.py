"""Chat poller: refreshes every registered chat store on a fixed interval."""
from __future__ import annotations

import asyncio
import logging

from appointease.application.state.registry import ChatStoreRegistry

logger = logging.getLogger(__name__)


class ChatPoller:
    """Background task that refreshes unread counts and the open conversation."""

    def __init__(self, registry: ChatStoreRegistry, interval: float) -> None:
        self._registry = registry
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        self._task = asyncio.create_task(self._run(), name="chat-poller")
        logger.info("Chat poller started (interval=%.1fs)", self._interval)

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Chat poller stopped")

    async def poll_once(self) -> int:
        """Poll every store once; returns how many were polled."""
        polled = 0
        for key, store in self._registry.items():
            try:
                await store.poll()
                polled += 1
            except Exception:
                logger.exception("Error polling chat store for user %s", store.user_id)
                continue
            # Session expired; the next request with a fresh token recreates it.
            if store.auth_rejected:
                self._registry.remove(key)
                logger.info("Evicted chat store %s after the backend rejected its token", key)
        return polled

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            await self.poll_once()
