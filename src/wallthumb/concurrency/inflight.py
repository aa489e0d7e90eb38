"""Per-key de-duplication of concurrent async work."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class InFlightRegistry(Generic[T]):
    """Collapses concurrent calls for the same key into one task.

    The first caller starts the work; later callers for the same key await
    the same task. The entry is dropped as soon as the task finishes,
    whether it succeeded or failed, so nothing outlives its event loop.
    """

    def __init__(self) -> None:
        self._pending: dict[str, asyncio.Task[T]] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, key: str) -> bool:
        return key in self._pending

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        task = self._pending.get(key)
        if task is None:
            task = asyncio.ensure_future(factory())
            self._pending[key] = task
            task.add_done_callback(lambda done, k=key: self._forget(k, done))
        # Shield so one cancelled waiter does not cancel the shared work.
        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task[T]) -> None:
        if self._pending.get(key) is task:
            del self._pending[key]
        # Waiters may all have been cancelled; mark a failure as retrieved.
        if not task.cancelled():
            task.exception()
