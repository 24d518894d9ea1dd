"""
Read cache - Compute a value once and share it with every caller.

Concurrent callers await the same in-flight task rather than starting a
second computation. A failed computation is dropped so the next caller
retries it.
"""

import asyncio
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from loguru import logger

T = TypeVar("T")


class ReadCache(Generic[T]):
    """Lazily computed, memoized async value."""

    def __init__(self, factory: Callable[[], Awaitable[T]]):
        self._factory = factory
        self._task: Optional[asyncio.Task] = None

    async def get_value(self) -> T:
        """Return the cached value, computing it on first access."""
        if self._task is None:
            self._task = asyncio.ensure_future(self._factory())

        task = self._task
        try:
            return await asyncio.shield(task)
        except Exception:
            if self._task is task:
                logger.debug("ReadCache computation failed, will retry on next access")
                self._task = None
            raise
