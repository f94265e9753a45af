# prompthub/client/cache.py
"""
Request-coalescing cache.

Per key it remembers the last good value, the last error and at most one
in-flight fetch. Callers arriving while a fetch is running share its result;
callers arriving within the dedup window of a successful fetch get the cached
value without any request.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from tenacity import AsyncRetrying, before_sleep_log, stop_after_attempt, wait_fixed

from prompthub.client.policy import FetchPolicy
from prompthub.utils.logger import logger

Fetcher = Callable[[], Awaitable[Any]]

@dataclass
class FetchState:
    data: Any = None
    error: Optional[BaseException] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

class _Entry:
    def __init__(self):
        self.value: Any = None
        self.error: Optional[BaseException] = None
        self.resolved_at: Optional[float] = None
        self.in_flight: Optional[asyncio.Task] = None

class DedupingCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic, sleep=asyncio.sleep):
        self._clock = clock
        self._sleep = sleep
        self._entries: Dict[str, _Entry] = {}
        self._subscriptions: Dict[str, Tuple[Fetcher, FetchPolicy]] = {}

    async def get(self, key: str, fetcher: Fetcher, policy: FetchPolicy) -> FetchState:
        self._subscriptions[key] = (fetcher, policy)
        entry = self._entries.setdefault(key, _Entry())

        if entry.in_flight is None:
            if entry.resolved_at is not None and self._clock() - entry.resolved_at < policy.dedup_interval:
                return FetchState(data=entry.value)
            entry.in_flight = asyncio.ensure_future(self._revalidate(key, entry, fetcher, policy))

        # A cancelled caller must not take the shared fetch down with it
        return await asyncio.shield(entry.in_flight)

    def peek(self, key: str) -> FetchState:
        entry = self._entries.get(key)
        if entry is None:
            return FetchState()
        return FetchState(data=entry.value, error=entry.error)

    def invalidate(self, key: str) -> None:
        """Make the next get() for key fetch again. The stale value stays readable."""
        entry = self._entries.get(key)
        if entry is not None:
            entry.resolved_at = None

    def mutate(self, key: str, data: Any) -> None:
        """Replace the cached value locally, e.g. after a write the caller already knows the result of."""
        entry = self._entries.setdefault(key, _Entry())
        entry.value = data
        entry.error = None
        entry.resolved_at = self._clock()

    async def on_focus(self) -> List[FetchState]:
        return await self._revalidate_where(lambda policy: policy.revalidate_on_focus)

    async def on_reconnect(self) -> List[FetchState]:
        return await self._revalidate_where(lambda policy: policy.revalidate_on_reconnect)

    async def _revalidate_where(self, predicate) -> List[FetchState]:
        keys = [key for key, (_, policy) in self._subscriptions.items() if predicate(policy)]
        for key in keys:
            self.invalidate(key)
        return list(await asyncio.gather(*(
            self.get(key, *self._subscriptions[key]) for key in keys
        )))

    async def _revalidate(self, key: str, entry: _Entry, fetcher: Fetcher, policy: FetchPolicy) -> FetchState:
        try:
            state = await self._fetch_with_retry(key, fetcher, policy)
            if state.is_error:
                entry.error = state.error
                # Keep the last good value next to the error
                return FetchState(data=entry.value, error=state.error)
            entry.value = state.data
            entry.error = None
            entry.resolved_at = self._clock()
            return state
        finally:
            entry.in_flight = None

    async def _fetch_with_retry(self, key: str, fetcher: Fetcher, policy: FetchPolicy) -> FetchState:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(1 + policy.error_retry_count),
            wait=wait_fixed(policy.error_retry_interval),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
            sleep=self._sleep,
        )
        try:
            return FetchState(data=await retrying(fetcher))
        except Exception as e:
            logger.error(f" Giving up on {key}: {e}")
            return FetchState(error=e)
