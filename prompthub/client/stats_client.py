# prompthub/client/stats_client.py
from typing import Any, Dict, Optional

import aiohttp

from prompthub.client.cache import DedupingCache, FetchState
from prompthub.client.policy import FetchPolicy, OWNER_STATS_POLICY, EXTERNAL_METRICS_POLICY

OWNER_STATS_PATH = "/api/stats"
GITHUB_STATS_PATH = "/api/github/stats"

class StatsClient:
    """Fetches statistics for one signed-in browser session.

    Usage:
        async with StatsClient("https://prompthub.example", token) as client:
            state = await client.owner_stats()
    """

    def __init__(self, base_url: str, session_token: Optional[str] = None,
                 cache: Optional[DedupingCache] = None, timeout_seconds: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session_token = session_token
        self.cache = cache or DedupingCache()
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "StatsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _http(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            headers = {"Accept": "application/json"}
            if self.session_token:
                headers["Authorization"] = f"Bearer {self.session_token}"
            self._session = aiohttp.ClientSession(headers=headers, timeout=self.timeout)
        return self._session

    async def _fetch_json(self, path: str) -> Dict[str, Any]:
        async with self._http().get(f"{self.base_url}{path}") as response:
            response.raise_for_status()
            data = await response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response from {path}: {type(data).__name__}")
        return data

    async def _get(self, path: str, policy: FetchPolicy) -> FetchState:
        return await self.cache.get(self.base_url + path, lambda: self._fetch_json(path), policy)

    async def owner_stats(self) -> FetchState:
        return await self._get(OWNER_STATS_PATH, OWNER_STATS_POLICY)

    async def github_stats(self) -> FetchState:
        return await self._get(GITHUB_STATS_PATH, EXTERNAL_METRICS_POLICY)

    def invalidate_owner_stats(self) -> None:
        self.cache.invalidate(self.base_url + OWNER_STATS_PATH)
