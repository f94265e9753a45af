import asyncio
import logging

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from prompthub.client import DedupingCache, FetchPolicy, StatsClient, OWNER_STATS_POLICY

pytestmark = pytest.mark.anyio


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


class CountingFetcher:
    def __init__(self, failures=0, delay=0.0):
        self.calls = 0
        self.failures = failures
        self.delay = delay

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.calls <= self.failures:
            raise RuntimeError(f"failure {self.calls}")
        return {"call": self.calls}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def cache(clock, sleep):
    return DedupingCache(clock=clock, sleep=sleep)


async def test_simultaneous_requests_share_one_fetch(cache):
    fetcher = CountingFetcher(delay=0.05)

    first, second = await asyncio.gather(
        cache.get("/api/stats", fetcher, OWNER_STATS_POLICY),
        cache.get("/api/stats", fetcher, OWNER_STATS_POLICY),
    )

    assert fetcher.calls == 1
    assert first.data == second.data == {"call": 1}


async def test_resolved_value_reused_inside_window(cache, clock):
    fetcher = CountingFetcher()
    await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)

    clock.now += 299
    state = await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)
    assert fetcher.calls == 1
    assert state.data == {"call": 1}

    clock.now += 2
    state = await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)
    assert fetcher.calls == 2
    assert state.data == {"call": 2}


async def test_cancelled_caller_leaves_shared_fetch_running(cache):
    fetcher = CountingFetcher(delay=0.05)

    leader = asyncio.ensure_future(cache.get("/api/stats", fetcher, OWNER_STATS_POLICY))
    await asyncio.sleep(0)
    follower = asyncio.ensure_future(cache.get("/api/stats", fetcher, OWNER_STATS_POLICY))
    await asyncio.sleep(0)
    leader.cancel()

    state = await follower

    assert leader.cancelled()
    assert not state.is_error
    assert state.data == {"call": 1}
    assert fetcher.calls == 1
    assert cache.peek("/api/stats").data == {"call": 1}


async def test_one_retry_then_error_state(cache, sleep, caplog):
    fetcher = CountingFetcher(failures=10)

    with caplog.at_level(logging.WARNING, logger="prompthub"):
        state = await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)

    assert fetcher.calls == 2
    assert sleep.delays == [OWNER_STATS_POLICY.error_retry_interval]
    assert state.is_error
    assert state.data is None
    assert isinstance(state.error, RuntimeError)
    assert [r.levelno for r in caplog.records if r.name == "prompthub"] == [logging.WARNING, logging.ERROR]


async def test_no_retry_when_count_is_zero(cache, sleep):
    policy = FetchPolicy(dedup_interval=300, error_retry_count=0)
    fetcher = CountingFetcher(failures=10)

    state = await cache.get("/api/stats", fetcher, policy)

    assert fetcher.calls == 1
    assert sleep.delays == []
    assert state.is_error


async def test_retry_recovers(cache):
    fetcher = CountingFetcher(failures=1)

    state = await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)

    assert not state.is_error
    assert state.data == {"call": 2}


async def test_error_keeps_last_good_value(cache, clock):
    good = CountingFetcher()
    await cache.get("/api/github/stats", good, OWNER_STATS_POLICY)
    cache.invalidate("/api/github/stats")

    bad = CountingFetcher(failures=10)
    state = await cache.get("/api/github/stats", bad, OWNER_STATS_POLICY)

    assert state.is_error
    assert state.data == {"call": 1}


async def test_focus_and_reconnect_do_not_revalidate_by_default(cache):
    fetcher = CountingFetcher()
    await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)

    assert await cache.on_focus() == []
    assert await cache.on_reconnect() == []
    assert fetcher.calls == 1


async def test_focus_revalidates_when_enabled(cache):
    policy = FetchPolicy(dedup_interval=300, revalidate_on_focus=True)
    fetcher = CountingFetcher()
    await cache.get("/api/stats", fetcher, policy)

    states = await cache.on_focus()

    assert fetcher.calls == 2
    assert states[0].data == {"call": 2}


async def test_invalidate_and_mutate(cache):
    fetcher = CountingFetcher()
    await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)

    cache.mutate("/api/stats", {"promptsCount": 9})
    assert (await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)).data == {"promptsCount": 9}

    cache.invalidate("/api/stats")
    assert cache.peek("/api/stats").data == {"promptsCount": 9}
    await cache.get("/api/stats", fetcher, OWNER_STATS_POLICY)
    assert fetcher.calls == 2


def test_policy_rejects_negative_values():
    with pytest.raises(ValueError):
        FetchPolicy(dedup_interval=-1)
    with pytest.raises(ValueError):
        FetchPolicy(dedup_interval=10, error_retry_count=-1)


@pytest.fixture
async def stats_backend():
    hits = []

    async def owner_stats(request):
        hits.append(request.headers.get("Authorization"))
        await asyncio.sleep(0.05)
        return web.json_response({"promptsCount": 3, "likesCount": 1, "joinedAt": "2024-01-15T00:00:00"})

    app = web.Application()
    app.router.add_get("/api/stats", owner_stats)
    server = TestServer(app)
    await server.start_server()
    yield str(server.make_url("")), hits
    await server.close()


async def test_stats_client_coalesces_requests(stats_backend):
    base_url, hits = stats_backend

    async with StatsClient(base_url, session_token="tok") as client:
        first, second = await asyncio.gather(client.owner_stats(), client.owner_stats())
        third = await client.owner_stats()

    assert hits == ["Bearer tok"]
    assert first.data["promptsCount"] == second.data["promptsCount"] == third.data["promptsCount"] == 3
