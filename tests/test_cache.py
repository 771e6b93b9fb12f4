from __future__ import annotations

import asyncio

import pytest

from pytpapi._cache import CacheStore, ScopedCache


class ManualClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_namespace_includes_format_version() -> None:
    assert ScopedCache("EuropaPark", store=CacheStore(), version=7).namespace == "EuropaPark@7"


@pytest.mark.asyncio
async def test_concurrent_callers_share_one_producer() -> None:
    cache = ScopedCache("Park", store=CacheStore())
    gate = asyncio.Event()
    calls = 0

    async def producer() -> dict[str, int]:
        nonlocal calls
        calls += 1
        await gate.wait()
        return {"value": calls}

    first = asyncio.create_task(cache.wrap("k", producer, 60))
    second = asyncio.create_task(cache.wrap("k", producer, 60))
    await asyncio.sleep(0)
    gate.set()
    a, b = await asyncio.gather(first, second)

    assert calls == 1
    assert a is b


@pytest.mark.asyncio
async def test_entry_expires_after_ttl() -> None:
    clock = ManualClock()
    cache = ScopedCache("Park", store=CacheStore(), clock=clock)
    calls = 0

    async def producer() -> int:
        nonlocal calls
        calls += 1
        return calls

    assert await cache.wrap("k", producer, 60) == 1
    clock.now = 59.0
    assert await cache.wrap("k", producer, 60) == 1
    clock.now = 61.0
    assert await cache.wrap("k", producer, 60) == 2
    assert calls == 2


@pytest.mark.asyncio
async def test_failures_are_not_cached() -> None:
    cache = ScopedCache("Park", store=CacheStore())
    calls = 0

    async def producer() -> str:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("upstream down")
        return "ok"

    with pytest.raises(RuntimeError, match="upstream down"):
        await cache.wrap("k", producer, 60)
    assert await cache.wrap("k", producer, 60) == "ok"
    assert calls == 2


@pytest.mark.asyncio
async def test_joined_callers_see_the_same_failure() -> None:
    cache = ScopedCache("Park", store=CacheStore())
    gate = asyncio.Event()

    async def producer() -> str:
        await gate.wait()
        raise ValueError("bad payload")

    first = asyncio.create_task(cache.wrap("k", producer, 60))
    second = asyncio.create_task(cache.wrap("k", producer, 60))
    await asyncio.sleep(0)
    gate.set()
    results = await asyncio.gather(first, second, return_exceptions=True)

    assert all(isinstance(r, ValueError) for r in results)


@pytest.mark.asyncio
async def test_cache_if_rejects_value() -> None:
    store = CacheStore()
    cache = ScopedCache("Park", store=store)
    calls = 0

    async def producer() -> str:
        nonlocal calls
        calls += 1
        return ""

    assert await cache.wrap("device-id", producer, 60, cache_if=bool) == ""
    assert await cache.wrap("device-id", producer, 60, cache_if=bool) == ""
    assert calls == 2
    assert len(store) == 0


@pytest.mark.asyncio
async def test_non_positive_ttl_is_not_stored() -> None:
    store = CacheStore()
    cache = ScopedCache("Park", store=store)

    async def producer() -> str:
        return "token"

    await cache.wrap("k", producer, 0)
    assert ("Park@2", "k") not in store


@pytest.mark.asyncio
async def test_scopes_do_not_collide_on_shared_store() -> None:
    store = CacheStore()
    europapark = ScopedCache("EuropaPark", store=store)
    rulantica = ScopedCache("Rulantica", store=store)

    async def ep() -> str:
        return "ep"

    async def rl() -> str:
        return "rl"

    assert await europapark.wrap("pois-en", ep, 60) == "ep"
    assert await rulantica.wrap("pois-en", rl, 60) == "rl"
    assert len(store) == 2
