"""Scoped TTL memoization with one in-flight producer per key.

Every network-facing step of an adapter goes through :meth:`ScopedCache.wrap`.
Entries live in a :class:`CacheStore`; the default store is shared by the
whole process and partitioned by adapter scope plus cache-format version.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass
from typing import Any, TypeVar

from pytpapi._constants import CACHE_FORMAT_VERSION

_logger = logging.getLogger(__name__)

T = TypeVar("T")

_StoreKey = tuple[str, Hashable]


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A stored value and the clock reading after which it is stale."""

    value: Any
    expires_at: float

    def is_fresh(self, now: float) -> bool:
        return now < self.expires_at


class CacheStore:
    """Backing storage for scoped caches.

    Holds finished entries and the tasks of producers still running.
    Only :class:`ScopedCache` touches it.
    """

    def __init__(self) -> None:
        self._entries: dict[_StoreKey, CacheEntry] = {}
        self._inflight: dict[_StoreKey, asyncio.Task[Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


_PROCESS_STORE = CacheStore()


def process_store() -> CacheStore:
    """Return the process-wide store used when none is injected."""
    return _PROCESS_STORE


class ScopedCache:
    """TTL cache partitioned by an adapter-specific namespace.

    Usage::

        cache = ScopedCache("EuropaPark")
        pois = await cache.wrap("pois-en", fetch_pois, ttl=12 * 3600)
    """

    def __init__(
        self,
        scope: str,
        *,
        store: CacheStore | None = None,
        clock: Callable[[], float] = time.monotonic,
        version: int = CACHE_FORMAT_VERSION,
    ) -> None:
        self._namespace = f"{scope}@{version}"
        self._store = store if store is not None else _PROCESS_STORE
        self._clock = clock

    @property
    def namespace(self) -> str:
        return self._namespace

    def _key(self, key: Hashable) -> _StoreKey:
        return (self._namespace, key)

    async def wrap(
        self,
        key: Hashable,
        producer: Callable[[], Awaitable[T]],
        ttl: float,
        *,
        cache_if: Callable[[T], bool] | None = None,
    ) -> T:
        """Return the cached value for *key*, producing it on a miss.

        Parameters
        ----------
        key : Hashable
            Key within this cache's scope.
        producer : callable
            Zero-argument coroutine function computing the value.
        ttl : float
            Seconds the produced value stays valid. ``ttl <= 0`` disables
            storing, concurrent callers still share one computation.
        cache_if : callable or None
            Optional predicate; a produced value failing it is returned
            but not stored.

        Raises
        ------
        Exception
            Whatever *producer* raised. Failed computations are never stored
            and every caller that joined them sees the same exception.
        """
        store_key = self._key(key)

        entry = self._store._entries.get(store_key)  # noqa: SLF001
        if entry is not None:
            if entry.is_fresh(self._clock()):
                return entry.value  # type: ignore[no-any-return]
            del self._store._entries[store_key]  # noqa: SLF001

        task = self._store._inflight.get(store_key)  # noqa: SLF001
        if task is None:
            _logger.debug("Cache miss %s/%s", self._namespace, key)
            task = asyncio.ensure_future(producer())
            self._store._inflight[store_key] = task  # noqa: SLF001
            task.add_done_callback(self._settle(store_key, ttl, cache_if))
        else:
            _logger.debug("Joining in-flight computation %s/%s", self._namespace, key)

        # shield: one cancelled caller must not cancel the shared producer
        return await asyncio.shield(task)  # type: ignore[no-any-return]

    def _settle(
        self,
        store_key: _StoreKey,
        ttl: float,
        cache_if: Callable[[Any], bool] | None,
    ) -> Callable[[asyncio.Task[Any]], None]:
        def _done(task: asyncio.Task[Any]) -> None:
            store = self._store
            if store._inflight.get(store_key) is task:  # noqa: SLF001
                del store._inflight[store_key]  # noqa: SLF001
            if task.cancelled() or task.exception() is not None:
                return
            value = task.result()
            if ttl <= 0:
                return
            if cache_if is not None and not cache_if(value):
                _logger.debug("Not caching rejected value for %s/%s", *store_key)
                return
            store._entries[store_key] = CacheEntry(value=value, expires_at=self._clock() + ttl)  # noqa: SLF001

        return _done
