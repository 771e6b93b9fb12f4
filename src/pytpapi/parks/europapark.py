"""Adapter for the Europa-Park family of parks (Europa-Park, Rulantica, YULLBE)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

import aiohttp

from pytpapi._api import resources as _resources_api
from pytpapi._cache import CacheStore, ScopedCache
from pytpapi._transport import HttpTransport, Transport
from pytpapi.config import ParkConfig
from pytpapi.credentials import CredentialPipeline
from pytpapi.exceptions import TpapiError
from pytpapi.ingestion.pois import PoiBuilder
from pytpapi.ingestion.queue import build_queue_records
from pytpapi.ingestion.schedule import ClosedDayPolicy, ScheduleReconciler
from pytpapi.ingestion.status import EUROPAPARK_STATUS_TABLE, StatusDecodeTable
from pytpapi.models._base import PoiKind
from pytpapi.models.credentials import RemoteCredentials
from pytpapi.models.locale import DEFAULT_LOCALE
from pytpapi.models.poi import PoiRecord
from pytpapi.models.queue import QueueRecord
from pytpapi.models.schedule import ScheduleWindow
from pytpapi.parks.base import collect_data, group_by_date
from pytpapi.parks.presets import ParkPreset

_logger = logging.getLogger(__name__)

RawItems = list[dict[str, Any]]


class EuropaParkAdapter:
    """Async adapter for one park of the Europa-Park API.

    Usage::

        async with EuropaParkAdapter(EUROPAPARK.config()) as park:
            rides = await park.get_queue()
            hours = await park.get_schedule()

    Parameters
    ----------
    config : ParkConfig
        Adapter configuration; validated here, missing options raise
        :class:`~pytpapi.exceptions.ConfigurationError`.
    session : aiohttp.ClientSession or None
        Externally owned HTTP session. Created on enter when omitted.
    transport : Transport or None
        Replaces the HTTP transport entirely (tests, custom stacks).
    cache : ScopedCache or None
        Cache to use; defaults to a process-wide cache scoped by park name.
    cache_store : CacheStore or None
        Store backing the default cache.
    now : callable or None
        Returns the current instant; defaults to the wall clock in the
        park's timezone.
    """

    def __init__(
        self,
        config: ParkConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        cache: ScopedCache | None = None,
        cache_store: CacheStore | None = None,
        now: Callable[[], datetime] | None = None,
        status_table: StatusDecodeTable = EUROPAPARK_STATUS_TABLE,
        closed_days: ClosedDayPolicy = ClosedDayPolicy.OMIT,
        supports_schedule: bool = True,
    ) -> None:
        self._config = config.validate()
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self._cache = cache if cache is not None else ScopedCache(config.name, store=cache_store)
        self._now = now if now is not None else self._wall_clock
        self._status_table = status_table
        self._supports_schedule = supports_schedule
        self._builder = PoiBuilder(config.name, config.park_id)
        self._reconciler = ScheduleReconciler(config.park_id, config.zone(), closed_days=closed_days)
        self._credentials: CredentialPipeline | None = None

    @classmethod
    def from_preset(cls, preset: ParkPreset, **kwargs: Any) -> EuropaParkAdapter:
        """Build an adapter for *preset* with configuration from the environment.

        ``config_overrides`` is passed to :meth:`ParkPreset.config`, the
        remaining keyword arguments to the constructor.
        """
        overrides: dict[str, Any] = kwargs.pop("config_overrides", {})
        kwargs.setdefault("supports_schedule", preset.supports_schedule)
        return cls(preset.config(**overrides), **kwargs)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> EuropaParkAdapter:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._http_session, timeout=self._config.request_timeout)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None
        self._credentials = None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def timezone(self) -> str:
        return self._config.timezone

    @property
    def config(self) -> ParkConfig:
        return self._config

    @property
    def supports_schedule(self) -> bool:
        return self._supports_schedule

    def _wall_clock(self) -> datetime:
        return datetime.now(self._config.zone())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise TpapiError("Adapter not initialized. Use 'async with EuropaParkAdapter(...) as park:'")
        return self._transport

    def _pipeline(self) -> CredentialPipeline:
        if self._credentials is None:
            self._credentials = CredentialPipeline(self._config, self._require_transport(), self._cache)
        return self._credentials

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    async def get_device_id(self) -> str:
        return await self._pipeline().get_device_id()

    async def get_config(self) -> RemoteCredentials:
        """Decrypted remote config credentials."""
        return await self._pipeline().get_config()

    async def get_token(self) -> str:
        """A fresh bearer value. Not cached; see :meth:`CredentialPipeline.get_token`."""
        return await self._pipeline().get_token()

    # ------------------------------------------------------------------
    # POIs
    # ------------------------------------------------------------------

    async def get_pois(self, *, token: str | None = None) -> RawItems:
        """Raw POI list of the whole vendor, cached for ``poi_cache_hours``.

        *token* is used on a cache miss instead of fetching a new one.
        """

        async def _produce() -> RawItems:
            bearer = token or await self.get_token()
            return await _resources_api.fetch_pois(self._config, self._require_transport(), bearer)

        return await self._cache.wrap(f"pois-{self._config.language}", _produce, self._config.poi_ttl)

    async def build_pois(self, kind: PoiKind, *, token: str | None = None) -> dict[str, PoiRecord]:
        """POI map of *kind* for this park, keyed by vendor code.

        Each kind is cached on its own; within one cache epoch the same
        map object is returned to every caller.
        """

        async def _produce() -> dict[str, PoiRecord]:
            raw = await self.get_pois(token=token)
            return self._builder.build(raw, kind)

        return await self._cache.wrap(f"{self._config.park_id}-{kind}", _produce, self._config.poi_ttl)

    async def build_ride_poi(self) -> dict[str, PoiRecord]:
        return await self.build_pois(PoiKind.RIDE)

    async def build_static_poi(self) -> dict[str, PoiRecord]:
        return await self.build_pois(PoiKind.STATIC)

    async def build_restaurant_poi(self) -> dict[str, PoiRecord]:
        return await self.build_pois(PoiKind.RESTAURANT)

    async def build_merchandise_poi(self) -> dict[str, PoiRecord]:
        return await self.build_pois(PoiKind.MERCHANDISE)

    async def build_service_poi(self) -> dict[str, PoiRecord]:
        return await self.build_pois(PoiKind.SERVICE)

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------

    async def get_queue(self) -> list[QueueRecord]:
        """Current queue state of every ride with a known POI.

        Uses one token for the POI refresh (if needed) and the
        waiting-time request.
        """
        token = await self.get_token()
        rides = await self.build_pois(PoiKind.RIDE, token=token)
        entries = await _resources_api.fetch_waiting_times(self._config, self._require_transport(), token)
        records = build_queue_records(entries, rides, self._status_table)
        _logger.debug("%s: %d of %d waiting-time entries kept", self.name, len(records), len(entries))
        return records

    # ------------------------------------------------------------------
    # Schedule
    # ------------------------------------------------------------------

    async def get_seasons(self) -> RawItems:
        """Raw seasons list, cached for ``seasons_cache_minutes``."""

        async def _produce() -> RawItems:
            token = await self.get_token()
            return await _resources_api.fetch_seasons(self._config, self._require_transport(), token)

        return await self._cache.wrap(f"seasons-{self._config.language}", _produce, self._config.seasons_ttl)

    async def get_schedule(self) -> list[ScheduleWindow]:
        """Opening windows from yesterday through the next 60 days."""
        if not self._supports_schedule:
            return []
        seasons = await self.get_seasons()
        return self._reconciler.reconcile(seasons, self._now())

    async def get_calendar(self) -> dict[str, list[ScheduleWindow]]:
        """Opening windows keyed by ISO date."""
        return group_by_date(await self.get_schedule())

    async def get_data(self, locale: str = DEFAULT_LOCALE) -> dict[str, Any]:
        """Queue and calendar rendered in the consumer output shape."""
        return await collect_data(self, locale)
