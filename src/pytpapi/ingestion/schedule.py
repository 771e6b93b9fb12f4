"""Rolling opening calendar built from vendor seasons.

A season is a date range with daily opening and closing times, scoped to
one or more parks. The reconciler walks a window of calendar dates in the
park's timezone, finds the season covering each date and pins the season's
local time-of-day onto that date.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timedelta
from typing import Any
from zoneinfo import ZoneInfo

from pytpapi._constants import SCHEDULE_WINDOW_DAYS
from pytpapi.ingestion.normalize import parse_instant
from pytpapi.models._base import ScheduleType
from pytpapi.models.schedule import ScheduleWindow

_logger = logging.getLogger(__name__)

#: (opening field, closing field, description) of optional extra windows.
EXTRA_WINDOW_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("hotelStartAt", "hotelEndAt", "Open To Hotel Guests"),
    ("guestStartAt", "guestEndAt", "Open To Guests"),
)

_CLOSED_MARKER_TIME = time(23, 59)


class ClosedDayPolicy(enum.StrEnum):
    """What to emit for a date no open season covers."""

    OMIT = "omit"
    EMIT = "emit"


class ScheduleReconciler:
    """Build the rolling calendar of one park.

    Parameters
    ----------
    park_id : str
        Scope tag a season must list to apply to the park.
    timezone : str or ZoneInfo
        The park's timezone; all dates are local to it.
    days : int
        Number of dates covered, starting yesterday.
    closed_days : ClosedDayPolicy
        ``OMIT`` leaves uncovered dates out, ``EMIT`` adds a ``CLOSED``
        record pinned at 23:59.
    """

    def __init__(
        self,
        park_id: str,
        timezone: str | ZoneInfo,
        *,
        days: int = SCHEDULE_WINDOW_DAYS,
        closed_days: ClosedDayPolicy = ClosedDayPolicy.OMIT,
    ) -> None:
        self._park_id = park_id
        self._zone = timezone if isinstance(timezone, ZoneInfo) else ZoneInfo(timezone)
        self._days = days
        self._closed_days = closed_days

    def _local(self, value: Any) -> datetime | None:
        instant = parse_instant(value)
        if instant is None:
            return None
        if instant.tzinfo is None:
            return instant.replace(tzinfo=self._zone)
        return instant.astimezone(self._zone)

    def _pin(self, value: Any, day: date) -> datetime | None:
        """Put the local time-of-day of *value* onto *day*."""
        local = self._local(value)
        if local is None:
            return None
        return datetime.combine(day, local.time(), tzinfo=self._zone)

    def _applies(self, season: Mapping[str, Any]) -> bool:
        if season.get("closed"):
            return False
        scopes = season.get("scopes")
        return isinstance(scopes, list) and self._park_id in scopes

    def _covers(self, season: Mapping[str, Any], day: date) -> bool:
        start = self._local(season.get("startAt"))
        end = self._local(season.get("endAt"))
        if start is None or end is None:
            return False
        # first and last day of the season both count as covered
        return start.date() <= day <= end.date()

    def season_for(self, seasons: Iterable[Mapping[str, Any]], day: date) -> Mapping[str, Any] | None:
        """First open season of this park covering *day*."""
        for season in seasons:
            if self._applies(season) and self._covers(season, day):
                return season
        return None

    def _window(
        self,
        season: Mapping[str, Any],
        day: date,
        opening_field: str,
        closing_field: str,
        schedule_type: ScheduleType,
        description: str | None = None,
    ) -> ScheduleWindow | None:
        opening = self._pin(season.get(opening_field), day)
        closing = self._pin(season.get(closing_field), day)
        if opening is None or closing is None:
            return None
        if closing <= opening:
            # closes after midnight
            closing += timedelta(days=1)
        return ScheduleWindow(
            date=day,
            opening_time=opening,
            closing_time=closing,
            type=schedule_type,
            description=description,
        )

    def windows_for(self, seasons: Iterable[Mapping[str, Any]], day: date) -> list[ScheduleWindow]:
        """All windows of *day*: regular hours first, then extra hours."""
        season = self.season_for(seasons, day)
        if season is None:
            if self._closed_days is ClosedDayPolicy.EMIT:
                marker = datetime.combine(day, _CLOSED_MARKER_TIME, tzinfo=self._zone)
                return [ScheduleWindow(date=day, opening_time=marker, closing_time=marker, type=ScheduleType.CLOSED)]
            return []

        windows: list[ScheduleWindow] = []
        regular = self._window(season, day, "startAt", "endAt", ScheduleType.OPERATING)
        if regular is None:
            _logger.debug("Season %s has unparseable times", season.get("id"))
            return windows
        windows.append(regular)
        for opening_field, closing_field, description in EXTRA_WINDOW_FIELDS:
            if season.get(opening_field) and season.get(closing_field):
                extra = self._window(
                    season,
                    day,
                    opening_field,
                    closing_field,
                    ScheduleType.EXTRA_HOURS,
                    description,
                )
                if extra is not None:
                    windows.append(extra)
        return windows

    def reconcile(self, seasons: Iterable[Mapping[str, Any]], now: datetime) -> list[ScheduleWindow]:
        """Build the calendar from yesterday on.

        Dates before today are dropped unless *now* falls inside one of
        their windows, so a night that started yesterday stays visible.
        """
        season_list = [s for s in seasons if isinstance(s, Mapping)]
        local_now = now.astimezone(self._zone) if now.tzinfo is not None else now.replace(tzinfo=self._zone)
        today = local_now.date()
        first = today - timedelta(days=1)

        calendar: list[ScheduleWindow] = []
        for offset in range(self._days):
            day = first + timedelta(days=offset)
            windows = self.windows_for(season_list, day)
            if not windows:
                continue
            if day < today and not any(w.contains(local_now) for w in windows):
                continue
            calendar.extend(windows)
        return calendar
