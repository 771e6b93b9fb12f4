"""Park adapter capability interface.

Adapters are composed from shared services (transport, cache, credential
pipeline, POI builder, schedule reconciler) instead of inheriting from a
park base class. Anything with these members is a park adapter.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Protocol, runtime_checkable

from pytpapi.models.locale import DEFAULT_LOCALE
from pytpapi.models.queue import QueueRecord
from pytpapi.models.schedule import ScheduleWindow


@runtime_checkable
class ParkAdapter(Protocol):
    """Capabilities every park adapter offers."""

    @property
    def name(self) -> str: ...

    @property
    def timezone(self) -> str: ...

    async def get_queue(self) -> list[QueueRecord]: ...

    async def get_schedule(self) -> list[ScheduleWindow]: ...


def group_by_date(windows: list[ScheduleWindow]) -> dict[str, list[ScheduleWindow]]:
    """Key windows by ISO date, keeping their order."""
    calendar: dict[str, list[ScheduleWindow]] = defaultdict(list)
    for window in windows:
        calendar[window.date.isoformat()].append(window)
    return dict(calendar)


async def collect_data(adapter: ParkAdapter, locale: str = DEFAULT_LOCALE) -> dict[str, Any]:
    """Queue and calendar of *adapter* rendered for consumers."""
    rides = await adapter.get_queue()
    hours = await adapter.get_schedule()
    return {
        "rides": [ride.to_output(locale) for ride in rides],
        "hours": {
            day: [window.to_output(locale) for window in windows] for day, windows in group_by_date(hours).items()
        },
    }
