"""Park adapters."""

from pytpapi.parks.base import ParkAdapter, collect_data, group_by_date
from pytpapi.parks.europapark import EuropaParkAdapter
from pytpapi.parks.presets import ALL_PRESETS, EUROPAPARK, RULANTICA, YULLBE, ParkPreset

__all__ = [
    "ALL_PRESETS",
    "EUROPAPARK",
    "EuropaParkAdapter",
    "ParkAdapter",
    "ParkPreset",
    "RULANTICA",
    "YULLBE",
    "collect_data",
    "group_by_date",
]
