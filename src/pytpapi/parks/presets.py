"""Static facts about the parks served by the Europa-Park API."""

from __future__ import annotations

import dataclasses
from typing import Any

from pytpapi.config import ParkConfig


@dataclasses.dataclass(frozen=True)
class ParkPreset:
    """Park identity fields that never come from the environment."""

    name: str
    park_id: str
    timezone: str
    latitude: float
    longitude: float
    supports_schedule: bool = True

    def config(self, **overrides: Any) -> ParkConfig:
        """Build a :class:`ParkConfig` from the environment for this park."""
        fields: dict[str, Any] = {
            "name": self.name,
            "park_id": self.park_id,
            "timezone": self.timezone,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        fields.update(overrides)
        return ParkConfig.from_env(**fields)


EUROPAPARK = ParkPreset(
    name="EuropaPark",
    park_id="europapark",
    timezone="Europe/Berlin",
    latitude=48.266140769976715,
    longitude=7.722050520358709,
)

RULANTICA = ParkPreset(
    name="Rulantica",
    park_id="rulantica",
    timezone="Europe/Berlin",
    latitude=48.2605514,
    longitude=7.7386819,
)

# VR experiences installed over EP rides; uses the EP entrance as location.
YULLBE = ParkPreset(
    name="YULLBE",
    park_id="yullbe",
    timezone="Europe/Berlin",
    latitude=48.266140769976715,
    longitude=7.722050520358709,
    supports_schedule=False,
)

ALL_PRESETS: tuple[ParkPreset, ...] = (EUROPAPARK, RULANTICA, YULLBE)
