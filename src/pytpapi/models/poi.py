"""Point of interest models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from pytpapi.models._base import PoiKind, TpBaseModel


class Location(BaseModel):
    """Coordinates and named area of a POI. Every field may be unknown."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None = None
    longitude: float | None = None
    area: str | None = None


class RideAttributes(BaseModel):
    """Semantic fields extracted from the vendor's key/value attribute list.

    Values are kept as the vendor sends them (usually display strings such
    as ``"1.200 P/h"``); absent keys stay ``None``.
    """

    model_config = ConfigDict(frozen=True)

    producer: str | None = None
    opening_year: str | None = None
    capacity: str | None = None
    ride_duration: str | None = None
    theoretical_capacity: str | None = None
    max_g_force: str | None = None
    max_speed: str | None = None
    height: str | None = None

    def as_tags(self) -> dict[str, str | None]:
        return {
            "Producer": self.producer,
            "Opening": self.opening_year,
            "Capacity": self.capacity,
            "Ridetime": self.ride_duration,
            "TheoreticalCapacity": self.theoretical_capacity,
            "MaxGForce": self.max_g_force,
            "MaxSpeed": self.max_speed,
            "Height": self.height,
        }


class Restrictions(BaseModel):
    """Access restrictions. Unset when the vendor does not declare them."""

    model_config = ConfigDict(frozen=True)

    min_height: int | None = None
    min_height_accompanied: int | None = None
    max_height: int | None = None
    min_age: int | None = None
    min_age_accompanied: int | None = None

    def as_output(self) -> dict[str, int | None]:
        return {
            "minHeight": self.min_height,
            "minHeightAccompanied": self.min_height_accompanied,
            "maxHeight": self.max_height,
            "minAge": self.min_age,
            "minAgeAccompanied": self.min_age_accompanied,
        }


class PoiRecord(TpBaseModel):
    """A normalized POI.

    Parameters
    ----------
    code : str
        Vendor code; key of the POI map and join key for waiting times.
    id : str
        Canonical id, ``"<park name>_<code>"``.
    name : str
        Display name.
    kind : PoiKind
        Entity kind the record was built for.
    location : Location
        Coordinates and area.
    description, short_description : str or None
        Vendor texts.
    attributes : RideAttributes
        Ride facts (rides and static sights only).
    restrictions : Restrictions
        Height/age limits (rides and static sights only).
    fast_pass : bool
        Whether the entry carries the fast-pass capability.
    single_rider : bool
        Virtual lines double as the single-rider lane.
    is_virt_queue : bool
        Entry is a virtual-queue variant of another ride.
    parent : str or None
        Name of the base ride for virtual-queue variants.
    """

    code: str
    id: str
    name: str
    kind: PoiKind
    location: Location = Location()
    description: str | None = None
    short_description: str | None = None
    attributes: RideAttributes = RideAttributes()
    restrictions: Restrictions = Restrictions()
    fast_pass: bool = False
    single_rider: bool = False
    is_virt_queue: bool = False
    parent: str | None = None

    def location_output(self) -> dict[str, Any]:
        return {
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "area": self.location.area,
        }
