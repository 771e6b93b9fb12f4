"""Base model and enums shared by the canonical records.

Canonical records are frozen pydantic models. Within one cache epoch a
POI map is handed out by reference, so nothing may mutate it.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PoiKind(enum.StrEnum):
    """Entity kinds a POI map is partitioned by."""

    RIDE = "ride"
    STATIC = "static"
    RESTAURANT = "restaurant"
    MERCHANDISE = "merchandise"
    SERVICE = "service"


class QueueStatus(enum.StrEnum):
    """Canonical queue status every vendor table decodes into."""

    OPERATING = "operating"
    CLOSED = "closed"
    DOWN = "down"
    REFURBISHMENT = "refurbishment"
    FASTPASS_TEMPORARILY_FULL = "fastpass-temporarily-full"
    FASTPASS_FINISHED = "fastpass-finished"


class ScheduleType(enum.StrEnum):
    OPERATING = "operating"
    EXTRA_HOURS = "extra-hours"
    CLOSED = "closed"


class TpBaseModel(BaseModel):
    """Base for canonical records.

    * frozen, so cached records cannot be changed by consumers
    * ``raw`` keeps the vendor payload the record was built from
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
