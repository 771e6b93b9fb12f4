"""Queue snapshot models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from pytpapi.models._base import QueueStatus, TpBaseModel
from pytpapi.models.locale import DEFAULT_LOCALE, label
from pytpapi.models.poi import PoiRecord


class ReturnTime(BaseModel):
    """Return window of a virtual-queue booking, as sent by the vendor."""

    model_config = ConfigDict(frozen=True)

    start: str | None = None
    end: str | None = None


class FastPassInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    return_time: ReturnTime | None = None
    is_virt_queue: bool = False
    parent: str | None = None


class QueueRecord(TpBaseModel):
    """Live queue state of one ride, joined to its POI record.

    Recomputed on every queue fetch; never cached.
    """

    poi: PoiRecord
    status: QueueStatus
    wait_time: int
    active: bool
    fast_pass: FastPassInfo | None = None

    def to_output(self, locale: str = DEFAULT_LOCALE) -> dict[str, Any]:
        """Render the record in the shape shared by all park adapters."""
        poi = self.poi
        out: dict[str, Any] = {
            "name": poi.name,
            "id": poi.id,
            "waitTime": self.wait_time,
            "status": label(self.status, locale),
            "active": self.active,
            "location": poi.location_output(),
            "meta": {
                "description": poi.description,
                "short_description": poi.short_description,
                "type": label(poi.kind, locale),
                "restrictions": poi.restrictions.as_output(),
                "tags": poi.attributes.as_tags(),
            },
        }
        if self.fast_pass is not None:
            return_time = self.fast_pass.return_time
            out["fastPass"] = {
                "returnTime": return_time.model_dump() if return_time is not None else None,
                "isVirtQueue": self.fast_pass.is_virt_queue,
                "parent": self.fast_pass.parent,
            }
        return out
