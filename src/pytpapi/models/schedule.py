"""Opening calendar models."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from pytpapi.models._base import ScheduleType
from pytpapi.models.locale import DEFAULT_LOCALE, label


class ScheduleWindow(BaseModel):
    """One opening window pinned to a calendar date in the park's timezone.

    Parameters
    ----------
    date : datetime.date
        Local calendar date the window belongs to.
    opening_time, closing_time : datetime
        Timezone-aware instants.
    type : ScheduleType
        Regular hours, extra hours or an explicit closed marker.
    description : str or None
        E.g. ``"Open To Hotel Guests"`` for extra hours.
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date
    opening_time: dt.datetime
    closing_time: dt.datetime
    type: ScheduleType
    description: str | None = None

    @model_validator(mode="after")
    def _check_instants(self) -> ScheduleWindow:
        if self.opening_time.tzinfo is None or self.closing_time.tzinfo is None:
            raise ValueError("schedule instants must be timezone-aware")
        return self

    def contains(self, instant: dt.datetime) -> bool:
        """Whether *instant* lies strictly between opening and closing."""
        return self.opening_time < instant < self.closing_time

    def to_output(self, locale: str = DEFAULT_LOCALE) -> dict[str, Any]:
        out: dict[str, Any] = {
            "openingTime": self.opening_time.isoformat(),
            "closingTime": self.closing_time.isoformat(),
            "date": self.date.isoformat(),
            "type": label(self.type, locale),
        }
        if self.description is not None:
            out["description"] = self.description
        return out
