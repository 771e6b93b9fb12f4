"""Vendor sentinel -> canonical queue status decode tables.

Every vendor encodes ride state differently: numeric sentinels in the
waiting-time field, or state strings. Each gets a :class:`StatusDecodeTable`
with the same shape; adapters pick theirs and never branch on raw values.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pytpapi.ingestion.normalize import exact_int
from pytpapi.models._base import QueueStatus


@dataclass(frozen=True, slots=True)
class DecodedStatus:
    status: QueueStatus
    wait_time: int
    active: bool


@dataclass(frozen=True)
class StatusDecodeTable:
    """Pure-data decode table.

    Parameters
    ----------
    name : str
        Vendor the table belongs to (for logs).
    exact : Mapping
        Sentinel -> ``(status, wait_time)``. Checked before the range.
    operating_range : tuple of int or None
        Inclusive ``(low, high)``; numeric values inside it mean
        "operating, wait = value".
    numeric : bool
        Whether raw values are parsed as integers before lookup.
    """

    name: str
    exact: Mapping[Hashable, tuple[QueueStatus, int]] = field(default_factory=dict)
    operating_range: tuple[int, int] | None = None
    numeric: bool = True

    def _key(self, raw: Any) -> Hashable | None:
        if self.numeric:
            return exact_int(raw)
        if isinstance(raw, str):
            return raw.strip().lower()
        return None

    def decode(self, raw: Any) -> DecodedStatus | None:
        """Decode *raw*; ``None`` when the table has no entry for it.

        Unmatched values are not guessed at: the caller omits the record.
        """
        key = self._key(raw)
        if key is None:
            return None
        hit = self.exact.get(key)
        if hit is not None:
            status, wait = hit
            return DecodedStatus(status=status, wait_time=wait, active=status is QueueStatus.OPERATING)
        if self.operating_range is not None and isinstance(key, int):
            low, high = self.operating_range
            if low <= key <= high:
                return DecodedStatus(status=QueueStatus.OPERATING, wait_time=key, active=True)
        return None


EUROPAPARK_STATUS_TABLE = StatusDecodeTable(
    name="europapark",
    exact=MappingProxyType(
        {
            91: (QueueStatus.OPERATING, 91),  # "over 90 minutes"
            333: (QueueStatus.CLOSED, 0),
            666: (QueueStatus.FASTPASS_TEMPORARILY_FULL, 0),
            777: (QueueStatus.FASTPASS_FINISHED, 0),
            444: (QueueStatus.DOWN, 0),
            555: (QueueStatus.DOWN, 0),
            999: (QueueStatus.DOWN, 0),
            222: (QueueStatus.REFURBISHMENT, 0),
        }
    ),
    operating_range=(0, 90),
)

#: Table for vendors reporting state strings instead of sentinels.
STRING_STATUS_TABLE = StatusDecodeTable(
    name="state-string",
    exact=MappingProxyType(
        {
            "open": (QueueStatus.OPERATING, 0),
            "down": (QueueStatus.DOWN, 0),
            "full": (QueueStatus.DOWN, 0),
            "full_and_closed": (QueueStatus.DOWN, 0),
            "closed": (QueueStatus.CLOSED, 0),
            "not_operational": (QueueStatus.CLOSED, 0),
            "closed_indefinitely": (QueueStatus.CLOSED, 0),
            "refurbishment": (QueueStatus.REFURBISHMENT, 0),
        }
    ),
    numeric=False,
)
