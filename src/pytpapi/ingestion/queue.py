"""Join waiting-time entries to ride POIs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pytpapi.exceptions import DataShapeError
from pytpapi.ingestion.normalize import safe_str
from pytpapi.ingestion.status import StatusDecodeTable
from pytpapi.models.poi import PoiRecord
from pytpapi.models.queue import FastPassInfo, QueueRecord, ReturnTime

_logger = logging.getLogger(__name__)


def _return_time(entry: Mapping[str, Any]) -> ReturnTime | None:
    start = safe_str(entry.get("startAt"))
    if start is None:
        return None
    return ReturnTime(start=start, end=safe_str(entry.get("endAt")))


def build_queue_record(
    entry: Mapping[str, Any],
    rides: Mapping[str, PoiRecord],
    table: StatusDecodeTable,
) -> QueueRecord | None:
    """Build the record for one waiting-time entry.

    Returns ``None`` when the table does not know the sentinel.

    Raises
    ------
    DataShapeError
        If the entry's code has no ride POI.
    """
    code = safe_str(entry.get("code"))
    poi = rides.get(code) if code is not None else None
    if poi is None:
        raise DataShapeError(f"No ride POI for waiting-time code {code!r}", code=code)

    decoded = table.decode(entry.get("time"))
    if decoded is None:
        _logger.debug("Unknown %s sentinel %r for %s, omitting", table.name, entry.get("time"), code)
        return None

    return_time = _return_time(entry)
    fast_pass = None
    if poi.fast_pass or return_time is not None:
        fast_pass = FastPassInfo(
            return_time=return_time,
            is_virt_queue=poi.is_virt_queue,
            parent=poi.parent,
        )

    return QueueRecord(
        poi=poi,
        status=decoded.status,
        wait_time=decoded.wait_time,
        active=decoded.active,
        fast_pass=fast_pass,
        raw=dict(entry),
    )


def build_queue_records(
    entries: Iterable[Mapping[str, Any]],
    rides: Mapping[str, PoiRecord],
    table: StatusDecodeTable,
) -> list[QueueRecord]:
    """Build records for a whole waiting-time batch.

    Entries without a matching POI or with an unknown sentinel are dropped
    individually; the rest of the batch is still returned.
    """
    records: list[QueueRecord] = []
    for entry in entries:
        try:
            record = build_queue_record(entry, rides, table)
        except DataShapeError as exc:
            _logger.debug("Dropping waiting-time entry: %s", exc)
            continue
        if record is not None:
            records.append(record)
    return records
