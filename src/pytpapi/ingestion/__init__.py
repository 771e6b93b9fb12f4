"""Ingestion layer.

Turns raw vendor payloads into canonical records: POI maps, queue
snapshots and opening calendars. Nothing here performs I/O.
"""

from pytpapi.ingestion.pois import AREA_NAMES, PoiBuilder, extract_attributes
from pytpapi.ingestion.queue import build_queue_records
from pytpapi.ingestion.schedule import ClosedDayPolicy, ScheduleReconciler
from pytpapi.ingestion.status import (
    EUROPAPARK_STATUS_TABLE,
    STRING_STATUS_TABLE,
    DecodedStatus,
    StatusDecodeTable,
)

__all__ = [
    "AREA_NAMES",
    "ClosedDayPolicy",
    "DecodedStatus",
    "EUROPAPARK_STATUS_TABLE",
    "PoiBuilder",
    "STRING_STATUS_TABLE",
    "ScheduleReconciler",
    "StatusDecodeTable",
    "build_queue_records",
    "extract_attributes",
]
