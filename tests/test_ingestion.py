from __future__ import annotations

from typing import Any

import pytest

from pytpapi.exceptions import DataShapeError
from pytpapi.ingestion.normalize import exact_int, parse_instant, positive_int_or_none, safe_float
from pytpapi.ingestion.pois import PoiBuilder, area_name, extract_attributes
from pytpapi.ingestion.queue import build_queue_record, build_queue_records
from pytpapi.ingestion.status import EUROPAPARK_STATUS_TABLE, STRING_STATUS_TABLE
from pytpapi.models import PoiKind, QueueStatus

RAW_POIS: list[dict[str, Any]] = [
    {
        "code": 101,
        "type": "attraction",
        "name": "Silver Star",
        "scopes": ["europapark"],
        "latitude": 48.2611,
        "longitude": 7.7195,
        "areaId": 14,
        "description": "Hyper coaster",
        "excerpt": "Fast",
        "minHeight": 140,
        "minAge": 0,
        "maxHeight": None,
        "attributes": [
            {"key": "Producer", "value": "Bolliger & Mabillard"},
            {"key": "Max Speed", "value": "130 km/h"},
            {"key": "Producer", "value": "ignored duplicate"},
            "garbage",
        ],
    },
    {"code": 102, "type": "attraction", "name": "VirtualLine: Blue Fire", "scopes": ["europapark"], "areaId": 15},
    {"code": 103, "type": "attraction", "name": "Queue - Blue Fire", "scopes": ["europapark"]},
    {"code": 104, "type": "attraction", "name": "Blue Fire", "scopes": ["europapark"], "areaId": 18},
    {"code": 201, "type": "attraction", "name": "Snorri Touren", "scopes": ["rulantica", "europapark"]},
    {"code": None, "type": "attraction", "name": "Uncoded", "scopes": ["europapark"]},
    {"code": 301, "type": "gastronomy", "name": "Bamboo Bay", "scopes": ["europapark"], "minHeight": 100},
    {"code": 401, "type": "sight", "name": "Castle", "scopes": ["europapark"], "minAge": 6},
]


@pytest.fixture
def rides() -> dict[str, Any]:
    return PoiBuilder("EuropaPark", "europapark").build(RAW_POIS, PoiKind.RIDE)


def test_normalize_helpers() -> None:
    assert safe_float(True) is None
    assert safe_float("12.5") == 12.5
    assert exact_int("91") == 91
    assert exact_int(90.5) is None
    assert positive_int_or_none(0) is None
    assert positive_int_or_none("120") == 120
    assert parse_instant("2026-07-15T09:00:00Z").utcoffset().total_seconds() == 0
    assert parse_instant("yesterday") is None


def test_ride_map_contains_only_primary_scope_entities(rides: dict[str, Any]) -> None:
    assert set(rides) == {"101", "102", "104"}


def test_ride_record_fields(rides: dict[str, Any]) -> None:
    silver_star = rides["101"]
    assert silver_star.id == "EuropaPark_101"
    assert silver_star.kind is PoiKind.RIDE
    assert silver_star.location.area == "France"
    assert silver_star.location.latitude == 48.2611
    assert silver_star.short_description == "Fast"
    assert silver_star.attributes.producer == "Bolliger & Mabillard"
    assert silver_star.attributes.max_speed == "130 km/h"
    assert silver_star.attributes.capacity is None
    assert silver_star.restrictions.min_height == 140
    assert silver_star.restrictions.min_age is None
    assert not silver_star.fast_pass


def test_virtual_line_is_flagged_with_parent(rides: dict[str, Any]) -> None:
    virtual = rides["102"]
    assert virtual.is_virt_queue
    assert virtual.fast_pass
    assert virtual.single_rider
    assert virtual.parent == "Blue Fire"


def test_unknown_area_is_none(rides: dict[str, Any]) -> None:
    assert rides["104"].location.area is None
    assert area_name("12") == "Germany"
    assert area_name(None) is None


def test_restrictions_only_for_detailed_kinds() -> None:
    builder = PoiBuilder("EuropaPark", "europapark")
    restaurants = builder.build(RAW_POIS, PoiKind.RESTAURANT)
    sights = builder.build(RAW_POIS, PoiKind.STATIC)

    assert restaurants["301"].restrictions.min_height is None
    assert sights["401"].restrictions.min_age == 6
    assert builder.build(RAW_POIS, PoiKind.SERVICE) == {}


def test_extract_attributes_tolerates_garbage() -> None:
    assert extract_attributes(None).as_tags()["Producer"] is None
    assert extract_attributes("text").producer is None


@pytest.mark.parametrize(
    ("raw", "status", "wait", "active"),
    [
        (0, QueueStatus.OPERATING, 0, True),
        (25, QueueStatus.OPERATING, 25, True),
        ("90", QueueStatus.OPERATING, 90, True),
        (91, QueueStatus.OPERATING, 91, True),
        (222, QueueStatus.REFURBISHMENT, 0, False),
        (333, QueueStatus.CLOSED, 0, False),
        (444, QueueStatus.DOWN, 0, False),
        (555, QueueStatus.DOWN, 0, False),
        (666, QueueStatus.FASTPASS_TEMPORARILY_FULL, 0, False),
        (777, QueueStatus.FASTPASS_FINISHED, 0, False),
        (999, QueueStatus.DOWN, 0, False),
    ],
)
def test_europapark_status_table(raw: Any, status: QueueStatus, wait: int, active: bool) -> None:
    decoded = EUROPAPARK_STATUS_TABLE.decode(raw)
    assert decoded is not None
    assert (decoded.status, decoded.wait_time, decoded.active) == (status, wait, active)


@pytest.mark.parametrize("raw", [None, -1, 92, 123, 90.5, True, "soon"])
def test_europapark_status_table_unknown_values(raw: Any) -> None:
    assert EUROPAPARK_STATUS_TABLE.decode(raw) is None


def test_string_status_table() -> None:
    assert EUROPAPARK_STATUS_TABLE.numeric
    decoded = STRING_STATUS_TABLE.decode(" OPEN ")
    assert decoded is not None and decoded.status is QueueStatus.OPERATING and decoded.active
    closed = STRING_STATUS_TABLE.decode("closed_indefinitely")
    assert closed is not None and closed.status is QueueStatus.CLOSED
    assert STRING_STATUS_TABLE.decode(5) is None


def test_queue_record_without_poi_raises(rides: dict[str, Any]) -> None:
    with pytest.raises(DataShapeError) as excinfo:
        build_queue_record({"code": 999, "time": 5}, rides, EUROPAPARK_STATUS_TABLE)
    assert excinfo.value.code == "999"


def test_queue_records_drop_unknown_codes_and_sentinels(rides: dict[str, Any]) -> None:
    entries = [
        {"code": 101, "time": 25},
        {"code": 102, "time": 666, "startAt": "14:00", "endAt": "14:15"},
        {"code": 104, "time": 123},
        {"code": 999, "time": 10},
    ]

    records = build_queue_records(entries, rides, EUROPAPARK_STATUS_TABLE)

    assert [r.poi.code for r in records] == ["101", "102"]
    assert records[0].wait_time == 25
    assert records[0].fast_pass is None
    virtual = records[1]
    assert virtual.status is QueueStatus.FASTPASS_TEMPORARILY_FULL
    assert virtual.fast_pass is not None
    assert virtual.fast_pass.return_time is not None
    assert virtual.fast_pass.return_time.start == "14:00"
    assert virtual.fast_pass.parent == "Blue Fire"


def test_virtual_line_prefix_is_stripped_for_parent() -> None:
    entity = {"code": "GOL-VL", "type": "attraction", "name": "VirtualLine: Goliath", "scopes": ["europapark"]}
    record = PoiBuilder("EuropaPark", "europapark").build_record(entity, PoiKind.RIDE)

    assert record is not None
    assert record.is_virt_queue
    assert record.parent == "Goliath"
