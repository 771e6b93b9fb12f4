"""POI builder.

Turns the vendor's flat POI list into per-kind maps of :class:`PoiRecord`
keyed by vendor code.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pytpapi.ingestion.normalize import positive_int_or_none, safe_float, safe_str
from pytpapi.models._base import PoiKind
from pytpapi.models.poi import Location, PoiRecord, Restrictions, RideAttributes

_logger = logging.getLogger(__name__)

#: Vendor ``type`` value for each kind.
VENDOR_TYPES: Mapping[PoiKind, str] = MappingProxyType(
    {
        PoiKind.RIDE: "attraction",
        PoiKind.STATIC: "sight",
        PoiKind.RESTAURANT: "gastronomy",
        PoiKind.MERCHANDISE: "shopping",
        PoiKind.SERVICE: "service",
    }
)

#: Vendor area codes. 18 is not used by the vendor.
AREA_NAMES: Mapping[int, str] = MappingProxyType(
    {
        10: "Adventureland",
        11: "Kingdom of the Minimoys",
        12: "Germany",
        13: "England",
        14: "France",
        15: "Greece",
        16: "Grimm's Fairytale Forest",
        17: "Netherlands",
        19: "Ireland",
        20: "Iceland",
        21: "Italy",
        22: "Luxembourg",
        23: "Austria",
        24: "Portugal",
        25: "Russia",
        26: "Switzerland",
        27: "Scandinavia",
        28: "Spain",
    }
)

#: Attribute key sent by the vendor -> RideAttributes field.
ATTRIBUTE_FIELDS: Mapping[str, str] = MappingProxyType(
    {
        "Producer": "producer",
        "Opening": "opening_year",
        "Capacity": "capacity",
        "Driving Time": "ride_duration",
        "Theoretical Capacity": "theoretical_capacity",
        "Max Acceleration": "max_g_force",
        "Max Speed": "max_speed",
        "Height": "height",
    }
)

QUEUE_POINTER_PREFIX = "Queue - "
VIRTUAL_LINE_PREFIX = "VirtualLine: "

# Kinds that carry ride facts and restrictions.
_DETAILED_KINDS = frozenset({PoiKind.RIDE, PoiKind.STATIC})


def area_name(area_id: Any) -> str | None:
    """Map a vendor area code to its name; unknown codes give ``None``."""
    code = safe_float(area_id)
    if code is None or not code.is_integer():
        return None
    return AREA_NAMES.get(int(code))


def attribute_lookup(raw_attributes: Any) -> dict[str, str]:
    """Index the vendor's ``[{key, value}, ...]`` list by key.

    The first occurrence of a key wins; malformed items are skipped.
    """
    found: dict[str, str] = {}
    if not isinstance(raw_attributes, Iterable) or isinstance(raw_attributes, (str, bytes)):
        return found
    for item in raw_attributes:
        if not isinstance(item, dict):
            continue
        key = item.get("key")
        value = safe_str(item.get("value"))
        if isinstance(key, str) and value is not None:
            found.setdefault(key, value)
    return found


def extract_attributes(raw_attributes: Any) -> RideAttributes:
    lookup = attribute_lookup(raw_attributes)
    return RideAttributes(
        **{field: lookup.get(key) for key, field in ATTRIBUTE_FIELDS.items()},
    )


def extract_restrictions(entity: Mapping[str, Any]) -> Restrictions:
    return Restrictions(
        min_height=positive_int_or_none(entity.get("minHeight")),
        min_height_accompanied=positive_int_or_none(entity.get("minHeightAdult")),
        max_height=positive_int_or_none(entity.get("maxHeight")),
        min_age=positive_int_or_none(entity.get("minAge")),
        min_age_accompanied=positive_int_or_none(entity.get("minAgeAdult")),
    )


class PoiBuilder:
    """Build POI maps for one park.

    Parameters
    ----------
    park_name : str
        Prefix of canonical ids.
    park_id : str
        Scope tag an entity must list first to belong to the park.
    """

    def __init__(self, park_name: str, park_id: str) -> None:
        self._park_name = park_name
        self._park_id = park_id

    def _belongs(self, entity: Mapping[str, Any], kind: PoiKind) -> bool:
        if entity.get("type") != VENDOR_TYPES[kind]:
            return False
        if entity.get("code") is None:
            return False
        scopes = entity.get("scopes")
        # the park must be the entity's primary scope
        return isinstance(scopes, list) and bool(scopes) and scopes[0] == self._park_id

    def build_record(self, entity: Mapping[str, Any], kind: PoiKind) -> PoiRecord | None:
        """Build one record, or ``None`` for queue-pointer artifacts."""
        name = safe_str(entity.get("name")) or ""
        if name.startswith(QUEUE_POINTER_PREFIX):
            return None

        code = str(entity["code"])
        is_virt_queue = kind is PoiKind.RIDE and name.startswith(VIRTUAL_LINE_PREFIX)
        detailed = kind in _DETAILED_KINDS

        return PoiRecord(
            code=code,
            id=f"{self._park_name}_{code}",
            name=name,
            kind=kind,
            location=Location(
                latitude=safe_float(entity.get("latitude")),
                longitude=safe_float(entity.get("longitude")),
                area=area_name(entity.get("areaId")),
            ),
            description=safe_str(entity.get("description")),
            short_description=safe_str(entity.get("excerpt")),
            attributes=extract_attributes(entity.get("attributes")) if detailed else RideAttributes(),
            restrictions=extract_restrictions(entity) if detailed else Restrictions(),
            fast_pass=is_virt_queue,
            single_rider=is_virt_queue,
            is_virt_queue=is_virt_queue,
            parent=name[len(VIRTUAL_LINE_PREFIX) :] if is_virt_queue else None,
            raw=dict(entity),
        )

    def build(self, entities: Iterable[Mapping[str, Any]], kind: PoiKind) -> dict[str, PoiRecord]:
        """Return the map ``code -> PoiRecord`` of *kind* for this park."""
        records: dict[str, PoiRecord] = {}
        for entity in entities:
            if not self._belongs(entity, kind):
                continue
            record = self.build_record(entity, kind)
            if record is None:
                continue
            records[record.code] = record
        _logger.debug("Built %d %s POIs for %s", len(records), kind, self._park_id)
        return records
