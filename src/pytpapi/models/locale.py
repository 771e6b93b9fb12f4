"""Display labels for canonical enums, per locale.

Pure data: the locale is always passed in by the caller. Unknown locales
and missing labels fall back to English.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pytpapi.models._base import PoiKind, QueueStatus, ScheduleType

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "nl", "de", "fr")

STATUS_LABELS: Mapping[str, Mapping[QueueStatus, str]] = MappingProxyType(
    {
        "en": {
            QueueStatus.OPERATING: "Operating",
            QueueStatus.DOWN: "Down",
            QueueStatus.CLOSED: "Closed",
            QueueStatus.REFURBISHMENT: "Refurbishment",
            QueueStatus.FASTPASS_TEMPORARILY_FULL: "Temporarily Full",
            QueueStatus.FASTPASS_FINISHED: "Finished",
        },
        "nl": {
            QueueStatus.OPERATING: "Geopend",
            QueueStatus.DOWN: "Storing",
            QueueStatus.CLOSED: "Gesloten",
            QueueStatus.REFURBISHMENT: "Onderhoud",
            QueueStatus.FASTPASS_TEMPORARILY_FULL: "Tijdelijk vol",
            QueueStatus.FASTPASS_FINISHED: "Uitverkocht",
        },
        "de": {
            QueueStatus.OPERATING: "Geöffnet",
            QueueStatus.DOWN: "Störung",
            QueueStatus.CLOSED: "Geschlossen",
            QueueStatus.REFURBISHMENT: "Instandhaltung",
            QueueStatus.FASTPASS_TEMPORARILY_FULL: "Vorübergehend ausgebucht",
            QueueStatus.FASTPASS_FINISHED: "Ausgebucht",
        },
        "fr": {
            QueueStatus.OPERATING: "Ouvert",
            QueueStatus.DOWN: "Mauvais fonctionnement",
            QueueStatus.CLOSED: "Fermé",
            QueueStatus.REFURBISHMENT: "Entretien",
            QueueStatus.FASTPASS_TEMPORARILY_FULL: "Temporairement complet",
            QueueStatus.FASTPASS_FINISHED: "Épuisé",
        },
    }
)

KIND_LABELS: Mapping[str, Mapping[PoiKind, str]] = MappingProxyType(
    {
        "en": {
            PoiKind.RIDE: "Attraction",
            PoiKind.STATIC: "Sight",
            PoiKind.RESTAURANT: "Restaurant",
            PoiKind.MERCHANDISE: "Merchandise",
            PoiKind.SERVICE: "Service",
        },
        "nl": {
            PoiKind.RIDE: "Attractie",
            PoiKind.STATIC: "Bezienswaardigheid",
            PoiKind.RESTAURANT: "Restaurant",
            PoiKind.MERCHANDISE: "Merchandise",
            PoiKind.SERVICE: "Service",
        },
        "de": {
            PoiKind.RIDE: "Attraktion",
            PoiKind.STATIC: "Sehenswürdigkeit",
            PoiKind.RESTAURANT: "Restaurant",
            PoiKind.MERCHANDISE: "Merchandise",
            PoiKind.SERVICE: "Service",
        },
        "fr": {
            PoiKind.RIDE: "Attraction",
            PoiKind.STATIC: "Curiosité",
            PoiKind.RESTAURANT: "Restaurant",
            PoiKind.MERCHANDISE: "Merchandise",
            PoiKind.SERVICE: "Service",
        },
    }
)

SCHEDULE_LABELS: Mapping[str, Mapping[ScheduleType, str]] = MappingProxyType(
    {
        "en": {
            ScheduleType.OPERATING: "Operating",
            ScheduleType.EXTRA_HOURS: "Extra Hours",
            ScheduleType.CLOSED: "Closed",
        },
        "nl": {
            ScheduleType.OPERATING: "Geopend",
            ScheduleType.EXTRA_HOURS: "Extra uren",
            ScheduleType.CLOSED: "Gesloten",
        },
        "de": {
            ScheduleType.OPERATING: "Geöffnet",
            ScheduleType.EXTRA_HOURS: "Zusätzliche Öffnungszeiten",
            ScheduleType.CLOSED: "Geschlossen",
        },
        "fr": {
            ScheduleType.OPERATING: "Ouvert",
            ScheduleType.EXTRA_HOURS: "Heures supplémentaires",
            ScheduleType.CLOSED: "Fermé",
        },
    }
)


def _lookup(tables: Mapping[str, Mapping[object, str]], value: object, locale: str) -> str:
    table = tables.get(locale) or tables[DEFAULT_LOCALE]
    text = table.get(value)
    if text is None:
        text = tables[DEFAULT_LOCALE][value]
    return text


def label(value: QueueStatus | PoiKind | ScheduleType, locale: str = DEFAULT_LOCALE) -> str:
    """Return the display label of *value* in *locale*."""
    # StrEnum members of different enums compare equal by value, so the
    # table is picked by type rather than merged into one mapping.
    if isinstance(value, QueueStatus):
        return _lookup(STATUS_LABELS, value, locale)
    if isinstance(value, PoiKind):
        return _lookup(KIND_LABELS, value, locale)
    if isinstance(value, ScheduleType):
        return _lookup(SCHEDULE_LABELS, value, locale)
    raise TypeError(f"No labels for {type(value).__name__}")
