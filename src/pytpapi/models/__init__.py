"""Canonical data models."""

from pytpapi.models._base import PoiKind, QueueStatus, ScheduleType, TpBaseModel
from pytpapi.models.credentials import RemoteCredentials
from pytpapi.models.locale import SUPPORTED_LOCALES, label
from pytpapi.models.poi import Location, PoiRecord, Restrictions, RideAttributes
from pytpapi.models.queue import FastPassInfo, QueueRecord, ReturnTime
from pytpapi.models.schedule import ScheduleWindow

__all__ = [
    "FastPassInfo",
    "Location",
    "PoiKind",
    "PoiRecord",
    "QueueRecord",
    "QueueStatus",
    "RemoteCredentials",
    "Restrictions",
    "ReturnTime",
    "RideAttributes",
    "SUPPORTED_LOCALES",
    "ScheduleType",
    "ScheduleWindow",
    "TpBaseModel",
    "label",
]
