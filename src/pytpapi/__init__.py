"""pytpapi - Async Python client for theme park queue times and opening hours."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytpapi")
except PackageNotFoundError:
    __version__ = "0+local"
from pytpapi.config import AppProfile, ParkConfig
from pytpapi.exceptions import (
    ConfigurationError,
    DataShapeError,
    DecryptionError,
    TpapiError,
    UpstreamFetchError,
)
from pytpapi.ingestion import ClosedDayPolicy
from pytpapi.models import (
    FastPassInfo,
    Location,
    PoiKind,
    PoiRecord,
    QueueRecord,
    QueueStatus,
    RemoteCredentials,
    Restrictions,
    ReturnTime,
    RideAttributes,
    ScheduleType,
    ScheduleWindow,
    label,
)
from pytpapi.parks import (
    ALL_PRESETS,
    EUROPAPARK,
    RULANTICA,
    YULLBE,
    EuropaParkAdapter,
    ParkAdapter,
    ParkPreset,
)

__all__ = [
    "__version__",
    "ALL_PRESETS",
    "AppProfile",
    "ClosedDayPolicy",
    "ConfigurationError",
    "DataShapeError",
    "DecryptionError",
    "EUROPAPARK",
    "EuropaParkAdapter",
    "FastPassInfo",
    "Location",
    "ParkAdapter",
    "ParkConfig",
    "ParkPreset",
    "PoiKind",
    "PoiRecord",
    "QueueRecord",
    "QueueStatus",
    "RULANTICA",
    "RemoteCredentials",
    "Restrictions",
    "ReturnTime",
    "RideAttributes",
    "ScheduleType",
    "ScheduleWindow",
    "TpapiError",
    "UpstreamFetchError",
    "YULLBE",
    "label",
]
