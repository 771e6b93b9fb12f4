"""Client configuration for pytpapi."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pytpapi._constants import (
    DEFAULT_PASSWORD_ENTRY,
    DEFAULT_POI_CACHE_HOURS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SEASONS_CACHE_MINUTES,
    DEFAULT_USERNAME_ENTRY,
    TOKEN_PATH,
)
from pytpapi.exceptions import ConfigurationError


def _env_float(value: str | None, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"expected a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class AppProfile:
    """App identity fields sent with the remote config request.

    These mirror what the vendor's Android app reports to Firebase when
    it fetches its remote configuration.
    """

    firebase_app_id: str = ""
    package_name: str = "com.EuropaParkMackKG.EPGuide"
    app_version: str = "8.3.0"
    sdk_version: str = "21.6.0"
    language_code: str = "en_GB"
    country_code: str = "DE"
    time_zone: str = "Europe/Berlin"
    platform_version: str = "33"


@dataclasses.dataclass(frozen=True)
class ParkConfig:
    """Adapter configuration.

    Parameters
    ----------
    name : str
        Human-readable park name, used as prefix of canonical POI ids.
    park_id : str
        Vendor scope tag of the park (e.g. ``"europapark"``).
    timezone : str
        IANA time zone of the park.
    api_base : str
        Vendor API base URL.
    api_key : str
        Firebase web API key used for the remote config fetch.
    project_id : str
        Firebase project identifier.
    enc_key : str
        Blowfish key protecting the remote config credentials.
    enc_iv : str
        Blowfish IV (8 bytes once UTF-8 encoded).
    latitude, longitude : float or None
        Park entrance coordinates.
    language : str
        Language segment used for the POI and seasons resources.
    poi_cache_hours : float
        Lifetime of the raw and built POI maps.
    seasons_cache_minutes : float
        Lifetime of the raw seasons payload.
    request_timeout : float
        Total timeout in seconds applied to every HTTP request.
    username_entry, password_entry : str
        Remote config entry names holding the encrypted credentials.
    token_path : str
        Token endpoint path relative to ``api_base``.
    app : AppProfile
        App identity fields.
    """

    name: str = ""
    park_id: str = ""
    timezone: str = ""
    api_base: str = ""
    api_key: str = ""
    project_id: str = ""
    enc_key: str = ""
    enc_iv: str = ""
    latitude: float | None = None
    longitude: float | None = None
    language: str = "en"
    poi_cache_hours: float = DEFAULT_POI_CACHE_HOURS
    seasons_cache_minutes: float = DEFAULT_SEASONS_CACHE_MINUTES
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    username_entry: str = DEFAULT_USERNAME_ENTRY
    password_entry: str = DEFAULT_PASSWORD_ENTRY
    token_path: str = TOKEN_PATH
    app: AppProfile = dataclasses.field(default_factory=AppProfile)

    @property
    def poi_ttl(self) -> float:
        """POI cache lifetime in seconds."""
        return self.poi_cache_hours * 3600

    @property
    def seasons_ttl(self) -> float:
        return self.seasons_cache_minutes * 60

    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def validate(self) -> ParkConfig:
        """Raise :class:`ConfigurationError` unless every required option is set.

        Returns the config itself so construction sites can chain it.
        """
        required = {
            "name": self.name,
            "park_id": self.park_id,
            "timezone": self.timezone,
            "api_base": self.api_base,
            "api_key": self.api_key,
            "project_id": self.project_id,
            "enc_key": self.enc_key,
            "enc_iv": self.enc_iv,
            "app.firebase_app_id": self.app.firebase_app_id,
            "app.package_name": self.app.package_name,
        }
        missing = tuple(key for key, value in required.items() if not value)
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                missing=missing,
            )
        try:
            self.zone()
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"Invalid timezone: {self.timezone!r}") from exc
        if self.poi_cache_hours <= 0:
            raise ConfigurationError(f"poi_cache_hours must be positive, got {self.poi_cache_hours}")
        if self.request_timeout <= 0:
            raise ConfigurationError(f"request_timeout must be positive, got {self.request_timeout}")
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> ParkConfig:
        """Create configuration from environment variables.

        Reads ``EUROPAPARK_*`` variables plus ``LANGUAGES``. Explicit
        keyword arguments override environment values. The result is not
        validated; adapters call :meth:`validate` when they are built.
        """
        env = os.environ

        app_kwargs: dict[str, str] = {}
        _ENV_APP_MAP = {
            "EUROPAPARK_FIREBASE_APP_ID": "firebase_app_id",
            "EUROPAPARK_APP_PACKAGE": "package_name",
            "EUROPAPARK_APP_VERSION": "app_version",
        }
        for env_key, field_name in _ENV_APP_MAP.items():
            val = env.get(env_key)
            if val:
                app_kwargs[field_name] = val

        app_overrides = overrides.pop("app", None)
        if isinstance(app_overrides, dict):
            app_kwargs.update(app_overrides)
        elif isinstance(app_overrides, AppProfile):
            app_kwargs = dataclasses.asdict(app_overrides)

        _ENV_CONFIG_MAP = {
            "EUROPAPARK_APIBASE": "api_base",
            "EUROPAPARK_FIREBASE_API_KEY": "api_key",
            "EUROPAPARK_FIREBASE_PROJECT_ID": "project_id",
            "EUROPAPARK_ENC_KEY": "enc_key",
            "EUROPAPARK_ENC_IV": "enc_iv",
            "LANGUAGES": "language",
        }
        config_kwargs: dict[str, Any] = {"app": AppProfile(**app_kwargs)}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        # numeric options, empty means "use the default"
        if "poi_cache_hours" not in overrides:
            config_kwargs["poi_cache_hours"] = _env_float(
                env.get("EUROPAPARK_POI_CACHE_HOURS"),
                DEFAULT_POI_CACHE_HOURS,
            )
        if "seasons_cache_minutes" not in overrides:
            config_kwargs["seasons_cache_minutes"] = _env_float(
                env.get("EUROPAPARK_SEASONS_CACHE_MINUTES"),
                DEFAULT_SEASONS_CACHE_MINUTES,
            )
        if "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float(
                env.get("EUROPAPARK_REQUEST_TIMEOUT"),
                DEFAULT_REQUEST_TIMEOUT,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
