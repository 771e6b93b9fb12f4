from __future__ import annotations

import dataclasses

import pytest

from pytpapi.config import AppProfile, ParkConfig
from pytpapi.exceptions import ConfigurationError
from pytpapi.parks.presets import EUROPAPARK

_ENV_KEYS = (
    "EUROPAPARK_FIREBASE_APP_ID",
    "EUROPAPARK_APP_PACKAGE",
    "EUROPAPARK_APP_VERSION",
    "EUROPAPARK_APIBASE",
    "EUROPAPARK_FIREBASE_API_KEY",
    "EUROPAPARK_FIREBASE_PROJECT_ID",
    "EUROPAPARK_ENC_KEY",
    "EUROPAPARK_ENC_IV",
    "EUROPAPARK_POI_CACHE_HOURS",
    "EUROPAPARK_SEASONS_CACHE_MINUTES",
    "EUROPAPARK_REQUEST_TIMEOUT",
    "LANGUAGES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _set_full_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EUROPAPARK_FIREBASE_APP_ID", "1:123:android:abc")
    monkeypatch.setenv("EUROPAPARK_APIBASE", "https://api.example.test")
    monkeypatch.setenv("EUROPAPARK_FIREBASE_API_KEY", "api-key")
    monkeypatch.setenv("EUROPAPARK_FIREBASE_PROJECT_ID", "project")
    monkeypatch.setenv("EUROPAPARK_ENC_KEY", "remote-config-key")
    monkeypatch.setenv("EUROPAPARK_ENC_IV", "12345678")


def test_validate_reports_every_missing_option() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        ParkConfig(name="EuropaPark", park_id="europapark", timezone="Europe/Berlin").validate()

    assert set(excinfo.value.missing) == {
        "api_base",
        "api_key",
        "project_id",
        "enc_key",
        "enc_iv",
        "app.firebase_app_id",
    }


def test_validate_rejects_unknown_timezone(park_config: ParkConfig) -> None:
    with pytest.raises(ConfigurationError, match="timezone"):
        dataclasses.replace(park_config, timezone="Mars/Olympus").validate()


def test_validate_rejects_non_positive_durations(park_config: ParkConfig) -> None:
    with pytest.raises(ConfigurationError, match="poi_cache_hours"):
        dataclasses.replace(park_config, poi_cache_hours=0).validate()
    with pytest.raises(ConfigurationError, match="request_timeout"):
        dataclasses.replace(park_config, request_timeout=-1).validate()


def test_ttls(park_config: ParkConfig) -> None:
    assert park_config.poi_ttl == 12 * 3600
    assert park_config.seasons_ttl == 3600


def test_from_env_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_full_env(monkeypatch)
    monkeypatch.setenv("LANGUAGES", "de")
    monkeypatch.setenv("EUROPAPARK_POI_CACHE_HOURS", "6")

    config = EUROPAPARK.config().validate()

    assert config.api_base == "https://api.example.test"
    assert config.app.firebase_app_id == "1:123:android:abc"
    assert config.app.package_name == AppProfile().package_name
    assert config.language == "de"
    assert config.poi_cache_hours == 6.0
    assert config.park_id == "europapark"
    assert config.timezone == "Europe/Berlin"


def test_from_env_empty_numbers_use_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EUROPAPARK_POI_CACHE_HOURS", "")
    monkeypatch.setenv("EUROPAPARK_REQUEST_TIMEOUT", "  ")

    config = ParkConfig.from_env()

    assert config.poi_cache_hours == 12.0
    assert config.request_timeout == 30.0


def test_from_env_rejects_non_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EUROPAPARK_REQUEST_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError):
        ParkConfig.from_env()


def test_overrides_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_full_env(monkeypatch)

    config = ParkConfig.from_env(api_base="https://other.test", app={"app_version": "9.0.0"})

    assert config.api_base == "https://other.test"
    assert config.app.app_version == "9.0.0"
    assert config.app.firebase_app_id == "1:123:android:abc"


def test_from_env_reads_seasons_cache_minutes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EUROPAPARK_SEASONS_CACHE_MINUTES", "15")

    config = ParkConfig.from_env()

    assert config.seasons_cache_minutes == 15.0
    assert config.seasons_ttl == 900
    assert ParkConfig.from_env(seasons_cache_minutes=5).seasons_cache_minutes == 5
