from __future__ import annotations

import pytest

from pytpapi.config import AppProfile, ParkConfig


@pytest.fixture
def park_config() -> ParkConfig:
    return ParkConfig(
        name="EuropaPark",
        park_id="europapark",
        timezone="Europe/Berlin",
        api_base="https://api.example.test/",
        api_key="firebase-api-key",
        project_id="ep-project",
        enc_key="remote-config-key",
        enc_iv="12345678",
        latitude=48.266140769976715,
        longitude=7.722050520358709,
        app=AppProfile(firebase_app_id="1:123456789:android:abcdef"),
    )
