from __future__ import annotations

from datetime import date

import pytest

from fakes import SAMPLE_TEMPS, SAMPLE_TIMES, DeferredDispatch, FakeLocationPlatform


@pytest.fixture
def sample_payload() -> dict:
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "GMT",
        "daily_units": {"time": "iso8601", "temperature_2m_max": "°C"},
        "daily": {"time": list(SAMPLE_TIMES), "temperature_2m_max": list(SAMPLE_TEMPS)},
    }


@pytest.fixture
def platform() -> FakeLocationPlatform:
    return FakeLocationPlatform()


@pytest.fixture
def deferred() -> DeferredDispatch:
    return DeferredDispatch()


@pytest.fixture
def monday() -> date:
    return date(2026, 10, 19)
