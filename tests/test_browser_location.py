from __future__ import annotations

from config import GEO_HIGH_ACCURACY, GEO_TIMEOUT_MS
from models.types import AuthorizationState, Coordinate
from services.browser_location import QUERY_ONLY_REQUEST_ID, BrowserLocationPlatform, geolocation_request
from services.location import LocationProvider


def _provider():
    platform = BrowserLocationPlatform()
    return platform, LocationProvider(platform)


def test_no_value_keeps_unknown():
    platform, provider = _provider()
    platform.sync(None)
    assert not platform.reported
    assert provider.current_authorization_state() is AuthorizationState.UNKNOWN


def test_prompt_then_request_bumps_request_id():
    platform, provider = _provider()
    platform.sync({"permission": "prompt", "ok": False})
    assert provider.current_authorization_state() is AuthorizationState.NOT_DETERMINED

    provider.request_permission()
    provider.request_permission()
    assert platform.request_id == 1


def test_position_is_forwarded_once_per_change():
    platform, provider = _provider()
    seen = []
    provider.register_location_change_listener(seen.append)

    value = {"permission": "granted", "ok": True, "lat": 51.5, "lon": -0.12, "accuracy_m": 30}
    platform.sync(value)
    platform.sync(value)

    assert provider.current_authorization_state() is AuthorizationState.AUTHORIZED_WHEN_IN_USE
    assert seen == [Coordinate(51.5, -0.12)]


def test_unsupported_context_is_restricted():
    platform, provider = _provider()
    platform.sync({"permission": "unsupported", "ok": False, "error_message": "insecure"})
    assert provider.current_authorization_state() is AuthorizationState.RESTRICTED


def test_bad_coordinates_are_ignored():
    platform, provider = _provider()
    platform.sync({"permission": "granted", "ok": True, "lat": "north", "lon": None})
    assert provider.last_seen_location() is None


def test_non_finite_coordinates_are_ignored():
    platform, provider = _provider()
    seen = []
    provider.register_location_change_listener(seen.append)

    platform.sync({"permission": "granted", "ok": True, "lat": "NaN", "lon": "Infinity"})

    assert provider.current_authorization_state() is AuthorizationState.AUTHORIZED_WHEN_IN_USE
    assert provider.last_seen_location() is None
    assert seen == []


def test_first_mount_only_queries_permission():
    platform, provider = _provider()
    first = geolocation_request(platform.request_id)
    assert first["request_id"] == QUERY_ONLY_REQUEST_ID
    assert first["ask_position"] is False

    platform.sync({"permission": "prompt", "ok": False})
    provider.request_permission()
    asked = geolocation_request(platform.request_id)

    assert asked["ask_position"] is True
    assert asked["key"] != first["key"]
    assert asked["timeout_ms"] == GEO_TIMEOUT_MS
    assert asked["high_accuracy"] is GEO_HIGH_ACCURACY
