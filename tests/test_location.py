from __future__ import annotations

import pytest

from models.types import AuthorizationState, Coordinate
from services.location import LocationProvider


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("prompt", AuthorizationState.NOT_DETERMINED),
        ("granted", AuthorizationState.AUTHORIZED_WHEN_IN_USE),
        ("denied", AuthorizationState.DENIED),
        ("unsupported", AuthorizationState.RESTRICTED),
        ("authorized_always", AuthorizationState.AUTHORIZED_ALWAYS),
        (AuthorizationState.RESTRICTED, AuthorizationState.RESTRICTED),
        ("something-new", AuthorizationState.UNKNOWN),
        (None, AuthorizationState.UNKNOWN),
    ],
)
def test_from_platform_mapping(raw, expected):
    assert AuthorizationState.from_platform(raw) is expected


def test_defaults_before_first_callback(platform):
    provider = LocationProvider(platform)
    assert provider.current_authorization_state() is AuthorizationState.UNKNOWN
    assert provider.last_seen_location() is None


def test_request_permission_only_once_while_not_determined(platform):
    provider = LocationProvider(platform)

    provider.request_permission()
    assert platform.authorization_requests == 0

    platform.authorize("prompt")
    provider.request_permission()
    provider.request_permission()
    assert platform.authorization_requests == 1


def test_request_permission_is_noop_once_resolved(platform):
    provider = LocationProvider(platform)
    platform.authorize("granted")
    provider.request_permission()
    assert platform.authorization_requests == 0


def test_denied_is_terminal(platform):
    provider = LocationProvider(platform)
    platform.authorize("prompt")
    platform.authorize("denied")
    platform.authorize("granted")
    assert provider.current_authorization_state() is AuthorizationState.DENIED


def test_restricted_is_terminal(platform):
    provider = LocationProvider(platform)
    platform.authorize("unsupported")
    platform.authorize("prompt")
    assert provider.current_authorization_state() is AuthorizationState.RESTRICTED


def test_listeners_receive_every_update(platform):
    provider = LocationProvider(platform)
    seen_a, seen_b = [], []
    provider.register_location_change_listener(seen_a.append)
    provider.register_location_change_listener(seen_b.append)

    platform.move_to(51.5, -0.12)
    platform.move_to(40.4, -3.7)

    assert seen_a == [Coordinate(51.5, -0.12), Coordinate(40.4, -3.7)]
    assert seen_b == seen_a
    assert provider.last_seen_location() == Coordinate(40.4, -3.7)
