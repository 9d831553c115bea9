from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from components.views import build_screen
from config import FORECAST_URL
from models.types import AuthorizationState, Coordinate, ErrorKind, Placemark
from services.session import build_session

from fakes import SAMPLE_TEMPS, run_now


def _geocoder(calls):
    def geocode(coordinate: Coordinate):
        calls.append(coordinate)
        return Placemark(locality="London", administrative_area="England")
    return geocode


def test_authorized_location_triggers_one_fetch(requests_mock, platform, sample_payload, monday):
    requests_mock.get(FORECAST_URL, json=sample_payload)
    geocoded = []
    session = build_session(platform, dispatch=run_now, geocoder=_geocoder(geocoded))

    platform.authorize("granted")
    assert session.authorization is AuthorizationState.AUTHORIZED_WHEN_IN_USE
    assert build_screen(session.snapshot(), today=monday).body.status == "loading"

    session.on_weather_view_shown()
    platform.move_to(51.5, -0.12)
    assert requests_mock.call_count == 0  # nada ocurre fuera del hilo de la UI

    session.pump()  # LocationUpdated -> fetch + geocodificación
    session.pump()  # ForecastLoaded + PlacemarkResolved

    assert requests_mock.call_count == 1
    query = parse_qs(urlsplit(requests_mock.last_request.url).query)
    assert query["latitude"] == ["51.5"]
    assert query["longitude"] == ["-0.12"]
    assert geocoded == [Coordinate(51.5, -0.12)]

    view = build_screen(session.snapshot(), today=monday).body
    assert view.status == "ready"
    assert view.city_text == "London, England"
    assert len(view.days) == 5
    assert session.forecast.result.temperatures == tuple(SAMPLE_TEMPS)
    assert not session.waiting


def test_listener_registers_once(platform, deferred):
    session = build_session(platform, dispatch=deferred, geocoder=lambda c: None)
    platform.authorize("granted")

    session.on_weather_view_shown()
    session.on_weather_view_shown()
    platform.move_to(1.0, 2.0)

    assert len(session.events.drain()) == 1


def test_known_location_is_used_when_view_appears(requests_mock, platform, sample_payload):
    requests_mock.get(FORECAST_URL, json=sample_payload)
    session = build_session(platform, dispatch=run_now, geocoder=lambda c: None)
    platform.authorize("granted")
    platform.move_to(51.5, -0.12)

    session.on_weather_view_shown()
    session.pump()
    session.pump()

    assert requests_mock.call_count == 1
    assert session.coordinate == Coordinate(51.5, -0.12)


def test_waiting_while_fetch_in_flight(platform, deferred):
    session = build_session(platform, dispatch=deferred, geocoder=lambda c: None)
    platform.authorize("granted")
    session.on_weather_view_shown()
    assert session.waiting  # esperando posición

    platform.move_to(51.5, -0.12)
    session.pump()
    assert session.forecast.in_flight
    assert session.waiting


def test_failure_then_retry(requests_mock, platform, sample_payload, monday):
    requests_mock.get(FORECAST_URL, status_code=500)
    session = build_session(platform, dispatch=run_now, geocoder=lambda c: None)
    platform.authorize("granted")
    session.on_weather_view_shown()
    platform.move_to(51.5, -0.12)
    session.pump()
    session.pump()

    assert session.forecast.last_error is ErrorKind.NETWORK_FAILURE
    assert build_screen(session.snapshot(), today=monday).body.status == "failed"

    requests_mock.get(FORECAST_URL, json=sample_payload)
    assert session.retry() is not None
    session.pump()

    assert build_screen(session.snapshot(), today=monday).body.status == "ready"
    assert requests_mock.call_count == 2


def test_out_of_range_temperature_shows_failed_view_with_retry(requests_mock, platform, monday):
    requests_mock.get(FORECAST_URL, text='{"daily": {"time": ["2026-10-19"], "temperature_2m_max": [%s]}}' % ("9" * 400))
    session = build_session(platform, dispatch=run_now, geocoder=lambda c: None)
    platform.authorize("granted")
    session.on_weather_view_shown()
    platform.move_to(51.5, -0.12)
    session.pump()
    session.pump()

    assert session.forecast.last_error is ErrorKind.DECODE_FAILURE
    assert not session.waiting
    assert build_screen(session.snapshot(), today=monday).body.status == "failed"
    assert session.retry() is not None


def test_retry_without_coordinate_does_nothing(platform, deferred):
    session = build_session(platform, dispatch=deferred, geocoder=lambda c: None)
    assert session.retry() is None
    assert deferred.pending == []


def test_stale_placemark_is_ignored(platform, deferred):
    session = build_session(platform, dispatch=deferred, geocoder=lambda c: Placemark(locality=str(c.latitude)))
    platform.authorize("granted")
    session.on_weather_view_shown()

    platform.move_to(1.0, 1.0)
    session.pump()
    platform.move_to(2.0, 2.0)
    session.pump()

    # fetch #1, geocode #1, fetch #2, geocode #2: solo se ejecutan las geocodificaciones
    geocode_first, geocode_second = deferred.pending[1], deferred.pending[3]
    geocode_second()
    geocode_first()
    session.pump()

    assert session.placemark == Placemark(locality="2.0")


def test_toggle_night_and_permission_request(platform):
    session = build_session(platform, dispatch=run_now, geocoder=lambda c: None)
    platform.authorize("prompt")

    session.request_permission()
    session.request_permission()
    assert platform.authorization_requests == 1

    session.toggle_night()
    assert session.snapshot().is_night
    session.toggle_night()
    assert not session.snapshot().is_night


def test_denied_session_never_waits(platform):
    session = build_session(platform, dispatch=run_now, geocoder=lambda c: None)
    platform.authorize("denied")
    assert not session.waiting
    assert build_screen(session.snapshot()).body.kind == "denied-message"
