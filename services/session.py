"""
Estado de la sesión de SkyWeather y efectos secundarios de la presentación.
"""
import logging
from datetime import date
from typing import Callable, Optional

from api.open_meteo import ForecastClient
from models.messages import ForecastFailed, ForecastLoaded, LocationUpdated, PlacemarkResolved
from models.types import AuthorizationState, Coordinate, Placemark, ScreenState
from .events import UiEventLoop, run_in_background
from .geocoding import reverse_geocode
from .location import LocationPlatform, LocationProvider

logger = logging.getLogger(__name__)

Geocoder = Callable[[Coordinate], Optional[Placemark]]
Dispatcher = Callable[[Callable[[], None]], None]


class WeatherSession:
    """
    Une proveedor de ubicación, cliente de pronóstico y buzón de la UI.
    Todo cambio de estado ocurre en pump(), desde el hilo de la UI.
    """

    def __init__(
        self,
        location: LocationProvider,
        events: UiEventLoop,
        forecast: ForecastClient,
        geocoder: Geocoder = reverse_geocode,
        dispatch: Dispatcher = run_in_background,
    ):
        self.location = location
        self.events = events
        self.forecast = forecast
        self._geocoder = geocoder
        self._dispatch = dispatch
        self.is_night = False
        self.coordinate: Optional[Coordinate] = None
        self.placemark: Optional[Placemark] = None
        self._listening = False

    @property
    def authorization(self) -> AuthorizationState:
        return self.location.current_authorization_state()

    @property
    def waiting(self) -> bool:
        """Hay trabajo pendiente que llegará al buzón (o se espera una posición)."""
        if not self.authorization.is_authorized:
            return False
        if self.forecast.in_flight or not self.events.empty():
            return True
        return self._listening and self.coordinate is None

    def toggle_night(self) -> None:
        self.is_night = not self.is_night

    def request_permission(self) -> None:
        self.location.request_permission()

    def on_weather_view_shown(self) -> None:
        """Primera vez que se muestra la vista autorizada sin datos: escuchar ubicación."""
        if self._listening or self.forecast.result is not None:
            return
        self._listening = True
        self.location.register_location_change_listener(self._on_location_changed)
        known = self.location.last_seen_location()
        if known is not None:
            self._on_location_changed(known)

    def _on_location_changed(self, coordinate: Coordinate) -> None:
        # Puede llegar desde cualquier hilo: solo se encola
        self.events.post(LocationUpdated(coordinate=coordinate))

    def retry(self) -> Optional[int]:
        """Reintenta la descarga tras un fallo, con la coordenada actual."""
        if self.coordinate is None or self.forecast.in_flight:
            return None
        logger.info("Reintentando pronóstico")
        return self.forecast.fetch_forecast(self.coordinate.latitude, self.coordinate.longitude)

    def pump(self) -> int:
        """Aplica los mensajes pendientes. Devuelve cuántos se han procesado."""
        messages = self.events.drain()
        for message in messages:
            if isinstance(message, LocationUpdated):
                self._handle_location(message.coordinate)
            elif isinstance(message, (ForecastLoaded, ForecastFailed)):
                self.forecast.apply(message)
            elif isinstance(message, PlacemarkResolved):
                if message.coordinate == self.coordinate:
                    self.placemark = message.placemark
            else:
                logger.warning(f"Mensaje desconocido en el buzón: {message!r}")
        return len(messages)

    def _handle_location(self, coordinate: Coordinate) -> None:
        self.coordinate = coordinate
        self.forecast.fetch_forecast(coordinate.latitude, coordinate.longitude)
        geocoder = self._geocoder
        post = self.events.post

        def resolve():
            post(PlacemarkResolved(coordinate=coordinate, placemark=geocoder(coordinate)))

        self._dispatch(resolve)

    def snapshot(self, today: Optional[date] = None) -> ScreenState:
        return ScreenState(
            authorization=self.authorization,
            is_night=self.is_night,
            coordinate=self.coordinate,
            forecast=self.forecast.result,
            placemark=self.placemark,
            error=self.forecast.last_error,
            today=today,
        )


def build_session(
    platform: LocationPlatform,
    dispatch: Dispatcher = run_in_background,
    geocoder: Geocoder = reverse_geocode,
    http=None,
) -> WeatherSession:
    """Construye la sesión con sus dependencias pasadas de forma explícita."""
    events = UiEventLoop()
    location = LocationProvider(platform)
    forecast = ForecastClient(post=events.post, dispatch=dispatch, http=http)
    return WeatherSession(location, events, forecast, geocoder=geocoder, dispatch=dispatch)
