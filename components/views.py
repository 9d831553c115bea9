"""
Árbol de vistas de la pantalla principal.

build_screen() es una función pura del estado (permiso, pronóstico, noche...)
y devuelve una descripción de lo que hay que dibujar. El dibujo con Streamlit
vive en components/render.py; aquí no se importa Streamlit.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

from config import DAY_GRADIENT, NIGHT_GRADIENT, FORECAST_SLOTS, MIN_FORECAST_DAYS
from models.forecast import (
    city_and_state, format_temperature, main_status_icon,
    weather_icon_for_temperature, weekday_label,
)
from models.types import AuthorizationState, ErrorKind, ScreenState

PERMISSION_CAPTION = "We need your permission to track you."
PERMISSION_BUTTON = "Allow tracking"
RESTRICTED_TEXT = "Location use is restricted."
DENIED_TEXT = "The app does not have location permissions. Please enable them in settings."
FALLBACK_TEXT = "Unexpected status"
TOGGLE_LABEL = "Change Day Time"
INSUFFICIENT_TEXT = "Not enough forecast data to display."
RETRY_LABEL = "Retry"
FAILURE_TEXT = {
    ErrorKind.NETWORK_FAILURE: "Could not reach the forecast service.",
    ErrorKind.DECODE_FAILURE: "The forecast service returned unexpected data.",
}


@dataclass(frozen=True)
class Background:
    top_left: str
    bottom_right: str


@dataclass(frozen=True)
class PermissionPrompt:
    icon: str = "location"
    button_label: str = PERMISSION_BUTTON
    caption: str = PERMISSION_CAPTION
    kind: str = "permission-prompt"


@dataclass(frozen=True)
class ErrorMessage:
    error: ErrorKind
    text: str
    kind: str
    icon: str = "error"


@dataclass(frozen=True)
class FallbackText:
    text: str = FALLBACK_TEXT
    kind: str = "fallback-text"


@dataclass(frozen=True)
class MainStatus:
    icon: str
    temperature_text: str


@dataclass(frozen=True)
class DaySlot:
    weekday: str
    icon: str
    temperature_text: str


@dataclass(frozen=True)
class WeatherView:
    """
    status:
        loading: sin resultado ni error todavía
        failed: la última descarga falló (se ofrece reintentar)
        insufficient: menos de MIN_FORECAST_DAYS entradas
        ready: pantalla completa
    """
    status: str
    city_text: str = ""
    main: Optional[MainStatus] = None
    days: Tuple[DaySlot, ...] = ()
    message: str = ""
    retry_label: str = ""
    toggle_label: str = TOGGLE_LABEL
    kind: str = "weather-view"


Body = Union[PermissionPrompt, ErrorMessage, WeatherView, FallbackText]


@dataclass(frozen=True)
class Screen:
    background: Background
    body: Body


def background_for(is_night: bool) -> Background:
    top_left, bottom_right = NIGHT_GRADIENT if is_night else DAY_GRADIENT
    return Background(top_left=top_left, bottom_right=bottom_right)


def build_weather_view(state: ScreenState, today: date) -> WeatherView:
    forecast = state.forecast
    city_text = city_and_state(state.placemark)

    if forecast is None:
        if state.error is not None:
            return WeatherView(
                status="failed",
                city_text=city_text,
                message=FAILURE_TEXT.get(state.error, FAILURE_TEXT[ErrorKind.NETWORK_FAILURE]),
                retry_label=RETRY_LABEL,
            )
        return WeatherView(status="loading", city_text=city_text)

    temps = forecast.temperatures
    main = None
    if temps:
        main = MainStatus(
            icon=main_status_icon(state.is_night),
            temperature_text=format_temperature(temps[0], unit="C"),
        )

    if len(temps) < MIN_FORECAST_DAYS:
        return WeatherView(status="insufficient", city_text=city_text, main=main, message=INSUFFICIENT_TEXT)

    days = tuple(
        DaySlot(
            weekday=weekday_label(today, offset),
            icon=weather_icon_for_temperature(temps[offset]),
            temperature_text=format_temperature(temps[offset]),
        )
        for offset in range(1, FORECAST_SLOTS + 1)
    )
    return WeatherView(status="ready", city_text=city_text, main=main, days=days)


def build_screen(state: ScreenState, today: Optional[date] = None) -> Screen:
    """Traduce el estado completo a exactamente un cuerpo de pantalla."""
    today = today or state.today or date.today()
    background = background_for(state.is_night)
    auth = state.authorization

    if auth is AuthorizationState.NOT_DETERMINED:
        body = PermissionPrompt()
    elif auth is AuthorizationState.RESTRICTED:
        body = ErrorMessage(error=ErrorKind.PERMISSION_RESTRICTED, text=RESTRICTED_TEXT, kind="restricted-message")
    elif auth is AuthorizationState.DENIED:
        body = ErrorMessage(error=ErrorKind.PERMISSION_DENIED, text=DENIED_TEXT, kind="denied-message")
    elif auth.is_authorized:
        body = build_weather_view(state, today)
    else:
        body = FallbackText()

    return Screen(background=background, body=body)
