"""
Módulo de modelos de dominio
"""
from .types import (
    AuthorizationState, ErrorKind, Coordinate, Placemark,
    ForecastDay, ForecastResult, ScreenState
)

from .messages import (
    LocationUpdated, ForecastLoaded, ForecastFailed, PlacemarkResolved
)

from .forecast import (
    weather_icon_for_temperature, main_status_icon,
    weekday_label, format_temperature, city_and_state
)

__all__ = [
    # Types
    'AuthorizationState', 'ErrorKind', 'Coordinate', 'Placemark',
    'ForecastDay', 'ForecastResult', 'ScreenState',
    # Messages
    'LocationUpdated', 'ForecastLoaded', 'ForecastFailed', 'PlacemarkResolved',
    # Forecast logic
    'weather_icon_for_temperature', 'main_status_icon',
    'weekday_label', 'format_temperature', 'city_and_state',
]
