"""
Lógica meteorológica de la pantalla: iconos, etiquetas de día y textos.
"""
from datetime import date, timedelta
from typing import Optional

from config import SUNNY_THRESHOLD_C
from .types import Placemark

# Abreviaturas fijas, independientes del locale del servidor
WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def weather_icon_for_temperature(temperature_c: float) -> str:
    """
    Clasifica una máxima diaria en dos cubos.

    Args:
        temperature_c: Temperatura máxima (°C)

    Returns:
        "sunny" si temperature_c >= SUNNY_THRESHOLD_C, si no "cloudy"
    """
    if temperature_c >= SUNNY_THRESHOLD_C:
        return "sunny"
    return "cloudy"


def main_status_icon(is_night: bool) -> str:
    return "moon" if is_night else "cloudy"


def weekday_label(today: date, offset: int) -> str:
    """
    Etiqueta del día `today + offset`.
    Se calcula desde la fecha local, no desde el campo `time` de la API.
    """
    return WEEKDAY_ABBR[(today + timedelta(days=offset)).weekday()]


def format_temperature(temperature_c: float, unit: str = "") -> str:
    """Formatea sin decimales: 21.6 -> '22°', con unidad -> '22° C'"""
    text = f"{temperature_c:.0f}°"
    if unit:
        return f"{text} {unit}"
    return text


def city_and_state(placemark: Optional[Placemark]) -> str:
    """Texto 'ciudad, región'; vacío mientras no haya placemark."""
    if placemark is None:
        return ""
    city = placemark.locality or ""
    state = placemark.administrative_area or ""
    return f"{city}, {state}"
