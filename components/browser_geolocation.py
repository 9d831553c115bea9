"""
Envoltorio Streamlit del componente de geolocalización del navegador.

El frontend contesta con un dict {permission, ok, lat, lon, accuracy_m, error_message}
que BrowserLocationPlatform.sync() traduce a callbacks del proveedor de ubicación.
"""
from pathlib import Path
from typing import Any, Dict, Optional

import streamlit.components.v1 as components

from config import GEO_TIMEOUT_MS, GEO_HIGH_ACCURACY
from services.browser_location import geolocation_request

_FRONTEND_DIR = Path(__file__).resolve().parent / "browser_geolocation_frontend"
_geolocation_component = components.declare_component("skyweather_geolocation", path=str(_FRONTEND_DIR))


def get_browser_geolocation(
    request_id: int,
    *,
    timeout_ms: int = GEO_TIMEOUT_MS,
    high_accuracy: bool = GEO_HIGH_ACCURACY,
) -> Optional[Dict[str, Any]]:
    """
    Monta el componente para un request_id.

    Args:
        request_id: 0 solo consulta el permiso (sin diálogo); cada valor mayor
            monta una instancia nueva que pide la posición y, si hace falta, el permiso
        timeout_ms: Límite de getCurrentPosition
        high_accuracy: enableHighAccuracy del navegador

    Returns:
        Último valor enviado por el frontend, o None si aún no ha contestado
    """
    value = _geolocation_component(
        **geolocation_request(request_id, timeout_ms=timeout_ms, high_accuracy=high_accuracy),
        default=None,
    )
    return value if isinstance(value, dict) else None
