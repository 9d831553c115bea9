"""
Geocodificación inversa con Nominatim: coordenada -> localidad y región.
"""
import logging
from typing import Optional

import requests

from config import NOMINATIM_REVERSE_URL, NOMINATIM_USER_AGENT, GEOCODE_TIMEOUT_SECONDS
from models.types import Coordinate, Placemark

logger = logging.getLogger(__name__)

_LOCALITY_KEYS = ("city", "town", "village", "hamlet", "municipality")
_AREA_KEYS = ("state", "region", "province", "county")


def _first_present(address: dict, keys) -> Optional[str]:
    for key in keys:
        value = str(address.get(key) or "").strip()
        if value:
            return value
    return None


def placemark_from_payload(payload) -> Optional[Placemark]:
    """Extrae el Placemark de una respuesta jsonv2 de /reverse."""
    if not isinstance(payload, dict):
        return None
    address = payload.get("address")
    if not isinstance(address, dict):
        return None
    locality = _first_present(address, _LOCALITY_KEYS)
    area = _first_present(address, _AREA_KEYS)
    if locality is None and area is None:
        return None
    return Placemark(locality=locality, administrative_area=area)


def reverse_geocode(coordinate: Coordinate, http: Optional[requests.Session] = None) -> Optional[Placemark]:
    """
    Devuelve el Placemark de la coordenada o None si Nominatim falla.
    Solo se usa para texto en pantalla, así que los errores no se propagan.
    """
    params = {
        "lat": coordinate.latitude,
        "lon": coordinate.longitude,
        "format": "jsonv2",
        "zoom": 10,
        "addressdetails": 1,
    }
    headers = {
        "User-Agent": NOMINATIM_USER_AGENT,
        "Accept": "application/json",
    }
    getter = http.get if http is not None else requests.get

    try:
        response = getter(NOMINATIM_REVERSE_URL, params=params, headers=headers, timeout=GEOCODE_TIMEOUT_SECONDS)
        response.raise_for_status()
        payload = response.json()
    except requests.HTTPError as err:
        status = getattr(err.response, "status_code", None)
        logger.warning(f"Error HTTP de Nominatim ({status})")
        return None
    except ValueError:
        logger.warning("Nominatim devolvió una respuesta que no es JSON")
        return None
    except requests.RequestException as err:
        logger.warning(f"No se pudo conectar con Nominatim: {err}")
        return None

    return placemark_from_payload(payload)
