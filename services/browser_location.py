"""
Plataforma de localización respaldada por el componente de geolocalización del navegador.
"""
import logging
import math
from typing import Any, Callable, Dict, Optional

from config import GEO_TIMEOUT_MS, GEO_HIGH_ACCURACY
from models.types import Coordinate

logger = logging.getLogger(__name__)

# request_id del primer montaje: consulta el permiso sin abrir el diálogo del navegador
QUERY_ONLY_REQUEST_ID = 0


def geolocation_request(
    request_id: int,
    timeout_ms: int = GEO_TIMEOUT_MS,
    high_accuracy: bool = GEO_HIGH_ACCURACY,
) -> Dict[str, Any]:
    """Argumentos del componente; la key cambia con cada request_id para forzar un montaje nuevo."""
    request_id = int(request_id)
    return {
        "request_id": request_id,
        "ask_position": request_id > QUERY_ONLY_REQUEST_ID,
        "timeout_ms": int(timeout_ms),
        "high_accuracy": bool(high_accuracy),
        "key": f"browser_geolocation_{request_id}",
    }


class BrowserLocationPlatform:
    """
    Traduce el valor del componente a los callbacks del proveedor de ubicación.
    sync() se llama una vez por ejecución del script con el valor del componente.
    """

    def __init__(self):
        self.request_id = QUERY_ONLY_REQUEST_ID
        self.reported = False
        self._on_authorization: Optional[Callable[[object], None]] = None
        self._on_location: Optional[Callable[[Coordinate], None]] = None
        self._last_coordinate: Optional[Coordinate] = None

    def start_updates(self, on_authorization, on_location) -> None:
        self._on_authorization = on_authorization
        self._on_location = on_location

    def request_authorization(self) -> None:
        # Un request_id nuevo monta otra instancia del componente, que llama a getCurrentPosition
        self.request_id += 1

    def sync(self, value: Optional[Dict[str, Any]]) -> None:
        if not isinstance(value, dict):
            return
        self.reported = True
        if self._on_authorization is not None:
            self._on_authorization(value.get("permission"))

        if not value.get("ok"):
            error_message = value.get("error_message")
            if error_message:
                logger.warning(f"Geolocalización del navegador: {error_message}")
            return

        try:
            lat, lon = float(value.get("lat")), float(value.get("lon"))
        except (TypeError, ValueError):
            lat = lon = math.nan
        if not (math.isfinite(lat) and math.isfinite(lon)):
            logger.warning(f"Coordenadas no válidas del navegador: {value!r}")
            return
        coordinate = Coordinate(latitude=lat, longitude=lon)

        if coordinate == self._last_coordinate:
            return
        self._last_coordinate = coordinate
        acc = value.get("accuracy_m")
        if isinstance(acc, (int, float)):
            logger.info(f"Ubicación del navegador obtenida (±{acc:.0f} m)")
        if self._on_location is not None:
            self._on_location(coordinate)
