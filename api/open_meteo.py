"""
Cliente del pronóstico diario de Open-Meteo (máximas de temperatura)
Cada petición lleva un id creciente; solo se acepta la respuesta de la última.
"""
import itertools
import logging
import math
from array import array
from typing import Callable, Dict, Optional
from urllib.parse import urlsplit

import requests

from config import FORECAST_URL, FORECAST_DAILY_METRIC, FORECAST_TIMEZONE, FORECAST_TIMEOUT_SECONDS
from models.messages import ForecastFailed, ForecastLoaded
from models.types import ErrorKind, ForecastResult
from services.events import run_in_background

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ForecastError(Exception):
    def __init__(self, kind: ErrorKind, status_code: Optional[int] = None, detail: str = ""):
        self.kind = kind
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail or kind.value)


def build_forecast_params(latitude: float, longitude: float) -> Dict:
    return {
        "latitude": latitude,
        "longitude": longitude,
        "daily": FORECAST_DAILY_METRIC,
        "timezone": FORECAST_TIMEZONE,
    }


def build_forecast_url(latitude: float, longitude: float, base_url: str = FORECAST_URL) -> str:
    """
    Construye la URL completa de la petición.
    Una URL imposible es un error de programación: lanza ValueError y no se captura.
    """
    if not (math.isfinite(float(latitude)) and math.isfinite(float(longitude))):
        raise ValueError(f"Coordenadas no válidas: {latitude}, {longitude}")
    parts = urlsplit(base_url or "")
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"URL de pronóstico no válida: {base_url!r}")
    prepared = requests.Request("GET", base_url, params=build_forecast_params(latitude, longitude)).prepare()
    return prepared.url


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_forecast(payload) -> ForecastResult:
    """
    Decodifica {"daily": {"time": [...], "temperature_2m_max": [...]}}.
    Las dos series deben tener la misma longitud y estar alineadas por índice.
    """
    if not isinstance(payload, dict):
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="El cuerpo no es un objeto JSON")
    daily = payload.get("daily")
    if not isinstance(daily, dict):
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="Falta el objeto 'daily'")

    times = daily.get("time")
    temps = daily.get(FORECAST_DAILY_METRIC)
    if not isinstance(times, list) or not isinstance(temps, list):
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="Series 'time'/'temperature_2m_max' ausentes")
    if len(times) != len(temps):
        raise ForecastError(
            ErrorKind.DECODE_FAILURE,
            detail=f"Series desalineadas ({len(times)} fechas, {len(temps)} temperaturas)",
        )
    if not all(isinstance(t, str) for t in times):
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="Fecha no textual en 'time'")
    if not all(_is_number(v) for v in temps):
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="Temperatura no numérica")

    try:
        # precisión float32; lo que no cabe en float32 queda como inf
        values = list(array("f", [float(v) for v in temps]))
    except (OverflowError, ValueError) as err:
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="Temperatura fuera de rango") from err
    if not all(math.isfinite(v) for v in values):
        raise ForecastError(ErrorKind.DECODE_FAILURE, detail="Temperatura no finita")

    return ForecastResult.from_series(times, values)


def fetch_forecast_sync(
    latitude: float,
    longitude: float,
    http: Optional[requests.Session] = None,
    timeout: float = FORECAST_TIMEOUT_SECONDS,
) -> ForecastResult:
    """Una petición GET bloqueante. Lanza ForecastError ante cualquier fallo."""
    url = build_forecast_url(latitude, longitude)
    getter = http.get if http is not None else requests.get

    logger.info(f"Consultando pronóstico para ({latitude}, {longitude})")

    try:
        r = getter(url, timeout=timeout)
    except requests.RequestException as err:
        raise ForecastError(ErrorKind.NETWORK_FAILURE, detail=str(err)) from err

    if r.status_code != 200:
        raise ForecastError(ErrorKind.NETWORK_FAILURE, status_code=r.status_code, detail=f"HTTP {r.status_code}")

    try:
        data = r.json()
    except ValueError as err:
        raise ForecastError(ErrorKind.DECODE_FAILURE, status_code=r.status_code, detail="Cuerpo no JSON") from err

    result = decode_forecast(data)
    logger.info(f"Pronóstico recibido: {len(result)} días")
    return result


class ForecastClient:
    """
    Lanza descargas en segundo plano y expone el último resultado aceptado.

    Los resultados llegan como mensajes al buzón de la UI (`post`) y solo se
    aplican con `apply()` desde el hilo de la UI.
    """

    def __init__(
        self,
        post: Callable[[object], None],
        dispatch: Callable[[Callable[[], None]], None] = run_in_background,
        http: Optional[requests.Session] = None,
        timeout: float = FORECAST_TIMEOUT_SECONDS,
    ):
        self._post = post
        self._dispatch = dispatch
        self._http = http
        self._timeout = timeout
        self._ids = itertools.count(1)
        self.latest_request_id = 0
        self._completed_request_id = 0
        self.result: Optional[ForecastResult] = None
        self.last_error: Optional[ErrorKind] = None

    @property
    def in_flight(self) -> bool:
        return self.latest_request_id != self._completed_request_id

    def fetch_forecast(self, latitude: float, longitude: float) -> int:
        """Lanza una descarga y devuelve su id. Reemplaza a cualquier petición anterior."""
        build_forecast_url(latitude, longitude)  # una URL imposible falla aquí, no en el hilo
        request_id = next(self._ids)
        self.latest_request_id = request_id

        def work():
            try:
                result = fetch_forecast_sync(latitude, longitude, http=self._http, timeout=self._timeout)
            except ForecastError as err:
                logger.warning(f"Fallo de pronóstico #{request_id} ({err.kind.value}): {err}")
                self._post(ForecastFailed(request_id=request_id, kind=err.kind, detail=str(err)))
                return
            except Exception as err:
                # el id debe completarse siempre o in_flight no vuelve a False
                logger.exception(f"Error inesperado en el pronóstico #{request_id}")
                self._post(ForecastFailed(request_id=request_id, kind=ErrorKind.DECODE_FAILURE, detail=str(err)))
                return
            self._post(ForecastLoaded(request_id=request_id, result=result))

        self._dispatch(work)
        return request_id

    def is_current(self, request_id: int) -> bool:
        return request_id == self.latest_request_id

    def apply(self, message) -> bool:
        """
        Aplica un ForecastLoaded/ForecastFailed. Devuelve False si es obsoleto.
        Un fallo no toca el resultado anterior.
        """
        if not self.is_current(message.request_id):
            logger.debug(f"Descartada respuesta obsoleta #{message.request_id} (actual #{self.latest_request_id})")
            return False
        self._completed_request_id = message.request_id
        if isinstance(message, ForecastLoaded):
            self.result = message.result
            self.last_error = None
        elif isinstance(message, ForecastFailed):
            self.last_error = message.kind
        return True
