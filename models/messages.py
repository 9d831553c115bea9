"""
Mensajes que el trabajo en segundo plano envía al bucle de la UI.
"""
from dataclasses import dataclass
from typing import Optional

from .types import Coordinate, ErrorKind, ForecastResult, Placemark


@dataclass(frozen=True)
class LocationUpdated:
    coordinate: Coordinate


@dataclass(frozen=True)
class ForecastLoaded:
    request_id: int
    result: ForecastResult


@dataclass(frozen=True)
class ForecastFailed:
    request_id: int
    kind: ErrorKind
    detail: str = ""


@dataclass(frozen=True)
class PlacemarkResolved:
    coordinate: Coordinate
    placemark: Optional[Placemark]
