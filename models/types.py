"""
Tipos de dominio: permisos, coordenadas y pronóstico.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple


class AuthorizationState(Enum):
    """Estado del permiso de ubicación tal como lo expone la plataforma."""
    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED_ALWAYS = "authorized_always"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    UNKNOWN = "unknown"

    @property
    def is_authorized(self) -> bool:
        return self in (AuthorizationState.AUTHORIZED_ALWAYS, AuthorizationState.AUTHORIZED_WHEN_IN_USE)

    @property
    def is_terminal(self) -> bool:
        """Denegado y restringido no tienen salida dentro de la sesión."""
        return self in (AuthorizationState.DENIED, AuthorizationState.RESTRICTED)

    @classmethod
    def from_platform(cls, raw) -> "AuthorizationState":
        """
        Traduce un valor de la plataforma a un estado conocido.
        Cualquier valor no mapeado es UNKNOWN, nunca un estado por defecto.
        """
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        if key in _BROWSER_PERMISSIONS:
            return _BROWSER_PERMISSIONS[key]
        for state in cls:
            if state.value == key:
                return state
        return cls.UNKNOWN


# Valores de la Permissions API del navegador (y "unsupported" del componente)
_BROWSER_PERMISSIONS = {
    "prompt": AuthorizationState.NOT_DETERMINED,
    "granted": AuthorizationState.AUTHORIZED_WHEN_IN_USE,
    "denied": AuthorizationState.DENIED,
    "unsupported": AuthorizationState.RESTRICTED,
}


class ErrorKind(Enum):
    PERMISSION_DENIED = "permission_denied"
    PERMISSION_RESTRICTED = "permission_restricted"
    NETWORK_FAILURE = "network_failure"
    DECODE_FAILURE = "decode_failure"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Placemark:
    """Localidad y región legibles derivadas de una coordenada."""
    locality: Optional[str] = None
    administrative_area: Optional[str] = None


@dataclass(frozen=True)
class ForecastDay:
    date: str
    max_temperature_c: float


@dataclass(frozen=True)
class ForecastResult:
    """Serie diaria de máximas. Cada descarga correcta reemplaza la anterior."""
    days: Tuple[ForecastDay, ...] = ()

    def __len__(self) -> int:
        return len(self.days)

    @property
    def temperatures(self) -> Tuple[float, ...]:
        return tuple(d.max_temperature_c for d in self.days)

    @property
    def dates(self) -> Tuple[str, ...]:
        return tuple(d.date for d in self.days)

    @classmethod
    def from_series(cls, times, temperatures) -> "ForecastResult":
        return cls(days=tuple(ForecastDay(date=t, max_temperature_c=float(v)) for t, v in zip(times, temperatures)))


@dataclass(frozen=True)
class ScreenState:
    """Instantánea de todo lo que necesita la capa de presentación."""
    authorization: AuthorizationState
    is_night: bool = False
    coordinate: Optional[Coordinate] = None
    forecast: Optional[ForecastResult] = None
    placemark: Optional[Placemark] = None
    error: Optional[ErrorKind] = None
    today: Optional[date] = field(default=None, compare=False)
