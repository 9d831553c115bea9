"""
Proveedor de ubicación: envuelve los servicios de localización de la plataforma.
"""
import logging
from typing import Callable, List, Optional, Protocol

from models.types import AuthorizationState, Coordinate

logger = logging.getLogger(__name__)

LocationCallback = Callable[[Coordinate], None]


class LocationPlatform(Protocol):
    """Capacidades mínimas que debe ofrecer la plataforma de localización."""

    def start_updates(
        self,
        on_authorization: Callable[[object], None],
        on_location: LocationCallback,
    ) -> None:
        """Registra los callbacks de cambio de permiso y de posición."""
        ...

    def request_authorization(self) -> None:
        """Muestra el diálogo de permiso de la plataforma."""
        ...


class LocationProvider:
    """
    Mantiene el último estado de permiso y la última posición conocida.
    Denegado y restringido son terminales durante la sesión.
    """

    def __init__(self, platform: LocationPlatform):
        self._platform = platform
        self._state = AuthorizationState.UNKNOWN
        self._last_location: Optional[Coordinate] = None
        self._listeners: List[LocationCallback] = []
        self._permission_requested = False
        platform.start_updates(self._on_authorization_change, self._on_location_update)

    def request_permission(self) -> None:
        """Dispara el diálogo una sola vez mientras el estado no esté resuelto."""
        if self._state is not AuthorizationState.NOT_DETERMINED:
            return
        if self._permission_requested:
            return
        self._permission_requested = True
        logger.info("Solicitando permiso de ubicación")
        self._platform.request_authorization()

    def current_authorization_state(self) -> AuthorizationState:
        return self._state

    def register_location_change_listener(self, callback: LocationCallback) -> None:
        self._listeners.append(callback)

    def last_seen_location(self) -> Optional[Coordinate]:
        return self._last_location

    def _on_authorization_change(self, raw) -> None:
        new_state = AuthorizationState.from_platform(raw)
        if new_state is self._state:
            return
        if self._state.is_terminal:
            logger.debug(f"Ignorado cambio de permiso {self._state.value} -> {new_state.value}")
            return
        logger.info(f"Permiso de ubicación: {self._state.value} -> {new_state.value}")
        self._state = new_state
        if new_state is AuthorizationState.NOT_DETERMINED:
            self._permission_requested = False

    def _on_location_update(self, coordinate: Coordinate) -> None:
        self._last_location = coordinate
        for callback in list(self._listeners):
            callback(coordinate)
