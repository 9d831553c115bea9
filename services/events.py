"""
Buzón de mensajes hacia el hilo de la UI (la ejecución del script de Streamlit).
"""
import logging
import queue
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)


class UiEventLoop:
    """
    Los hilos en segundo plano solo hacen post(); el estado compartido
    únicamente se modifica al vaciar el buzón desde el hilo de la UI.
    """

    def __init__(self):
        self._inbox = queue.SimpleQueue()

    def post(self, message) -> None:
        self._inbox.put(message)

    def drain(self) -> List[object]:
        messages = []
        while True:
            try:
                messages.append(self._inbox.get_nowait())
            except queue.Empty:
                return messages

    def empty(self) -> bool:
        return self._inbox.empty()


def run_in_background(work: Callable[[], None], name: str = "skyweather-io") -> None:
    """Lanza `work` en un hilo daemon. No hay cancelación."""
    thread = threading.Thread(target=work, name=name, daemon=True)
    thread.start()
    logger.debug(f"Hilo {thread.name} lanzado")
