from typing import Callable
import logging

logger = logging.getLogger("forms")
logger.setLevel(logging.INFO)

DataChangeListener = Callable[[], None]


class ChangeNotifier:
    """Registro de suscriptores de un formulario.

    ``fire_changed`` toma una foto de los suscriptores, vacía el registro y
    llama a cada uno una sola vez. Si uno falla se loguea y se sigue con el resto.
    """

    def __init__(self) -> None:
        self._listeners: list[DataChangeListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: DataChangeListener) -> None:
        self._listeners.append(listener)

    def clear(self) -> None:
        self._listeners.clear()

    def fire_changed(self) -> int:
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            try:
                listener()
            except Exception:
                logger.exception("listener_failed", extra={"listener": repr(listener)})
        return len(listeners)
