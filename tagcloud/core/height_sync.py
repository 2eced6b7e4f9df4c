# tagcloud/core/height_sync.py

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from tagcloud.core.flow_engine import clamp_dimension
from tagcloud.theme import Dims

class HeightSync(QObject):
    """
    Aplaza la actualización de la altura reportada al siguiente ciclo del
    event loop de Qt. Nunca hay más de una actualización pendiente: las
    peticiones repetidas dentro de la misma pasada se fusionan en la última.
    """
    height_changed = pyqtSignal(float)

    def __init__(self, tolerance: float = None, parent=None):
        super().__init__(parent)
        self.tolerance = Dims.flow["height_tolerance"] if tolerance is None else clamp_dimension(tolerance)
        self._height = 0.0
        self._pending = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(0)
        self._timer.timeout.connect(self.flush)

    @property
    def height(self) -> float:
        return self._height

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def request_height_update(self, new_height: float):
        self._pending = clamp_dimension(new_height)
        if not self._timer.isActive():
            self._timer.start()

    def flush(self) -> bool:
        """Aplica el valor pendiente. Devuelve True si la altura cambió."""
        self._timer.stop()
        if self._pending is None:
            return False

        value, self._pending = self._pending, None
        if value == self._height or abs(value - self._height) < self.tolerance:
            return False

        self._height = value
        self.height_changed.emit(value)
        return True
