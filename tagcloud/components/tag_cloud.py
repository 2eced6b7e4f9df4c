# tagcloud/components/tag_cloud.py

from typing import Any, Callable, Hashable, Iterable, List, Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import QSize, pyqtSignal

from tagcloud.components.flow_layout import FlowLayout
from tagcloud.core.flow_engine import LayoutResult, clamp_dimension
from tagcloud.core.height_sync import HeightSync
from tagcloud.factories import chip_renderer
from tagcloud.theme import STYLES, ChipStyle, Dims, Palette
from tagcloud.utils.logger_text import Log

class TagCloudView(QWidget):
    """
    Nube de etiquetas sobre FlowLayout.

    Modo personalizado: cualquier colección + `render_item(elemento) -> QWidget`.
    Modo conveniencia: `TagCloudView.from_tags([...])`, un chip por texto.

    La altura reportada al padre se asienta de forma diferida (HeightSync):
    es 0 hasta la primera pasada con ancho conocido.
    """
    height_changed = pyqtSignal(int)
    log_signal = pyqtSignal(str)

    def __init__(
        self,
        data: Iterable[Any],
        render_item: Callable[[Any], QWidget],
        vertical_spacing: float = None,
        horizontal_spacing: float = None,
        key: Optional[Callable[[Any], Hashable]] = None,
        parent=None
    ):
        super().__init__(parent)
        if not callable(render_item):
            raise TypeError("render_item debe ser invocable")

        self.render_item = render_item
        self.key_func = key
        self.data: List[Any] = []
        self.keys: List[Hashable] = []
        self.log_history: List[str] = []
        self.chip_style: Optional[ChipStyle] = None

        self.setStyleSheet(STYLES["cloud_host"])
        policy = QSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)

        v = self._clean_spacing(vertical_spacing, Dims.flow["spacing_v"], "vertical")
        h = self._clean_spacing(horizontal_spacing, Dims.flow["spacing_h"], "horizontal")

        self.flow = FlowLayout(self, 0, v, h)
        self.height_sync = HeightSync(parent=self)

        self.flow.layout_computed.connect(self.request_height_update)
        self.height_sync.height_changed.connect(self._on_height_settled)

        self.set_data(data)

    @classmethod
    def from_tags(
        cls,
        tags: Iterable[str],
        text_color: Any = Palette.text,
        fill_color: Any = Palette.fill,
        border_width: float = Dims.chip["border"],
        border_color: Any = Palette.border,
        corner_radius: float = Dims.chip["radius"],
        vertical_spacing: float = None,
        horizontal_spacing: float = None,
        parent=None
    ) -> "TagCloudView":
        """
        Modo conveniencia: un chip por texto con estilo común.

        La identidad de cada chip es la tupla (índice, texto), no el texto solo:
        así dos etiquetas repetidas no colisionan. Las claves de
        `layout_result().offsets` son por tanto tuplas, p. ej. (0, "Hello").
        """
        style = ChipStyle(text_color, fill_color, border_width, border_color, corner_radius)
        view = cls(
            list(enumerate(str(t) for t in tags)),
            chip_renderer(style),
            vertical_spacing=vertical_spacing,
            horizontal_spacing=horizontal_spacing,
            key=lambda pair: pair,
            parent=parent
        )
        view.chip_style = style
        return view

    # =========================================================================
    # REGIÓN 1: DATOS
    # =========================================================================
    @property
    def tags(self) -> List[str]:
        if self.chip_style is None:
            return []
        return [text for _, text in self.data]

    def set_tags(self, tags: Iterable[str]):
        """Solo para el modo conveniencia."""
        self.set_data(list(enumerate(str(t) for t in tags)))

    def set_data(self, data: Iterable[Any]):
        """
        Reconstruye todos los elementos. Los anteriores se destruyen.
        Si render_item falla, la vista conserva los datos y widgets previos.
        """
        data = list(data)

        keys = [self._key_of(index, element) for index, element in enumerate(data)]
        duplicated = len(set(keys)) != len(keys)
        if duplicated:
            keys = list(range(len(data)))

        widgets = []
        try:
            for element in data:
                widget = self.render_item(element)
                if not isinstance(widget, QWidget):
                    raise TypeError(f"render_item devolvió {type(widget).__name__}, se esperaba QWidget")
                widgets.append(widget)
        except Exception:
            for widget in widgets:
                widget.deleteLater()
            raise

        if duplicated:
            self._log(Log.warning("Identidades duplicadas; se usan índices de posición."))

        self._clear_widgets()
        self.data = data
        self.keys = keys
        for widget in widgets:
            self.flow.addWidget(widget)

        self.flow.set_item_keys(self.keys)
        self.updateGeometry()
        self._log(Log.debug(f"{len(self.data)} elementos renderizados."))

    def _key_of(self, index, element):
        if self.key_func is None:
            return index
        return self.key_func(element)

    def _clear_widgets(self):
        item = self.flow.takeAt(0)
        while item:
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
            item = self.flow.takeAt(0)

    # =========================================================================
    # REGIÓN 2: ALTURA DIFERIDA
    # =========================================================================
    @property
    def reported_height(self) -> float:
        return self.height_sync.height

    def request_height_update(self, new_height: float):
        self.height_sync.request_height_update(new_height)

    def _on_height_settled(self, height: float):
        self.updateGeometry()
        self.height_changed.emit(round(height))
        self._log(Log.layout(f"Altura asentada: {height:g}px"))

    def layout_result(self) -> LayoutResult:
        return self.flow.last_result()

    # =========================================================================
    # REGIÓN 3: TAMAÑO
    # =========================================================================
    def sizeHint(self):
        width = self.flow.minimumSize().width()
        return QSize(width, round(self.reported_height))

    def hasHeightForWidth(self):
        return True

    def heightForWidth(self, width):
        return self.flow.heightForWidth(width)

    # =========================================================================
    # REGIÓN 4: HELPERS
    # =========================================================================
    def _clean_spacing(self, value, default, label):
        if value is None:
            return default
        clean = clamp_dimension(value)
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = None
        # "4" o Decimal(4) son válidos; solo avisar si hubo que recortar
        if number is None or number != clean:
            self._log(Log.warning(f"Espaciado {label} inválido ({value!r}); se usa {clean:g}."))
        return clean

    def _log(self, line: str):
        self.log_history.append(line)
        self.log_signal.emit(line)
