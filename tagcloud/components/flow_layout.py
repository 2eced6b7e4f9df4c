# tagcloud/components/flow_layout.py

from PyQt6.QtWidgets import QLayout
from PyQt6.QtCore import Qt, QRect, QSize, QPoint, pyqtSignal

from tagcloud.core.flow_engine import (
    FlowItem, ItemSize, LayoutResult, clamp_dimension, compute_flow_layout, measure_padded
)
from tagcloud.theme import Dims

class FlowLayout(QLayout):
    """
    Layout de flujo estricto sobre el motor puro.
    - NO estira los elementos (mantiene su sizeHint).
    - El espaciado se suma como padding a cada lado de cada elemento.
    - Alto dependiente del ancho (heightForWidth), en una sola pasada.
    """
    layout_computed = pyqtSignal(float)

    def __init__(self, parent=None, margin=0, vertical_spacing=None, horizontal_spacing=None):
        super().__init__(parent)
        self.itemList = []
        self._keys = []
        self._last_result = LayoutResult()
        self.setContentsMargins(margin, margin, margin, margin)

        self.vertical_spacing = Dims.flow["spacing_v"] if vertical_spacing is None else clamp_dimension(vertical_spacing)
        self.horizontal_spacing = Dims.flow["spacing_h"] if horizontal_spacing is None else clamp_dimension(horizontal_spacing)

    def __del__(self):
        item = self.takeAt(0)
        while item:
            item = self.takeAt(0)

    # =========================================================================
    # REGIÓN 1: API DE QLayout
    # =========================================================================
    def addItem(self, item):
        self.itemList.append(item)

    def count(self):
        return len(self.itemList)

    def itemAt(self, index):
        if 0 <= index < len(self.itemList):
            return self.itemList[index]
        return None

    def takeAt(self, index):
        if 0 <= index < len(self.itemList):
            return self.itemList.pop(index)
        return None

    def expandingDirections(self):
        return Qt.Orientation(0)

    def hasHeightForWidth(self):
        return True

    def heightForWidth(self, width):
        margins = self.contentsMargins()
        content_width = width - margins.left() - margins.right()
        result = compute_flow_layout(self._flow_items(), content_width)
        return round(result.total_height) + margins.top() + margins.bottom()

    def setGeometry(self, rect):
        super().setGeometry(rect)
        self._last_result = self._do_layout(rect)
        self.layout_computed.emit(self._last_result.total_height)

    def sizeHint(self):
        return self.minimumSize()

    def minimumSize(self):
        # El elemento más ancho (con su padding) debe caber siempre
        size = QSize(0, 0)
        for item in self._flow_items():
            size = size.expandedTo(QSize(round(item.size.width), round(item.size.height)))

        margins = self.contentsMargins()
        size += QSize(margins.left() + margins.right(), margins.top() + margins.bottom())
        return size

    # =========================================================================
    # REGIÓN 2: IDENTIDAD Y RESULTADOS
    # =========================================================================
    def set_item_keys(self, keys):
        """Asigna identidades estables (una por elemento, en orden)."""
        self._keys = list(keys)
        self.invalidate()

    def key_for(self, index):
        if len(self._keys) == len(self.itemList):
            return self._keys[index]
        return index

    def last_result(self) -> LayoutResult:
        return self._last_result

    # =========================================================================
    # REGIÓN 3: MEDICIÓN Y COLOCACIÓN
    # =========================================================================
    def _flow_items(self):
        items = []
        for index, item in enumerate(self.itemList):
            hint = item.sizeHint()
            size = measure_padded(
                ItemSize(hint.width(), hint.height()),
                self.horizontal_spacing, self.vertical_spacing
            )
            items.append(FlowItem(self.key_for(index), size))
        return items

    def _do_layout(self, rect):
        m = self.contentsMargins()
        content = rect.adjusted(m.left(), m.top(), -m.right(), -m.bottom())
        result = compute_flow_layout(self._flow_items(), content.width())

        pad_x = round(self.horizontal_spacing)
        pad_y = round(self.vertical_spacing)

        for index, item in enumerate(self.itemList):
            x, y = result.offset_for(self.key_for(index))
            origin = QPoint(content.x() + round(x) + pad_x, content.y() + round(y) + pad_y)
            item.setGeometry(QRect(origin, item.sizeHint()))

        return result
