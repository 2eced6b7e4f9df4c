# tagcloud/components/tag_chip.py

from PyQt6.QtWidgets import QLabel, QSizePolicy
from PyQt6.QtCore import Qt

from tagcloud.theme import ChipStyle, get_chip_style

class TagChip(QLabel):
    """
    Etiqueta de texto con borde redondeado.
    El padding interno (5/10) forma parte de su tamaño medido.
    """
    def __init__(self, tag: str, style: ChipStyle = None, parent=None):
        super().__init__(str(tag), parent)
        self.tag = str(tag)
        self.chip_style = style or ChipStyle()

        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setStyleSheet(get_chip_style(self.chip_style))
        # Pulir ya: el sizeHint debe incluir padding y borde del QSS
        self.ensurePolished()
