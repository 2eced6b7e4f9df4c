# tagcloud/factories.py

from PyQt6.QtWidgets import QLabel, QTextEdit
from tagcloud.components.tag_chip import TagChip
from tagcloud.theme import STYLES, ChipStyle

# ==========================================
# CHIPS
# ==========================================
def create_tag_chip(text: str, style: ChipStyle = None) -> TagChip:
    return TagChip(text, style)

def chip_renderer(style: ChipStyle = None):
    """Devuelve un render_item que dibuja cada texto como chip con un estilo común."""
    shared = style or ChipStyle()

    def render(tag):
        # Los datos del modo conveniencia son pares (índice, texto)
        _, text = tag
        return create_tag_chip(text, shared)

    return render

def create_badge(text: str) -> QLabel:
    lbl = QLabel(str(text))
    lbl.setStyleSheet(STYLES["custom_badge"])
    return lbl

# ==========================================
# HEADERS Y CONSOLA
# ==========================================
def create_section_header(text: str) -> QLabel:
    lbl = QLabel(text); lbl.setObjectName("h3")
    return lbl

def create_log_console() -> QTextEdit:
    console = QTextEdit()
    console.setReadOnly(True)
    console.setStyleSheet(STYLES["text_edit_console"])
    return console
