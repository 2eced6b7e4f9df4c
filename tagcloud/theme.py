# tagcloud/theme.py

from dataclasses import dataclass
from typing import Any

from PyQt6.QtGui import QColor

from tagcloud.core.flow_engine import clamp_dimension

# ==========================================
# 1. TOKENS DE DISEÑO
# ==========================================
class Palette:
    """Colores neutros por defecto de los chips."""
    Ink_N1      = "#000000"
    Ink_N2      = "#1C1C1E"
    Paper_N1    = "#FFFFFF"
    Paper_N2    = "#F2F2F7"

    Gray_N1     = "#8B8B8B"

    Console_Bg  = "#191919"

    text   = Ink_N1
    fill   = Paper_N1
    border = Ink_N1

class Dims:
    """Dimensiones y espaciados (en píxeles)."""
    chip = {
        "pad_v": 5, "pad_h": 10,
        "radius": 10, "border": 1
    }
    flow = {
        "spacing_v": 4, "spacing_h": 4,
        "height_tolerance": 0.5
    }
    demo = {
        "margins": (20, 20, 20, 20), "space": 12,
        "window": (520, 480)
    }

class Fonts:
    """Configuración tipográfica."""
    family = "Segoe UI"
    h3 = "12pt"; body = "10pt"

# ==========================================
# 2. CONFIGURACIÓN DE CHIP
# ==========================================
def qss_color(value: Any, fallback: str = Palette.Ink_N1) -> str:
    """Normaliza cualquier color que acepte QColor a `rgba(...)` para QSS."""
    color = value if isinstance(value, QColor) else QColor(value if value is not None else "")
    if not color.isValid():
        color = QColor(fallback)
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"

@dataclass
class ChipStyle:
    """Estilo compartido por todos los chips de una nube. No afecta al algoritmo."""
    text_color: Any = Palette.text
    fill_color: Any = Palette.fill
    border_width: float = Dims.chip["border"]
    border_color: Any = Palette.border
    corner_radius: float = Dims.chip["radius"]

    def __post_init__(self):
        self.border_width = clamp_dimension(self.border_width)
        self.corner_radius = clamp_dimension(self.corner_radius)

def get_chip_style(style: ChipStyle = None) -> str:
    s = style or ChipStyle()
    pad_v, pad_h = Dims.chip["pad_v"], Dims.chip["pad_h"]
    border = round(s.border_width)
    radius = round(s.corner_radius)

    return f"""
        QLabel {{
            color: {qss_color(s.text_color, Palette.text)};
            background-color: {qss_color(s.fill_color, Palette.fill)};
            border: {border}px solid {qss_color(s.border_color, Palette.border)};
            border-radius: {radius}px;
            padding: {pad_v}px {pad_h}px;
        }}
    """

# ==========================================
# 3. ESTILOS REUTILIZABLES
# ==========================================
def get_sheet() -> str:
    """Hoja base para la ventana de demostración."""
    c = Palette
    f = Fonts

    return f"""
    QMainWindow, QWidget {{
        background-color: {c.Paper_N2}; color: {c.Ink_N2};
        font-family: "{f.family}"; font-size: {f.body};
    }}
    QLabel#h3 {{ font-size: {f.h3}; font-weight: bold; padding: 0px; }}
    QScrollArea {{ background: transparent; border: none; }}
    """

STYLES = {
    "cloud_host": "QWidget { background: transparent; }",
    "text_edit_console": f"QTextEdit {{ background-color: {Palette.Console_Bg}; color: {Palette.Gray_N1}; font-family: Consolas, monospace; font-size: 12px; padding: 10px; border: none; }}",
    "custom_badge": f"QLabel {{ background-color: {Palette.Ink_N2}; color: {Palette.Paper_N1}; border-radius: 6px; padding: 4px 8px; font-weight: bold; }}"
}
