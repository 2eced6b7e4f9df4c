# tagcloud/core/flow_engine.py

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

# ==========================================
# 1. MODELOS
# ==========================================
def clamp_dimension(value: Any) -> float:
    """Convierte a float y fuerza a 0.0 todo lo negativo, NaN, infinito o None."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


@dataclass(frozen=True)
class ItemSize:
    """Tamaño medido de un elemento (incluye su propio padding)."""
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "width", clamp_dimension(self.width))
        object.__setattr__(self, "height", clamp_dimension(self.height))


@dataclass(frozen=True)
class FlowItem:
    key: Hashable
    size: ItemSize


@dataclass
class LayoutResult:
    """
    Resultado de una pasada completa.
    Los offsets son relativos al origen del flujo, no a la pantalla.
    """
    offsets: Dict[Hashable, Tuple[float, float]] = field(default_factory=dict)
    total_height: float = 0.0
    rows: List[List[Hashable]] = field(default_factory=list)
    container_width: float = 0.0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def offset_for(self, key: Hashable) -> Tuple[float, float]:
        return self.offsets.get(key, (0.0, 0.0))


@dataclass
class RowCursor:
    """Pluma de colocación. Solo vive durante una pasada."""
    x: float = 0.0
    y: float = 0.0
    row_height: float = 0.0

    def wrap(self):
        self.y += self.row_height
        self.x = 0.0
        self.row_height = 0.0

    def advance(self, size: ItemSize):
        self.x += size.width
        self.row_height = max(self.row_height, size.height)

# ==========================================
# 2. ALGORITMO
# ==========================================
def measure_padded(size: ItemSize, horizontal: float, vertical: float) -> ItemSize:
    """Suma el espaciado a cada lado: el motor no conoce gaps, solo cajas."""
    h = clamp_dimension(horizontal)
    v = clamp_dimension(vertical)
    return ItemSize(size.width + 2 * h, size.height + 2 * v)


def compute_flow_layout(items: Iterable[FlowItem], container_width: Optional[float]) -> LayoutResult:
    """
    Coloca los elementos de izquierda a derecha, saltando de fila cuando
    el siguiente no cabe en el ancho disponible.

    - Ancho 0 o desconocido: todo en (0, 0) y altura 0 (el host vuelve a llamar).
    - Empate exacto con el borde NO salta de fila.
    - Un elemento más ancho que el contenedor ocupa su propia fila en x=0.
    """
    items = list(items)
    width = clamp_dimension(container_width)
    result = LayoutResult(container_width=width)

    if not items:
        return result

    if width == 0:
        for item in items:
            result.offsets[item.key] = (0.0, 0.0)
        result.rows.append([item.key for item in items])
        return result

    cursor = RowCursor()
    current_row: List[Hashable] = []
    last_index = len(items) - 1

    for index, item in enumerate(items):
        size = item.size
        # x > 0 evita diferir para siempre un elemento más ancho que la fila
        if cursor.x > 0 and cursor.x + size.width > width:
            cursor.wrap()
            result.rows.append(current_row)
            current_row = []

        result.offsets[item.key] = (cursor.x, cursor.y)
        current_row.append(item.key)
        cursor.advance(size)

        if index == last_index:
            cursor.x = 0.0

    result.rows.append(current_row)
    result.total_height = cursor.y + cursor.row_height
    return result
