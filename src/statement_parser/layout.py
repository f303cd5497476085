from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence

from .models import TextItem


def _round_y(y: float) -> int:
    # redondeo "half up" (100.5 -> 101), no el redondeo bancario de round()
    return math.floor(y + 0.5)


def group_rows(items: Iterable[TextItem], tolerance: float = 0.0) -> List[List[TextItem]]:
    """
    Agrupa fragmentos por fila usando la y redondeada.
    - tolerance=0: solo se unen fragmentos con la misma y redondeada
    - tolerance>0: una fila se une a la anterior (más alta) si su y está a <= tolerance
    Filas de arriba hacia abajo (y descendente), fragmentos de izquierda a derecha.
    """
    buckets: Dict[int, List[TextItem]] = {}
    for item in items:
        buckets.setdefault(_round_y(item.y), []).append(item)

    rows: List[List[TextItem]] = []
    anchor_y = None
    for y in sorted(buckets, reverse=True):
        if rows and tolerance > 0 and anchor_y - y <= tolerance:
            rows[-1].extend(buckets[y])
        else:
            rows.append(list(buckets[y]))
            anchor_y = y

    return [sorted(row, key=lambda it: it.x) for row in rows]


def page_lines(items: Iterable[TextItem], tolerance: float = 0.0) -> List[str]:
    return [" ".join(it.text for it in row) for row in group_rows(items, tolerance)]


def reconstruct_lines(pages: Iterable[Sequence[TextItem]], tolerance: float = 0.0) -> List[str]:
    lines: List[str] = []
    for items in pages:
        lines.extend(page_lines(items, tolerance))
    return lines


def document_text(pages: Iterable[Sequence[TextItem]], tolerance: float = 0.0) -> str:
    """Texto completo del documento: una línea por fila, cada una terminada en salto de línea."""
    return "".join(line + "\n" for line in reconstruct_lines(pages, tolerance))
