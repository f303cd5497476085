from __future__ import annotations

from typing import Iterable, List, Sequence


def _starts_with_any(line: str, markers: Iterable[str]) -> bool:
    up = line.upper()
    return any(up.startswith(m.upper()) for m in markers)


def section_lines(
    lines: Sequence[str],
    start_markers: Sequence[str],
    stop_markers: Sequence[str] = (),
) -> List[str]:
    """
    Líneas dentro de las secciones de transacciones.
    - una sección empieza después de una línea que comienza con un start_marker
    - termina en una línea que comienza con un stop_marker
    - puede reabrirse (p.ej. "TRANSACTION DETAIL (continued)" en la página siguiente)
    Si el documento no tiene ningún start_marker se devuelven todas las líneas.
    """
    stripped = [ln.strip() for ln in lines]
    if not any(_starts_with_any(ln, start_markers) for ln in stripped):
        return [ln for ln in stripped if ln]

    out: List[str] = []
    inside = False
    for ln in stripped:
        if not ln:
            continue
        if _starts_with_any(ln, start_markers):
            inside = True
            continue
        if inside and _starts_with_any(ln, stop_markers):
            inside = False
            continue
        if inside:
            out.append(ln)
    return out
