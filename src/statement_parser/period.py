from __future__ import annotations

import datetime
import re
from typing import Callable, Dict, Optional, Sequence

from .models import StatementPeriod


MONTHS: Dict[str, int] = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH = r"([A-Z][a-z]{2,8})\.?"

_THROUGH_RE = re.compile(
    rf"{_MONTH}\s+(\d{{1,2}}),\s*(\d{{4}})\s+through\s+{_MONTH}\s+(\d{{1,2}}),\s*(\d{{4}})"
)
_DASH_RE = re.compile(rf"{_MONTH}\s+(\d{{1,2}})\s*-\s*{_MONTH}\s+(\d{{1,2}}),\s*(\d{{4}})")
_CLOSING_DATE_RE = re.compile(
    r"Opening/Closing Date\s+(\d{2})/\d{2}/(\d{2}|\d{4})\s*-\s*(\d{2})/\d{2}/(\d{2}|\d{4})",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"\b((?:19|20)\d{2})\b")


def month_number(name: str) -> Optional[int]:
    """'Oct', 'October', 'oct.' -> 10. None si no es un mes."""
    key = name.strip().rstrip(".").lower()
    num = MONTHS.get(key[:3])
    if num is None:
        return None
    # "Octopus" no es un mes: aceptar abreviatura o nombre completo
    full = datetime.date(2000, num, 1).strftime("%B").lower()
    if key != key[:3] and key != full and key != "sept":
        return None
    return num


def _full_year(token: str) -> int:
    year = int(token)
    return 2000 + year if year < 100 else year


def _build(start_month: int, end_month: int, end_year: int, start_year: Optional[int] = None) -> StatementPeriod:
    if start_month > end_month:
        start_year = end_year - 1
    elif start_year is None:
        start_year = end_year
    return StatementPeriod(start_month, start_year, end_month, end_year)


def _through(text: str) -> Optional[StatementPeriod]:
    for m in _THROUGH_RE.finditer(text):
        sm, em = month_number(m.group(1)), month_number(m.group(4))
        if sm and em:
            return _build(sm, em, int(m.group(6)), int(m.group(3)))
    return None


def _dash(text: str) -> Optional[StatementPeriod]:
    for m in _DASH_RE.finditer(text):
        sm, em = month_number(m.group(1)), month_number(m.group(3))
        if sm and em:
            return _build(sm, em, int(m.group(5)))
    return None


def _closing_date(text: str) -> Optional[StatementPeriod]:
    m = _CLOSING_DATE_RE.search(text)
    if not m:
        return None
    sm, em = int(m.group(1)), int(m.group(3))
    if not (1 <= sm <= 12 and 1 <= em <= 12):
        return None
    return _build(sm, em, _full_year(m.group(4)), _full_year(m.group(2)))


PERIOD_PATTERNS: Dict[str, Callable[[str], Optional[StatementPeriod]]] = {
    "through": _through,
    "dash": _dash,
    "closing_date": _closing_date,
}


def fallback_period(text: str, fallback_year: Optional[int] = None) -> StatementPeriod:
    """Sin periodo reconocible: un solo año (primer 20xx del texto, config o año actual)."""
    m = _YEAR_RE.search(text)
    if m:
        year = int(m.group(1))
    else:
        year = fallback_year or datetime.date.today().year
    return StatementPeriod(1, year, 12, year)


def resolve_period(
    text: str,
    patterns: Sequence[str] = ("through", "dash"),
    fallback_year: Optional[int] = None,
) -> StatementPeriod:
    for name in patterns:
        found = PERIOD_PATTERNS[name](text)
        if found is not None:
            return found
    return fallback_period(text, fallback_year)
