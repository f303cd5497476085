from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence


MONEY_RE = re.compile(r"^([+-]?)\$?([+-]?)(\d{1,3}(?:,\d{3})+|\d+)\.(\d{2})$")
SIGN_TOKENS = ("-", "+")
CATEGORY_LABELS = ("debit", "credit")

# Montos con $ dentro de una línea (Apple Card): -$12.00, $1,040.00
DOLLAR_RE = re.compile(r"-?\$(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2}")


def parse_money(token: str) -> Optional[float]:
    """'1,234.56' / '-$12.00' / '$-12.00' -> float. None si no es un monto."""
    m = MONEY_RE.match((token or "").strip())
    if not m:
        return None
    sign_a, sign_b, whole, cents = m.groups()
    if sign_a and sign_b:
        return None
    value = float(whole.replace(",", "") + "." + cents)
    return -value if "-" in (sign_a, sign_b) else value


def parse_dollar_amounts(line: str) -> List[float]:
    return [parse_money(m) for m in DOLLAR_RE.findall(line)]


@dataclass(frozen=True)
class TrailingField:
    """
    Columna esperada al final de la línea.
    kind: "money" o "count" (entero sin decimales, p.ej. número de ítems)
    signed: acepta un token de signo suelto justo antes ("- 500.00")
    """

    name: str
    kind: str = "money"
    optional: bool = False
    signed: bool = False


@dataclass
class TrailingMatch:
    description_tokens: List[str]
    values: Dict[str, float] = field(default_factory=dict)
    explicit_sign: Dict[str, str] = field(default_factory=dict)

    @property
    def description(self) -> str:
        return " ".join(self.description_tokens)


def match_trailing(tokens: Sequence[str], fields: Sequence[TrailingField]) -> Optional[TrailingMatch]:
    """
    Empareja las columnas finales de derecha a izquierda.
    `fields` va en orden derecha->izquierda (p.ej. balance, amount).
    Devuelve None si falta una columna obligatoria.
    """
    toks = list(tokens)
    i = len(toks) - 1
    values: Dict[str, float] = {}
    explicit: Dict[str, str] = {}

    for f in fields:
        tok = toks[i] if i >= 0 else ""
        if f.kind == "count":
            if tok.isdigit():
                values[f.name] = float(tok)
                i -= 1
            elif not f.optional:
                return None
            continue

        value = parse_money(tok)
        if value is None:
            if f.optional:
                continue
            return None
        i -= 1

        if tok[:1] in SIGN_TOKENS or tok[1:2] in SIGN_TOKENS:
            explicit[f.name] = "-" if value < 0 else "+"
        elif f.signed and i >= 0 and toks[i] in SIGN_TOKENS:
            explicit[f.name] = toks[i]
            if toks[i] == "-":
                value = -value
            i -= 1
        values[f.name] = value

    return TrailingMatch(description_tokens=toks[: i + 1], values=values, explicit_sign=explicit)


_WS_RE = re.compile(r"\s+")
_PERCENT_TAIL_RE = re.compile(r"\s*\d+(?:\.\d+)?%.*$")


def clean_description(
    text: str,
    strip_categories: bool = False,
    strip_from_percent: bool = False,
) -> str:
    s = _WS_RE.sub(" ", text or "").strip()

    if strip_from_percent:
        s = _PERCENT_TAIL_RE.sub("", s)
        if "$" in s:
            s = s.split("$", 1)[0]
        s = s.strip()

    words = s.split(" ") if s else []
    while words and (words[-1] in SIGN_TOKENS or (strip_categories and words[-1].lower() in CATEGORY_LABELS)):
        words.pop()

    return " ".join(words).strip("- ").strip()
