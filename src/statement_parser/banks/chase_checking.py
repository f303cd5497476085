from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from ..classify import ClassifierConfig
from ..config import DEFAULT_SETTINGS, ParserSettings
from ..models import ParsedTransaction
from ..period import resolve_period
from ..segment import section_lines
from ..tokens import TrailingField, TrailingMatch, clean_description, match_trailing
from .common import build_transaction, safe_date, text_lines


logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^(\d{2})/(\d{2})\b\s*(.*)$")

BALANCE = TrailingField("balance", signed=True)
AMOUNT = TrailingField("amount", signed=True)

NON_TRANSACTION_MARKERS = (
    "beginning balance",
    "ending balance",
    "total deposits",
    "total withdrawals",
)


@dataclass(frozen=True)
class DepositLayout:
    """Política de una cuenta de depósito Chase (checking / savings)."""

    name: str
    fields: Tuple[TrailingField, ...]
    classifier: ClassifierConfig
    skip_keywords: Tuple[str, ...] = ()
    noise: Tuple[Pattern, ...] = ()
    start_markers: Tuple[str, ...] = ("TRANSACTION DETAIL",)
    stop_markers: Tuple[str, ...] = ("IN CASE OF ERRORS", "DAILY ENDING BALANCE")


CHECKING = DepositLayout(
    name="Chase Checking",
    fields=(BALANCE, AMOUNT),
    classifier=ClassifierConfig(
        transfer_keywords=("online transfer", "book transfer"),
        income_keywords=(
            "payroll",
            "direct dep",
            "deposit",
            "interest payment",
            "zelle payment from",
            "refund",
            "reversal",
        ),
    ),
    # el pago de la tarjeta ya viene en el statement de la tarjeta
    skip_keywords=("payment to chase card", "payment to credit card", "chase card ending"),
    stop_markers=("IN CASE OF ERRORS", "DAILY ENDING BALANCE", "CHECKING SUMMARY"),
)


def _is_continuation(line: str) -> bool:
    low = line.lower()
    return not DATE_RE.match(line) and not any(k in low for k in NON_TRANSACTION_MARKERS)


def _match_line(body: str, layout: DepositLayout) -> Optional[TrailingMatch]:
    return match_trailing(body.split(), layout.fields)


def parse_deposit_statement(
    text: str,
    layout: DepositLayout,
    settings: Optional[ParserSettings] = None,
) -> List[ParsedTransaction]:
    """
    Parser de cuentas de depósito Chase:
    - una transacción es una línea "MM/DD descripción monto balance"
    - si la línea con fecha no trae montos, se intenta unir con la siguiente (sin fecha)
    - el año sale del periodo del statement (soporta diciembre -> enero)
    """
    settings = settings or DEFAULT_SETTINGS
    period = resolve_period(text, ("through", "closing_date"), settings.fallback_year)
    lines = section_lines(text_lines(text), layout.start_markers, layout.stop_markers)

    txs: List[ParsedTransaction] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1

        dm = DATE_RE.match(line)
        if not dm:
            continue

        body = dm.group(3)
        low = body.lower()
        if any(k in low for k in NON_TRANSACTION_MARKERS):
            continue
        if any(k in low for k in layout.skip_keywords):
            logger.debug("%s: skipping card payment: %s", layout.name, line)
            continue

        found = _match_line(body, layout)
        if found is None and i < len(lines) and _is_continuation(lines[i]):
            found = _match_line(body + " " + lines[i], layout)
            if found is not None:
                i += 1
        if found is None:
            logger.debug("%s: no amount/balance columns: %s", layout.name, line)
            continue

        month, day = int(dm.group(1)), int(dm.group(2))
        date = safe_date(period.year_for(month), month, day)
        if date is None:
            continue

        desc = found.description
        for pattern in layout.noise:
            desc = pattern.sub("", desc)
        desc = clean_description(desc)
        if not desc:
            continue

        tx = build_transaction(
            date,
            desc,
            found.values["amount"],
            layout.classifier,
            balance=found.values["balance"],
        )
        if tx is not None:
            txs.append(tx)

    logger.info("%s: parsed %d transaction(s)", layout.name, len(txs))
    return txs


def parse(text: str, settings: Optional[ParserSettings] = None) -> List[ParsedTransaction]:
    return parse_deposit_statement(text, CHECKING, settings)
