from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..classify import ClassifierConfig
from ..config import DEFAULT_SETTINGS, ParserSettings
from ..models import ParsedTransaction
from ..period import month_number, resolve_period
from ..tokens import CATEGORY_LABELS, TrailingField, clean_description, match_trailing, parse_money
from .common import build_transaction, safe_date, text_lines


logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^([A-Z][a-z]{2})\s+(\d{1,2})\b\s*(.*)$")
CONTINUATION_RE = re.compile(r"^[+-]\s*\$")

BALANCE = TrailingField("balance")
AMOUNT = TrailingField("amount", signed=True)

CLASSIFIER = ClassifierConfig(
    transfer_keywords=("transfer", "xfer"),
    income_keywords=("interest",),
    expense_keywords=("withdrawal",),
)

NON_TRANSACTION_MARKERS = ("opening balance", "closing balance")


def merge_continuations(lines: List[str]) -> List[str]:
    """
    Capital One a veces parte la fila en dos:
        "Oct 21 Wire Transfer Debit $9,267.42"
        "- $3,633.74"
    Se reubica el signo+monto antes del balance:
        "Oct 21 Wire Transfer Debit - $3,633.74 $9,267.42"
    """
    out: List[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        nxt = lines[i + 1] if i + 1 < len(lines) else ""
        if DATE_RE.match(line) and CONTINUATION_RE.match(nxt):
            head, _, last = line.rpartition(" ")
            if head and parse_money(last) is not None:
                line = f"{head} {nxt} {last}"
            else:
                line = f"{line} {nxt}"
            i += 1
        out.append(line)
        i += 1
    return out


def parse(text: str, settings: Optional[ParserSettings] = None) -> List[ParsedTransaction]:
    """
    Capital One 360 Savings: "Mon DD descripción Categoría +/- $monto $balance".
    EXPENSE siempre negativo, INCOME siempre positivo.
    """
    settings = settings or DEFAULT_SETTINGS
    period = resolve_period(text, ("dash", "through"), settings.fallback_year)

    txs: List[ParsedTransaction] = []
    for line in merge_continuations(text_lines(text)):
        dm = DATE_RE.match(line)
        if not dm:
            continue
        month = month_number(dm.group(1))
        if month is None:
            continue

        body = dm.group(3)
        if any(k in body.lower() for k in NON_TRANSACTION_MARKERS):
            continue

        found = match_trailing(body.split(), (BALANCE, AMOUNT))
        if found is None:
            logger.debug("Capital One: no amount/balance columns: %s", line)
            continue

        amount = found.values["amount"]
        tokens = found.description_tokens
        category = tokens[-1].lower() if tokens and tokens[-1].lower() in CATEGORY_LABELS else None
        if "amount" not in found.explicit_sign and category == "debit":
            amount = -abs(amount)

        desc = clean_description(found.description, strip_categories=True)
        if not desc:
            continue

        date = safe_date(period.year_for(month), month, int(dm.group(2)))
        if date is None:
            continue

        tx = build_transaction(date, desc, amount, CLASSIFIER, balance=found.values["balance"])
        if tx is not None:
            txs.append(tx)

    logger.info("Capital One: parsed %d transaction(s)", len(txs))
    return txs
