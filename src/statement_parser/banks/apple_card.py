from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional

from ..classify import ClassifierConfig, SignPolicy
from ..config import ParserSettings
from ..models import ParsedTransaction
from ..tokens import clean_description, parse_dollar_amounts
from .common import build_transaction, safe_date, text_lines


logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})\b\s*(.*)$")
RETURN_MARKER = "(RETURN)"

CLASSIFIER = ClassifierConfig(sign_policy=SignPolicy.CHARGE)


class Section(str, Enum):
    OUTSIDE = "OUTSIDE"
    IN_TRANSACTIONS = "IN_TRANSACTIONS"
    IN_PAYMENTS = "IN_PAYMENTS"


# encabezados de sección (línea exacta)
SECTION_HEADERS = {
    "Transactions": Section.IN_TRANSACTIONS,
    "Payments": Section.IN_PAYMENTS,
}
# fin de sección (prefijo)
SECTION_ENDS = ("Apple Card Monthly Installments", "Interest Charged")

BOILERPLATE_PREFIXES = (
    "Date",
    "Total",
    "Apple Card is issued",
    "Daily Cash Adjustment",
    "Statement",
)
BOILERPLATE_FRAGMENTS = ("Page ", "@gmail.com", "â€”")


def next_section(state: Section, line: str) -> Section:
    """Transición del autómata; líneas que no son encabezados no cambian el estado."""
    if line in SECTION_HEADERS:
        return SECTION_HEADERS[line]
    if line.startswith(SECTION_ENDS):
        return Section.OUTSIDE
    return state


def _is_boilerplate(line: str) -> bool:
    return line.startswith(BOILERPLATE_PREFIXES) or any(f in line for f in BOILERPLATE_FRAGMENTS)


def _parse_charge(line: str) -> Optional[ParsedTransaction]:
    dm = DATE_RE.match(line)
    if not dm:
        return None

    amounts = parse_dollar_amounts(line)
    if not amounts:
        return None

    # el último monto es el de la transacción (antes: Daily Cash % y Daily Cash $)
    amount = amounts[-1]
    is_return = RETURN_MARKER in line or "-$" in line
    if is_return:
        amount = -abs(amount)

    month, day, year = int(dm.group(1)), int(dm.group(2)), int(dm.group(3))
    date = safe_date(year, month, day)
    if date is None:
        return None

    desc = clean_description(dm.group(4).replace(RETURN_MARKER, " "), strip_from_percent=True)
    if not desc:
        return None

    return build_transaction(date, desc, amount, CLASSIFIER, balance=None)


def parse(text: str, settings: Optional[ParserSettings] = None) -> List[ParsedTransaction]:
    """
    Apple Card: "MM/DD/YYYY descripción [n%] [$daily cash] $monto".
    Solo la sección "Transactions"; la sección "Payments" se ignora completa.
    """
    state = Section.OUTSIDE
    txs: List[ParsedTransaction] = []

    for line in text_lines(text):
        new_state = next_section(state, line)
        if new_state is not state or line in SECTION_HEADERS:
            state = new_state
            continue

        if _is_boilerplate(line) or state is not Section.IN_TRANSACTIONS:
            continue

        tx = _parse_charge(line)
        if tx is None:
            logger.debug("Apple Card: skipped line: %s", line)
            continue
        txs.append(tx)

    logger.info("Apple Card: parsed %d transaction(s)", len(txs))
    return txs
