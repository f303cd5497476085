from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..classify import ClassifierConfig, SignPolicy
from ..config import DEFAULT_SETTINGS, ParserSettings
from ..models import ParsedTransaction
from ..period import resolve_period
from ..segment import section_lines
from ..tokens import TrailingField, clean_description, match_trailing
from .common import build_transaction, safe_date, text_lines


logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^(\d{2})/(\d{2})\b\s*(.*)$")

AMOUNT = TrailingField("amount", signed=True)

CLASSIFIER = ClassifierConfig(sign_policy=SignPolicy.CHARGE)

SECTION_HEADERS = ("purchase", "purchases", "fees charged", "interest charged", "payments and other credits")


def parse(text: str, settings: Optional[ParserSettings] = None) -> List[ParsedTransaction]:
    """
    Tarjeta de crédito Chase: "MM/DD comercio monto" (sin columna de balance).
    - monto positivo = compra => se guarda negativo (EXPENSE)
    - monto negativo = pago/crédito => NO se importa (ya está en el checking)
    """
    settings = settings or DEFAULT_SETTINGS
    period = resolve_period(text, ("closing_date", "through"), settings.fallback_year)
    lines = section_lines(text_lines(text), ("ACCOUNT ACTIVITY",), ("INTEREST CHARGES",))

    txs: List[ParsedTransaction] = []
    for line in lines:
        dm = DATE_RE.match(line)
        if not dm:
            continue

        found = match_trailing(dm.group(3).split(), (AMOUNT,))
        if found is None:
            continue

        amount = found.values["amount"]
        if amount < 0:
            logger.debug("Chase Credit: dropping payment/credit: %s", line)
            continue

        desc = clean_description(found.description)
        if not desc or desc.lower() in SECTION_HEADERS:
            continue

        month, day = int(dm.group(1)), int(dm.group(2))
        date = safe_date(period.year_for(month), month, day)
        if date is None:
            continue

        tx = build_transaction(date, desc, amount, CLASSIFIER)
        if tx is not None:
            txs.append(tx)

    logger.info("Chase Credit: parsed %d transaction(s)", len(txs))
    return txs
