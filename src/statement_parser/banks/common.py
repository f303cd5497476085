from __future__ import annotations

import datetime
import logging
from typing import List, Optional

from ..classify import ClassifierConfig, classify
from ..models import ParsedTransaction


logger = logging.getLogger(__name__)


def text_lines(text: str) -> List[str]:
    return [ln.strip() for ln in (text or "").splitlines() if ln.strip()]


def safe_date(year: int, month: int, day: int) -> Optional[datetime.date]:
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


def build_transaction(
    date: datetime.date,
    description: str,
    raw_amount: float,
    config: ClassifierConfig,
    balance: Optional[float] = None,
) -> Optional[ParsedTransaction]:
    """Clasifica y arma la transacción. Montos 0.00 no se importan."""
    if raw_amount == 0:
        logger.debug("Skipping zero-amount line: %s", description)
        return None

    result = classify(description, raw_amount, config)
    return ParsedTransaction(
        date=date,
        description=description,
        amount=round(result.amount, 2),
        balance=balance,
        type=result.type,
    )
