from __future__ import annotations

import re
from typing import List, Optional

from ..classify import ClassifierConfig
from ..config import ParserSettings
from ..models import ParsedTransaction
from ..tokens import TrailingField
from .chase_checking import AMOUNT, BALANCE, DepositLayout, parse_deposit_statement


# columna "número de ítems" del business savings (p.ej. "Remote Online Deposit 3 1,200.00 4,200.00")
INSTANCES = TrailingField("instances", kind="count", optional=True)

TRANSACTION_ID_RE = re.compile(r"Transaction#:\s*\d*", re.IGNORECASE)

PERSONAL_SAVINGS = DepositLayout(
    name="Chase Personal Savings",
    fields=(BALANCE, AMOUNT),
    classifier=ClassifierConfig(
        transfer_keywords=("online transfer", "book transfer"),
        income_keywords=("interest payment", "interest earned"),
    ),
    noise=(TRANSACTION_ID_RE,),
    stop_markers=("IN CASE OF ERRORS", "A MONTHLY SERVICE FEE", "DAILY ENDING BALANCE"),
)

BUSINESS_SAVINGS = DepositLayout(
    name="Chase Business Savings",
    fields=(BALANCE, AMOUNT, INSTANCES),
    classifier=ClassifierConfig(
        transfer_keywords=("online transfer", "book transfer"),
        income_keywords=("interest payment", "interest earned", "remote online deposit"),
    ),
    noise=(TRANSACTION_ID_RE,),
)


def parse_personal(text: str, settings: Optional[ParserSettings] = None) -> List[ParsedTransaction]:
    return parse_deposit_statement(text, PERSONAL_SAVINGS, settings)


def parse_business(text: str, settings: Optional[ParserSettings] = None) -> List[ParsedTransaction]:
    return parse_deposit_statement(text, BUSINESS_SAVINGS, settings)
