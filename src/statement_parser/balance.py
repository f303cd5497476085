from __future__ import annotations

import re
from typing import Dict, Optional, Sequence, Tuple

from .models import AccountType
from .tokens import parse_money


_AMT = r"(-?\s?\$?-?[\d,]+\.\d{2})"
_MONTH_NAMES = (
    "January|February|March|April|May|June|July|August|September|October|November|December"
)

_DEPOSIT_PATTERNS = (
    re.compile(rf"Ending Balance\s*:?\s*(?:\d+\s+)?{_AMT}", re.IGNORECASE),
    re.compile(rf"Closing Balance\s*:?\s*{_AMT}", re.IGNORECASE),
)

BALANCE_PATTERNS: Dict[AccountType, Tuple[Sequence[re.Pattern], bool]] = {
    # (patrones en orden, es_deuda)
    AccountType.CHASE_CHECKING: (_DEPOSIT_PATTERNS, False),
    AccountType.CHASE_PERSONAL_SAVINGS: (_DEPOSIT_PATTERNS, False),
    AccountType.CHASE_BUSINESS_SAVINGS: (_DEPOSIT_PATTERNS, False),
    AccountType.CAPITAL_ONE_SAVINGS: (
        (
            re.compile(rf"Closing Balance\s*:?\s*{_AMT}", re.IGNORECASE),
            re.compile(rf"Ending Balance\s*:?\s*(?:\d+\s+)?{_AMT}", re.IGNORECASE),
        ),
        False,
    ),
    AccountType.CHASE_CREDIT: (
        (re.compile(rf"New Balance\s*:?\s*{_AMT}", re.IGNORECASE),),
        True,
    ),
    AccountType.APPLE_CARD: (
        (
            re.compile(r"Your\s+\w+\s+Balance\s+as\s+of[^$]*\$([\d,]+\.\d{2})", re.IGNORECASE),
            re.compile(rf"(?:{_MONTH_NAMES})\s+Balance[^$]*\$([\d,]+\.\d{{2}})", re.IGNORECASE),
        ),
        True,
    ),
}


def _to_number(raw: str) -> Optional[float]:
    return parse_money(raw.replace(" ", ""))


def find_ending_balance(text: str, account_type: AccountType) -> Optional[float]:
    """
    Balance final del statement, o None si ningún patrón coincide.
    Tarjetas (deuda) => siempre negativo.
    """
    patterns, is_debt = BALANCE_PATTERNS[AccountType(account_type)]
    for pattern in patterns:
        for m in pattern.finditer(text):
            value = _to_number(m.group(1))
            if value is None:
                continue
            return -abs(value) if is_debt else value
    return None


def extract_ending_balance(text: str, account_type: AccountType) -> float:
    # 0.0 cuando no se encuentra: no distingue "sin balance" de "balance cero"
    value = find_ending_balance(text, account_type)
    return value if value is not None else 0.0
