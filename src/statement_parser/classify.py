from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .models import TransactionType


class SignPolicy(str, Enum):
    RAW = "RAW"        # cuentas de depósito: negativo = sale dinero
    CHARGE = "CHARGE"  # tarjetas: positivo en el statement = cargo


@dataclass(frozen=True)
class ClassifierConfig:
    transfer_keywords: Tuple[str, ...] = ()
    income_keywords: Tuple[str, ...] = ()
    expense_keywords: Tuple[str, ...] = ()
    sign_policy: SignPolicy = SignPolicy.RAW


@dataclass(frozen=True)
class Classification:
    type: TransactionType
    amount: float


def _has_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def classify(description: str, raw_amount: float, config: ClassifierConfig) -> Classification:
    """
    Prioridad:
    1) transfer -> TRANSFER, conserva el signo (según la política)
    2) income   -> INCOME, siempre positivo
    3) expense  -> EXPENSE, siempre negativo
    4) signo    -> negativo EXPENSE, positivo INCOME
    Las keywords se comparan en minúsculas.
    """
    d = (description or "").lower()
    signed = -raw_amount if config.sign_policy == SignPolicy.CHARGE else raw_amount

    if _has_any(d, config.transfer_keywords):
        return Classification(TransactionType.TRANSFER, signed)
    if _has_any(d, config.income_keywords):
        return Classification(TransactionType.INCOME, abs(signed))
    if _has_any(d, config.expense_keywords):
        return Classification(TransactionType.EXPENSE, -abs(signed))
    if signed < 0:
        return Classification(TransactionType.EXPENSE, signed)
    return Classification(TransactionType.INCOME, signed)
