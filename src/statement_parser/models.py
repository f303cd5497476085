from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"


class AccountType(str, Enum):
    CHASE_CHECKING = "CHASE_CHECKING"
    CHASE_PERSONAL_SAVINGS = "CHASE_PERSONAL_SAVINGS"
    CHASE_BUSINESS_SAVINGS = "CHASE_BUSINESS_SAVINGS"
    CHASE_CREDIT = "CHASE_CREDIT"
    CAPITAL_ONE_SAVINGS = "CAPITAL_ONE_SAVINGS"
    APPLE_CARD = "APPLE_CARD"


@dataclass(frozen=True)
class TextItem:
    """Fragmento de texto posicionado (origen abajo-izquierda, como en el PDF)."""

    text: str
    x: float
    y: float


@dataclass(frozen=True)
class StatementPeriod:
    start_month: int
    start_year: int
    end_month: int
    end_year: int

    @property
    def crosses_year(self) -> bool:
        return self.start_month > self.end_month

    def year_for(self, month: int) -> int:
        """
        Año para una fecha MM/DD del statement.
        - el mes inicial siempre cae en start_year
        - si el periodo cruza de año, los meses "tardíos" (> end_month) también
        """
        if month == self.start_month:
            return self.start_year
        if self.crosses_year and month > self.end_month:
            return self.start_year
        return self.end_year


class ParsedTransaction(BaseModel):
    date: datetime.date
    description: str
    amount: float = Field(..., description="Signed amount. EXPENSE<0, INCOME>0, TRANSFER either")
    balance: Optional[float] = Field(None, description="Running balance when the format prints one")
    type: TransactionType


class ParsedStatement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transactions: List[ParsedTransaction] = Field(default_factory=list)
    ending_balance: float = Field(0.0, alias="endingBalance")
