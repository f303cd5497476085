from __future__ import annotations

import pytest

from statement_parser.models import TransactionType


def _check_signs(transactions) -> None:
    for t in transactions:
        if t.type == TransactionType.EXPENSE:
            assert t.amount < 0, f"EXPENSE con monto no negativo: {t}"
        if t.type == TransactionType.INCOME:
            assert t.amount > 0, f"INCOME con monto no positivo: {t}"


@pytest.fixture
def assert_signs_match_types():
    return _check_signs
