from __future__ import annotations

import pytest

from statement_parser.tokens import (
    TrailingField,
    clean_description,
    match_trailing,
    parse_dollar_amounts,
    parse_money,
)


BALANCE = TrailingField("balance", signed=True)
AMOUNT = TrailingField("amount", signed=True)
INSTANCES = TrailingField("instances", kind="count", optional=True)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1,234.56", 1234.56),
        ("0.03", 0.03),
        ("-45.50", -45.5),
        ("-$12.00", -12.0),
        ("$-12.00", -12.0),
        ("+$100.00", 100.0),
        ("1234.56", 1234.56),
    ],
)
def test_parse_money(token, expected):
    assert parse_money(token) == pytest.approx(expected)


@pytest.mark.parametrize("token", ["12", "1,23.45", "06/01", "-", "", "abc", "-$-1.00"])
def test_parse_money_rejects_non_amounts(token):
    assert parse_money(token) is None


def test_parse_dollar_amounts_keeps_order_and_sign():
    assert parse_dollar_amounts("01/20/2025 SHOP (RETURN) 2% -$0.40 -$1,020.00") == [-0.4, -1020.0]


def test_match_trailing_amount_and_balance():
    m = match_trailing("Amsive LLC Payroll 1,213.49 2,228.68".split(), (BALANCE, AMOUNT))
    assert m is not None
    assert m.description == "Amsive LLC Payroll"
    assert m.values == {"balance": 2228.68, "amount": 1213.49}
    assert m.explicit_sign == {}


def test_match_trailing_split_sign_token():
    m = match_trailing("Card Purchase - 500.00 1,728.68".split(), (BALANCE, AMOUNT))
    assert m.values["amount"] == -500.0
    assert m.explicit_sign["amount"] == "-"
    assert m.description == "Card Purchase"


def test_match_trailing_missing_required_column():
    assert match_trailing("Interest Payment 0.03".split(), (BALANCE, AMOUNT)) is None
    assert match_trailing([], (AMOUNT,)) is None


def test_match_trailing_optional_count_column():
    fields = (BALANCE, AMOUNT, INSTANCES)
    m = match_trailing("Remote Online Deposit 3 1,200.00 4,200.00".split(), fields)
    assert m.values["instances"] == 3
    assert m.description == "Remote Online Deposit"

    m = match_trailing("Interest Payment 0.35 4,200.35".split(), fields)
    assert "instances" not in m.values
    assert m.description == "Interest Payment"


def test_clean_description_collapses_and_strips():
    assert clean_description("  Wire   Transfer  Debit -", strip_categories=True) == "Wire Transfer"
    assert clean_description("Wire Transfer Debit -") == "Wire Transfer Debit"
    assert clean_description("- STORE -") == "STORE"


def test_clean_description_strips_daily_cash_columns():
    assert clean_description("COFFEE SHOP 2% $0.10 $4.50", strip_from_percent=True) == "COFFEE SHOP"
    assert clean_description("UBER TRIP $0.30 $15.00", strip_from_percent=True) == "UBER TRIP"
