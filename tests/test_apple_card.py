from __future__ import annotations

import datetime

from statement_parser.banks import apple_card
from statement_parser.banks.apple_card import Section, next_section
from statement_parser.models import TransactionType


STATEMENT = """\
Statement
Your January Balance as of Jan 31, 2025 $1,540.22
Payments
Date Description Amount
01/05/2025 ACH Deposit Internet transfer from account ending in 1234 -$500.00
Total payments for this period -$500.00
Transactions
Date Description Daily Cash Amount
01/15/2025 COFFEE SHOP 2% $0.10 $4.50
01/16/2025 APPLE STORE 3% $3.00 $100.00
01/20/2025 RETAILER (RETURN) 2% -$0.40 -$20.00
Total charges, credits and returns $84.50
Interest Charged
01/31/2025 Interest Charge on Purchases $0.00 $7.00
"""


def test_coffee_shop_scenario():
    txs = apple_card.parse("Transactions\n01/15/2025 COFFEE SHOP 2% $0.10 $4.50\n")
    assert len(txs) == 1
    t = txs[0]
    assert (t.description, t.amount, t.type) == ("COFFEE SHOP", -4.5, TransactionType.EXPENSE)
    assert t.date == datetime.date(2025, 1, 15)


def test_only_transactions_section_is_imported(assert_signs_match_types):
    txs = apple_card.parse(STATEMENT)
    assert [t.description for t in txs] == ["COFFEE SHOP", "APPLE STORE", "RETAILER"]
    assert_signs_match_types(txs)


def test_return_is_positive_income():
    ret = apple_card.parse(STATEMENT)[-1]
    assert (ret.amount, ret.type) == (20.0, TransactionType.INCOME)


def test_return_marker_with_positive_amount_is_still_income():
    txs = apple_card.parse("Transactions\n02/01/2025 SHOE STORE (RETURN) 2% $1.00 $50.00\n")
    assert (txs[0].amount, txs[0].type) == (50.0, TransactionType.INCOME)
    assert txs[0].description == "SHOE STORE"


def test_payments_after_transactions_are_skipped():
    text = "Transactions\n01/15/2025 CAFE 2% $0.10 $4.50\nPayments\n01/20/2025 Payment -$4.50\n"
    assert len(apple_card.parse(text)) == 1


def test_section_state_machine():
    assert next_section(Section.OUTSIDE, "Transactions") is Section.IN_TRANSACTIONS
    assert next_section(Section.IN_TRANSACTIONS, "Payments") is Section.IN_PAYMENTS
    assert next_section(Section.IN_PAYMENTS, "Interest Charged") is Section.OUTSIDE
    assert next_section(Section.IN_TRANSACTIONS, "Apple Card Monthly Installments") is Section.OUTSIDE
    assert next_section(Section.IN_TRANSACTIONS, "01/15/2025 CAFE $1.00") is Section.IN_TRANSACTIONS


def test_lines_outside_sections_are_ignored():
    assert apple_card.parse("01/15/2025 CAFE 2% $0.10 $4.50\n") == []


def test_zero_amount_charge_is_not_imported(assert_signs_match_types):
    txs = apple_card.parse("Transactions\n01/15/2025 FREE ITEM $0.00\n")
    assert txs == []
    assert_signs_match_types(txs)


def test_merchant_with_em_dash_is_kept():
    txs = apple_card.parse("Transactions\n01/15/2025 CAFÉ — DOWNTOWN 2% $0.10 $4.50\n")
    assert [t.description for t in txs] == ["CAFÉ — DOWNTOWN"]
