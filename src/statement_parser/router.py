from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Union

from .balance import extract_ending_balance
from .banks import apple_card, capital_one, chase_checking, chase_credit, chase_savings
from .config import DEFAULT_SETTINGS, ParserSettings
from .errors import UnsupportedFormatError
from .layout import document_text
from .models import AccountType, ParsedStatement, ParsedTransaction
from .pdf_text import extract_pages


logger = logging.getLogger(__name__)

LineParser = Callable[[str, Optional[ParserSettings]], List[ParsedTransaction]]

PARSERS: Dict[AccountType, LineParser] = {
    AccountType.CHASE_CHECKING: chase_checking.parse,
    AccountType.CHASE_PERSONAL_SAVINGS: chase_savings.parse_personal,
    AccountType.CHASE_BUSINESS_SAVINGS: chase_savings.parse_business,
    AccountType.CHASE_CREDIT: chase_credit.parse,
    AccountType.CAPITAL_ONE_SAVINGS: capital_one.parse,
    AccountType.APPLE_CARD: apple_card.parse,
}


def resolve_account_type(account_type: Union[AccountType, str]) -> AccountType:
    try:
        resolved = AccountType(account_type)
    except ValueError:
        raise UnsupportedFormatError(account_type) from None
    if resolved not in PARSERS:
        raise UnsupportedFormatError(account_type)
    return resolved


def parse_statement_text(
    text: str,
    account_type: Union[AccountType, str],
    settings: Optional[ParserSettings] = None,
) -> ParsedStatement:
    """Texto ya reconstruido -> transacciones + balance final."""
    kind = resolve_account_type(account_type)
    transactions = PARSERS[kind](text, settings)
    return ParsedStatement(
        transactions=transactions,
        ending_balance=extract_ending_balance(text, kind),
    )


def parse_statement(
    buffer: bytes,
    account_type: Union[AccountType, str],
    settings: Optional[ParserSettings] = None,
) -> ParsedStatement:
    """
    PDF -> ParsedStatement.
    El formato se valida antes de tocar el PDF; los errores de extracción se propagan.
    """
    settings = settings or DEFAULT_SETTINGS
    kind = resolve_account_type(account_type)

    pages = extract_pages(buffer)
    text = document_text(pages, settings.row_tolerance)
    result = parse_statement_text(text, kind, settings)

    logger.info(
        "%s: %d transaction(s), ending balance %.2f",
        kind.value,
        len(result.transactions),
        result.ending_balance,
    )
    return result
