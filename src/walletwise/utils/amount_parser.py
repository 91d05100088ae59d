"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

CURRENCY_TOKENS = re.compile(r"[$€£¥]|\b(?:EUR|USD|GBP|JPY)\b", re.IGNORECASE)


def strip_currency(text: str) -> str:
    """Drop currency symbols, currency codes and thousands separators."""
    return CURRENCY_TOKENS.sub("", text).replace(",", "").strip()


def parse_amount(amount_str: str) -> Decimal:
    """Parse user or stored amount text into a Decimal.

    Accepts plain numbers ("12.50"), currency-decorated values ("€ 12.50",
    "EUR 1,234.56") and accounting negatives ("(12.50)"). The result may be
    zero, negative or non-finite; callers decide what is allowed.

    Raises:
        ValueError: If the text is empty or not a number
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    negate = text.startswith("(") and text.endswith(")")
    if negate:
        text = text[1:-1]

    cleaned = strip_currency(text)
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if negate else amount
