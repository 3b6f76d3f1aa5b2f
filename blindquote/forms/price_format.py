"""Currency formatting for quote tables and email cards."""

import math
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
STRIKE_STYLE = "text-decoration: line-through; color: #999999; font-size: 13.3px;"
DISCOUNT_STYLE = "font-weight: bold; color: #d32f2f;"


def to_amount(value) -> float:
    """Numeric value or 0 — bools, strings, None and NaN/inf all become 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if isinstance(value, float) and not math.isfinite(value):
        return 0.0
    return float(value)


def money(value) -> str:
    """Plain '$1234.50' text. Exact halves of a cent round away from zero."""
    cents = Decimal(to_amount(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"${cents}"


def format_price(value, strikethrough=False, discounted=False) -> str:
    """Format an amount, optionally as struck-through or discounted markup.

    strikethrough marks an original / pre-discount price; discounted marks the
    final price. If both are passed, strikethrough wins.
    """
    text = money(value)
    if strikethrough:
        return f'<span style="{STRIKE_STYLE}">{text}</span>'
    if discounted:
        return f'<span style="{DISCOUNT_STYLE}">{text}</span>'
    return text
