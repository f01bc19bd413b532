"""INR currency formatting."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def _trim(value: float, places: int) -> str:
    """Round half away from zero to `places` decimals and drop trailing zeros (1.50 -> 1.5, 2.00 -> 2)."""
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_currency_inr(amount: Any) -> str:
    """
    Format an amount in Indian short form.

    >>> format_currency_inr(12500000)
    '₹1.25 Cr'
    >>> format_currency_inr(150000)
    '₹1.5L'
    >>> format_currency_inr(2500)
    '₹2.5k'
    >>> format_currency_inr(None)
    'N/A'
    """
    if amount is None:
        return "N/A"
    try:
        number = float(amount)
    except (TypeError, ValueError):
        return "N/A"
    if not math.isfinite(number):
        return "N/A"

    magnitude = abs(number)
    if magnitude >= CRORE:
        formatted = f"{_trim(number / CRORE, 2)} Cr"
    elif magnitude >= LAKH:
        formatted = f"{_trim(number / LAKH, 2)}L"
    elif magnitude >= THOUSAND:
        formatted = f"{_trim(number / THOUSAND, 1)}k"
    elif number.is_integer():
        formatted = str(int(number))
    else:
        formatted = repr(number)

    return f"₹{formatted}"
