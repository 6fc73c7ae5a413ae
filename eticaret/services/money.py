"""
Money Utilities - Decimal operations for prices and totals.

Prices arrive from the backend as JSON numbers; everything is converted to
Decimal on entry and only turned back into float at serialization boundaries.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Lira has kuruş, two decimal places
MONEY_PRECISION = Decimal("0.01")

CURRENCY_CODE = "TRY"
CURRENCY_SYMBOL = "₺"

# tr-TR grouping: 1.234,56
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Floats go through ``str`` so 19.9 stays 19.9 rather than its binary
    expansion.

    Returns:
        Decimal value, or Decimal("0") for None/unparseable input
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round to kuruş, half away from zero."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def to_float(value: Number) -> float:
    """
    Convert to float for JSON serialization.

    Use only at boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_money(value: Number) -> str:
    """
    Format an amount as Turkish lira for display.

    Examples:
        format_money(340)        -> "₺340,00"
        format_money("1234.5")   -> "₺1.234,50"
        format_money(-12.345)    -> "-₺12,35"
    """
    amount = round_money(value)
    sign = "-" if amount < 0 else ""
    # Format with en-US separators first, then swap them
    grouped = f"{abs(amount):,.2f}"
    localized = (
        grouped.replace(",", "\0")
        .replace(".", DECIMAL_SEPARATOR)
        .replace("\0", THOUSANDS_SEPARATOR)
    )
    return f"{sign}{CURRENCY_SYMBOL}{localized}"
