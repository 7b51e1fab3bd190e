"""
Currency formatting.

Amounts travel through the system as integer cents. This module is the only
place they become currency text.
"""

from collections.abc import Callable

from theater.config import PERCENT_FACTOR

CurrencyFormatter = Callable[[int], str]


def format_currency(amount_cents: int, symbol: str = "$") -> str:
    """
    Format cents as currency text, e.g. 123456 -> "$1,234.56".

    Thousands separators and exactly two decimal places. Negative amounts
    put the sign before the symbol ("-$1.00").
    """
    # Integer split keeps every digit exact regardless of magnitude
    units, cents = divmod(abs(amount_cents), PERCENT_FACTOR)
    sign = "-" if amount_cents < 0 else ""
    return f"{sign}{symbol}{units:,}.{cents:02d}"


def usd(amount_cents: int) -> str:
    """Format cents as US dollars."""
    return format_currency(amount_cents, "$")


def currency_formatter(symbol: str) -> CurrencyFormatter:
    """Build a formatter that prefixes amounts with `symbol`."""

    def _format(amount_cents: int) -> str:
        return format_currency(amount_cents, symbol)

    return _format
