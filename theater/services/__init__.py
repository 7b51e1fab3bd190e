"""
Theater statement services.

Pricing, aggregation and rendering of billing statements.
"""

from theater.services.aggregator import aggregate
from theater.services.currency import (
    CurrencyFormatter,
    currency_formatter,
    format_currency,
    usd,
)
from theater.services.pricing import (
    PricedPerformance,
    amount_for,
    credits_for,
    price_performance,
)
from theater.services.statement_printer import StatementPrinter
from theater.services.statement_renderer import render_statement, render_summary

__all__ = [
    "CurrencyFormatter",
    "PricedPerformance",
    "StatementPrinter",
    "aggregate",
    "amount_for",
    "credits_for",
    "currency_formatter",
    "format_currency",
    "price_performance",
    "render_statement",
    "render_summary",
    "usd",
]
