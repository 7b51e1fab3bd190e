"""
Statement Renderer.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

Pricing happens in the aggregator; this module lays out the text. The
currency formatter is injected so callers (and tests) control how amounts
look.
"""

from collections.abc import Mapping

from theater.models.invoice import Invoice
from theater.models.play import Play
from theater.models.policy import DEFAULT_POLICY, PricingPolicy
from theater.models.statement import StatementLine, StatementSummary
from theater.services.aggregator import aggregate
from theater.services.currency import CurrencyFormatter, usd


def render_statement(
    invoice: Invoice,
    catalog: Mapping[str, Play],
    policy: PricingPolicy = DEFAULT_POLICY,
    formatter: CurrencyFormatter = usd,
) -> str:
    """
    Render the text statement for an invoice.

    Raises:
        UnknownPlayError: If a performance references a missing play id
        UnknownPlayTypeError: If a referenced play has an unknown genre
    """
    return render_summary(aggregate(invoice, catalog, policy), formatter)


def render_summary(summary: StatementSummary, formatter: CurrencyFormatter = usd) -> str:
    """
    Format an already-computed summary.

    Every line, including the last, is newline-terminated.
    """
    lines: list[str] = [f"Statement for {summary.customer}"]

    for line in summary.lines:
        lines.append(_format_line(line, formatter))

    lines.append(f"Amount owed is {formatter(summary.total_amount)}")
    lines.append(f"You earned {summary.total_credits} credits")

    return "".join(f"{text}\n" for text in lines)


def _format_line(line: StatementLine, formatter: CurrencyFormatter) -> str:
    """Format a single performance line."""
    return f"  {line.play_name}: {formatter(line.amount_cents)} ({line.audience} seats)"
