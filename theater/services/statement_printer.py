"""
Statement printer for a single invoice.

Bundles an invoice with its play catalog and exposes the statement text
along with per-performance and total accessors. Every accessor reads from
the same pricing engines, so the numbers printed on the statement and the
numbers returned here cannot drift apart.
"""

from collections.abc import Mapping

from theater.models.catalog import PlayCatalog
from theater.models.invoice import Invoice, Performance
from theater.models.play import Play
from theater.models.policy import DEFAULT_POLICY, PricingPolicy
from theater.models.statement import StatementSummary
from theater.services.aggregator import aggregate
from theater.services.currency import CurrencyFormatter
from theater.services.currency import usd as format_usd
from theater.services.pricing import amount_for, credits_for
from theater.services.statement_renderer import render_summary


class StatementPrinter:
    """
    Generates a statement for a given invoice of performances.

    Usage:
        printer = StatementPrinter(invoice, plays)
        text = printer.statement()
        owed = printer.get_total_amount()
    """

    def __init__(
        self,
        invoice: Invoice,
        plays: Mapping[str, Play],
        policy: PricingPolicy = DEFAULT_POLICY,
        formatter: CurrencyFormatter = format_usd,
    ) -> None:
        self.invoice = invoice
        self.plays = PlayCatalog.of(plays)
        self.policy = policy
        self.formatter = formatter
        self._summary: StatementSummary | None = None

    def summary(self) -> StatementSummary:
        """Priced summary of the invoice (computed once)."""
        if self._summary is None:
            self._summary = aggregate(self.invoice, self.plays, self.policy)
        return self._summary

    def statement(self) -> str:
        """
        Returns a formatted statement of the invoice.

        Raises:
            UnknownPlayError: If a performance references a missing play id
            UnknownPlayTypeError: If one of the play types is not known
        """
        return render_summary(self.summary(), self.formatter)

    def get_play(self, performance: Performance) -> Play:
        """Returns the play for a performance."""
        return self.plays.resolve(performance.play_id)

    def get_amount(self, performance: Performance) -> int:
        """Returns the amount in cents for a single performance."""
        return amount_for(self.get_play(performance), performance, self.policy)

    def get_total_amount(self) -> int:
        """Returns the total amount in cents."""
        return self.summary().total_amount

    def get_volume_credits(self, performance: Performance) -> int:
        """Returns the credits for a single performance."""
        return credits_for(self.get_play(performance), performance, self.policy)

    def get_total_volume_credits(self) -> int:
        """Returns the total credits."""
        return self.summary().total_credits

    def usd(self, amount_in_cents: int) -> str:
        """Returns the amount formatted as currency."""
        return self.formatter(amount_in_cents)
