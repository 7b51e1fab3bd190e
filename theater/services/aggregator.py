"""
Statement aggregation.

Walks an invoice once, in order, and folds every performance into a
StatementSummary. This is the only place per-performance values are summed.
"""

import logging
from collections.abc import Mapping

from theater.models.catalog import PlayCatalog
from theater.models.invoice import Invoice
from theater.models.play import Play
from theater.models.policy import DEFAULT_POLICY, PricingPolicy
from theater.models.statement import StatementLine, StatementSummary
from theater.services.pricing import price_performance

logger = logging.getLogger(__name__)


def aggregate(
    invoice: Invoice,
    catalog: Mapping[str, Play],
    policy: PricingPolicy = DEFAULT_POLICY,
) -> StatementSummary:
    """
    Price every performance on an invoice and total the results.

    Args:
        invoice: The invoice to price
        catalog: Play catalog (a PlayCatalog or a plain mapping)
        policy: Pricing table to apply

    Returns:
        StatementSummary with lines in invoice order

    Raises:
        UnknownPlayError: If a performance references a missing play id
        UnknownPlayTypeError: If a referenced play has an unknown genre
    """
    plays = PlayCatalog.of(catalog)

    lines: list[StatementLine] = []
    total_amount = 0
    total_credits = 0

    for performance in invoice.performances:
        play = plays.resolve(performance.play_id)
        priced = price_performance(play, performance, policy)

        logger.debug(
            "Priced %s (%s, %d seats): %d cents, %d credits",
            play.name,
            priced.play_type.value,
            performance.audience,
            priced.amount_cents,
            priced.credits,
        )

        lines.append(
            StatementLine(
                play_name=play.name,
                amount_cents=priced.amount_cents,
                audience=performance.audience,
                credits=priced.credits,
            )
        )
        total_amount += priced.amount_cents
        total_credits += priced.credits

    return StatementSummary(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount=total_amount,
        total_credits=total_credits,
    )
