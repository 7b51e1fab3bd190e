from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StatementLine:
    """Priced result for a single performance."""

    play_name: str
    amount_cents: int
    audience: int
    credits: int


@dataclass(frozen=True, slots=True)
class StatementSummary:
    """
    Everything a statement shows, before formatting.

    Totals are accumulated from the lines in the same pass that builds them,
    so they always equal the line sums.
    """

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    total_credits: int
