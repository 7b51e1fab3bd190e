"""
Pricing policy table.

Each genre carries its own pricing and credit rules as data. The engines
apply one formula to whichever GenrePolicy a play classifies into:

    amount = base
             + (over_threshold_surcharge + (audience - threshold) * over_threshold_rate
                if audience > threshold)
             + per_head_rate * audience

    credits = max(audience - volume_credit_threshold, 0)
              + audience // extra_credit_divisor (when set)

Only tragedy and comedy exist. Adding a genre means adding a PlayType
member and a policy field here.
"""

from dataclasses import dataclass

from theater import config
from theater.models.failure import UnknownPlayTypeError
from theater.models.play import PlayType


@dataclass(frozen=True, slots=True)
class GenrePolicy:
    """
    Pricing and credit rules for one genre. Amounts are in cents.

    Attributes:
        base: Flat amount charged for every performance
        threshold: Audience size above which the over-capacity terms apply
        over_threshold_surcharge: Flat amount added once above the threshold
        over_threshold_rate: Amount per seat above the threshold
        per_head_rate: Amount per seat, charged regardless of threshold
        extra_credit_divisor: One bonus credit per this many seats (None for no bonus)
    """

    base: int
    threshold: int
    over_threshold_rate: int
    over_threshold_surcharge: int = 0
    per_head_rate: int = 0
    extra_credit_divisor: int | None = None

    def __post_init__(self) -> None:
        if self.extra_credit_divisor is not None and self.extra_credit_divisor <= 0:
            raise ValueError("extra_credit_divisor must be positive")


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    """The full pricing table: one GenrePolicy per PlayType."""

    tragedy: GenrePolicy
    comedy: GenrePolicy
    volume_credit_threshold: int

    def for_type(self, play_type: PlayType) -> GenrePolicy:
        """
        Get the rules for a genre.

        Raises:
            UnknownPlayTypeError: If no rules exist for the genre
        """
        if play_type is PlayType.TRAGEDY:
            return self.tragedy
        if play_type is PlayType.COMEDY:
            return self.comedy
        raise UnknownPlayTypeError(getattr(play_type, "value", str(play_type)))


DEFAULT_POLICY = PricingPolicy(
    tragedy=GenrePolicy(
        base=config.TRAGEDY_BASE_AMOUNT,
        threshold=config.TRAGEDY_AUDIENCE_THRESHOLD,
        over_threshold_rate=config.TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON,
    ),
    comedy=GenrePolicy(
        base=config.COMEDY_BASE_AMOUNT,
        threshold=config.COMEDY_AUDIENCE_THRESHOLD,
        over_threshold_rate=config.COMEDY_OVER_BASE_CAPACITY_PER_PERSON,
        over_threshold_surcharge=config.COMEDY_OVER_BASE_CAPACITY_AMOUNT,
        per_head_rate=config.COMEDY_AMOUNT_PER_AUDIENCE,
        extra_credit_divisor=config.COMEDY_EXTRA_VOLUME_FACTOR,
    ),
    volume_credit_threshold=config.BASE_VOLUME_CREDIT_THRESHOLD,
)
