"""
Pricing and volume credit engines.

Both engines are pure functions of (play, performance, policy). They share
one genre classification step, so a play can never be priced as one genre
and credited as another. Unknown genres raise UnknownPlayTypeError.
"""

from dataclasses import dataclass

from theater.models.invoice import Performance
from theater.models.play import Play, PlayType
from theater.models.policy import DEFAULT_POLICY, GenrePolicy, PricingPolicy


@dataclass(frozen=True, slots=True)
class PricedPerformance:
    """Amount and credits for one performance, from a single classification."""

    play_type: PlayType
    amount_cents: int
    credits: int


def amount_for(
    play: Play,
    performance: Performance,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> int:
    """
    Compute the amount owed for one performance.

    Args:
        play: The play performed
        performance: The performance being billed
        policy: Pricing table to apply

    Returns:
        Amount in cents

    Raises:
        UnknownPlayTypeError: If the play's type is not a known genre
    """
    genre = policy.for_type(PlayType.classify(play))
    return _genre_amount(genre, performance.audience)


def credits_for(
    play: Play,
    performance: Performance,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> int:
    """
    Compute the volume credits earned by one performance.

    Raises:
        UnknownPlayTypeError: If the play's type is not a known genre
    """
    genre = policy.for_type(PlayType.classify(play))
    return _genre_credits(genre, performance.audience, policy.volume_credit_threshold)


def price_performance(
    play: Play,
    performance: Performance,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> PricedPerformance:
    """Classify once, then compute both amount and credits."""
    play_type = PlayType.classify(play)
    genre = policy.for_type(play_type)
    return PricedPerformance(
        play_type=play_type,
        amount_cents=_genre_amount(genre, performance.audience),
        credits=_genre_credits(genre, performance.audience, policy.volume_credit_threshold),
    )


def _genre_amount(genre: GenrePolicy, audience: int) -> int:
    amount = genre.base
    if audience > genre.threshold:
        amount += genre.over_threshold_surcharge
        amount += (audience - genre.threshold) * genre.over_threshold_rate
    # Per-head fee stacks on top of the tiered price
    amount += genre.per_head_rate * audience
    return amount


def _genre_credits(genre: GenrePolicy, audience: int, volume_credit_threshold: int) -> int:
    credits = max(audience - volume_credit_threshold, 0)
    if genre.extra_credit_divisor is not None:
        credits += audience // genre.extra_credit_divisor
    return credits
