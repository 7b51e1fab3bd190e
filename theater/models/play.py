from dataclasses import dataclass
from enum import Enum

from theater.models.failure import UnknownPlayTypeError


@dataclass(frozen=True, slots=True)
class Play:
    """
    A play from the catalog.

    Attributes:
        name: Display name printed on statements
        type: Genre exactly as supplied by the catalog (e.g., "tragedy")
    """

    name: str
    type: str


class PlayType(str, Enum):
    """Genres the pricing policy knows how to bill."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @staticmethod
    def classify(play: Play) -> "PlayType":
        """
        Resolve the genre of a play.

        Raises UnknownPlayTypeError for any type outside the closed set.
        Pricing and credits both classify through here, so they always
        agree on a play's genre.
        """
        try:
            return PlayType(play.type)
        except ValueError:
            raise UnknownPlayTypeError(play.type, play.name) from None
