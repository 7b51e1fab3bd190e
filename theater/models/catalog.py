"""
Play catalog: the authoritative mapping from play id to Play.

The catalog is read-only. Every performance on an invoice must resolve to
a play here; a miss is a hard failure, never a silent default.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from theater.models.failure import UnknownPlayError
from theater.models.play import Play


@dataclass(frozen=True, eq=False)
class PlayCatalog(Mapping[str, Play]):
    """
    An immutable mapping of play id to Play.

    Attributes:
        plays: Mapping of play id to Play
    """

    plays: Mapping[str, Play] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "plays", MappingProxyType(dict(self.plays)))

    @classmethod
    def of(cls, plays: "Mapping[str, Play] | PlayCatalog") -> "PlayCatalog":
        """Wrap a plain mapping, or return an existing catalog unchanged."""
        if isinstance(plays, PlayCatalog):
            return plays
        return cls(plays=plays)

    def __getitem__(self, play_id: str) -> Play:
        return self.plays[play_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self.plays)

    def __len__(self) -> int:
        return len(self.plays)

    def resolve(self, play_id: str) -> Play:
        """
        Look up the play for a play id.

        Raises:
            UnknownPlayError: If the play id is not in the catalog
        """
        try:
            return self.plays[play_id]
        except KeyError:
            raise UnknownPlayError(play_id) from None
