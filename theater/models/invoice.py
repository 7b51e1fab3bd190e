from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Performance:
    """
    One line item on an invoice.

    Attributes:
        play_id: Catalog key of the play performed
        audience: Number of seats sold (never negative)
    """

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a seat count
        if not isinstance(self.audience, int) or isinstance(self.audience, bool):
            raise TypeError(f"audience must be an int, got {type(self.audience).__name__}")
        if self.audience < 0:
            raise ValueError(f"audience must be >= 0, got {self.audience}")


@dataclass(frozen=True, slots=True)
class Invoice:
    """
    A customer's invoice.

    Performance order is the order of lines on the statement.
    """

    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        if not isinstance(self.performances, tuple):
            object.__setattr__(self, "performances", tuple(self.performances))

    @classmethod
    def of(cls, customer: str, performances: Iterable[Performance]) -> "Invoice":
        """Build an invoice from any iterable of performances."""
        return cls(customer=customer, performances=tuple(performances))
