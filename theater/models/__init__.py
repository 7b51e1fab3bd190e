from theater.models.catalog import PlayCatalog
from theater.models.failure import (
    FailureDetail,
    FailureKind,
    InvalidInputError,
    KnownError,
    UnknownPlayError,
    UnknownPlayTypeError,
)
from theater.models.invoice import Invoice, Performance
from theater.models.play import Play, PlayType
from theater.models.policy import DEFAULT_POLICY, GenrePolicy, PricingPolicy
from theater.models.statement import StatementLine, StatementSummary

__all__ = [
    "DEFAULT_POLICY",
    "FailureDetail",
    "FailureKind",
    "GenrePolicy",
    "InvalidInputError",
    "Invoice",
    "KnownError",
    "Performance",
    "Play",
    "PlayCatalog",
    "PlayType",
    "PricingPolicy",
    "StatementLine",
    "StatementSummary",
    "UnknownPlayError",
    "UnknownPlayTypeError",
]
