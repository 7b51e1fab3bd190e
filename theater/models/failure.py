"""
Failure classification for statement generation.

Every failure the core raises is a KnownError: the system knows exactly
which input caused it and can explain it to the caller.

Statement failures are fatal for the whole invoice. They are raised at the
point of detection and never caught inside the core. Only the outer
boundary (the CLI job) turns them into user-visible output.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Catalog failures
    NOT_FOUND = "not_found"
    UNKNOWN_PLAY_TYPE = "unknown_play_type"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class UnknownPlayError(KnownError):
    """
    Raised when a performance references a play id missing from the catalog.

    No statement is produced for the invoice.
    """

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"unknown play: {play_id}",
            suggestion="Add the play to the catalog or fix the invoice's play id.",
        )


class UnknownPlayTypeError(KnownError):
    """
    Raised when a play's genre is neither tragedy nor comedy.

    No statement is produced for the invoice.
    """

    def __init__(self, play_type: str, play_name: str | None = None):
        self.play_type = play_type
        self.play_name = play_name
        super().__init__(
            kind=FailureKind.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {play_type}",
            detail=f"play: {play_name}" if play_name is not None else None,
            suggestion="Supported play types are 'tragedy' and 'comedy'.",
        )


class InvalidInputError(KnownError):
    """Raised when invoice or catalog data cannot be loaded."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=message,
            detail=detail,
            suggestion="Check the input file against the expected JSON layout.",
        )
