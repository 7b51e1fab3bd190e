"""
Loaders for play catalogs and invoices stored as JSON.

Catalog format (keyed by play id):
    {"hamlet": {"name": "Hamlet", "type": "tragedy"}}

Invoice format (a list, or a single invoice object):
    [{"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 55}]}]

Loading checks structure only. A play's type is kept as written, so an
unknown genre is reported when a statement prices it, not here.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from theater.models.catalog import PlayCatalog
from theater.models.failure import InvalidInputError
from theater.models.invoice import Invoice, Performance
from theater.models.play import Play

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT SCHEMAS (UNTRUSTED)
# =============================================================================


class PlaySchema(BaseModel):
    """A catalog entry as it appears in the JSON file."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    type: str


class PerformanceSchema(BaseModel):
    """A performance entry. Accepts both `playID` and `play_id` keys."""

    model_config = ConfigDict(extra="ignore")

    play_id: str = Field(..., validation_alias=AliasChoices("playID", "play_id"))
    audience: int = Field(..., ge=0, strict=True)


class InvoiceSchema(BaseModel):
    """An invoice as it appears in the JSON file."""

    model_config = ConfigDict(extra="ignore")

    customer: str
    performances: list[PerformanceSchema] = Field(default_factory=list)

    def to_invoice(self) -> Invoice:
        return Invoice.of(
            self.customer,
            (Performance(play_id=p.play_id, audience=p.audience) for p in self.performances),
        )


_PLAYS_ADAPTER = TypeAdapter(dict[str, PlaySchema])
_INVOICES_ADAPTER = TypeAdapter(list[InvoiceSchema])


# =============================================================================
# PARSING
# =============================================================================


def parse_plays(data: Any) -> PlayCatalog:
    """
    Build a PlayCatalog from decoded JSON data.

    Raises:
        InvalidInputError: If the data does not match the catalog layout
    """
    try:
        entries = _PLAYS_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise InvalidInputError("Invalid play catalog", detail=str(e)) from e

    return PlayCatalog(
        plays={play_id: Play(name=entry.name, type=entry.type) for play_id, entry in entries.items()}
    )


def parse_invoices(data: Any) -> list[Invoice]:
    """
    Build invoices from decoded JSON data.

    Raises:
        InvalidInputError: If the data does not match the invoice layout
    """
    if isinstance(data, dict):
        data = [data]

    try:
        entries = _INVOICES_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise InvalidInputError("Invalid invoice data", detail=str(e)) from e

    return [entry.to_invoice() for entry in entries]


# =============================================================================
# FILE LOADING
# =============================================================================


def load_plays(path: Path) -> PlayCatalog:
    """
    Load a play catalog from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidInputError: If the file is not a valid catalog
    """
    catalog = parse_plays(_read_json(path))
    logger.info("Loaded %d plays from %s", len(catalog), path)
    return catalog


def load_invoices(path: Path) -> list[Invoice]:
    """
    Load invoices from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidInputError: If the file is not valid invoice data
    """
    invoices = parse_invoices(_read_json(path))
    logger.info("Loaded %d invoices from %s", len(invoices), path)
    return invoices


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Malformed JSON in {path}", detail=str(e)) from e
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Input file is not UTF-8 text: {path}", detail=str(e)) from e
    except OSError as e:
        # Directories, permission errors and other unreadable paths
        raise InvalidInputError(f"Cannot read input file {path}", detail=str(e)) from e
