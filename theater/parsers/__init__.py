from theater.parsers.json_loader import (
    load_invoices,
    load_plays,
    parse_invoices,
    parse_plays,
)

__all__ = [
    "load_invoices",
    "load_plays",
    "parse_invoices",
    "parse_plays",
]
