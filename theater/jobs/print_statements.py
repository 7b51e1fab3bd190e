"""
Print billing statements.

Run this job to render a statement for every invoice in a JSON file.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from theater.config import settings
from theater.models.failure import KnownError
from theater.parsers.json_loader import load_invoices, load_plays
from theater.services.currency import currency_formatter
from theater.services.statement_renderer import render_statement

logger = logging.getLogger(__name__)


def run_print_statements(plays_path: Path, invoices_path: Path) -> list[str]:
    """
    Render a statement for each invoice.

    Any failure aborts the run; statements are only returned if every
    invoice renders.
    """
    catalog = load_plays(plays_path)
    invoices = load_invoices(invoices_path)
    formatter = currency_formatter(settings.currency_symbol)

    statements: list[str] = []
    for invoice in invoices:
        logger.info("Rendering statement for %s", invoice.customer)
        statements.append(render_statement(invoice, catalog, formatter=formatter))

    logger.info("Rendered %d statements", len(statements))
    return statements


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Print theater billing statements")
    parser.add_argument(
        "--plays",
        type=Path,
        required=True,
        help="Path to plays JSON file",
    )
    parser.add_argument(
        "--invoices",
        type=Path,
        required=True,
        help="Path to invoices JSON file",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        statements = run_print_statements(args.plays, args.invoices)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except KnownError as e:
        logger.error("Failed to print statements: %s", e.to_detail().model_dump_json())
        return 1

    for text in statements:
        print(text, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
