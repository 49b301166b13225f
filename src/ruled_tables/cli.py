"""Detect ruled tables in a JSON file of page primitives.

Usage:
    python -m ruled_tables.cli primitives.json                    # markdown for every table
    python -m ruled_tables.cli primitives.json --format summary   # one line per table
    python -m ruled_tables.cli primitives.json --format json      # raw structural dump
    python -m ruled_tables.cli primitives.json --page 3           # only tables on page 3

Tolerances come from RULED_TABLES_* environment variables (see config.py).
"""

import argparse
import logging
import sys
from collections.abc import Iterable

from pydantic import ValidationError

from ruled_tables.config import load_config
from ruled_tables.formatting import dump_tables, render_markdown, table_summary
from ruled_tables.pipeline import PrimitiveLoadError, detect_tables, load_primitives
from ruled_tables.schema import DetectedTable

logger = logging.getLogger(__name__)

FORMATS = ("markdown", "summary", "json")


def render(tables: Iterable[DetectedTable], fmt: str) -> str:
    """Render a table list in the requested output format."""
    if fmt == "json":
        return dump_tables(tables)
    if fmt == "summary":
        return "\n".join(table_summary(t) for t in tables)
    return "\n\n".join(render_markdown(t) for t in tables)


def main(argv: list[str] | None = None) -> int:
    """Load primitives, detect tables, and print them.  Returns the exit status."""
    parser = argparse.ArgumentParser(description="Detect ruled tables in extracted page primitives")
    parser.add_argument("primitives", help="JSON file holding an array of text/line/rect primitives")
    parser.add_argument("--format", choices=FORMATS, default="markdown", help="Output format (default: markdown)")
    parser.add_argument("--page", type=int, help="Only report tables on this 1-based page")
    parser.add_argument(
        "--loglevel",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        config = load_config()
        primitives = load_primitives(args.primitives)
    except (PrimitiveLoadError, ValidationError) as exc:
        logger.error("%s", exc)
        return 1

    if args.page is not None:
        primitives = [p for p in primitives if p.page == args.page]

    tables = detect_tables(primitives, config)
    output = render(tables, args.format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
