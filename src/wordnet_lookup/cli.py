"""Command line interface for wordnet_lookup."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from .database import DATABASE_ENV, LexiconDatabase, default_database_path
from .exceptions import WordnetLookupError
from .models import Meaning

try:
    from tabulate import tabulate
except ImportError:  # pragma: no cover - optional dependency
    tabulate = None

LOGGER = logging.getLogger("wordnet_lookup")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Look up word meanings in a WordNet database")
    parser.add_argument("word", help="Word to look up")
    parser.add_argument("--database", help="SQLite database path (default: $WORDNET_LOOKUP_DB or wordnet.db)")
    parser.add_argument("--examples", action="store_true", help="Show usage examples")
    parser.add_argument("--wrap", action="store_true", help="Wrap long lines at 70 columns")
    parser.add_argument("--format", choices=["text", "table"], default="text", help="Output format")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    db_path = Path(args.database) if args.database else default_database_path()
    if not db_path.exists():
        parser.error(f"Database {db_path} does not exist. Set --database or ${DATABASE_ENV}.")

    try:
        with LexiconDatabase(db_path) as db:
            missing = db.missing_tables()
            if missing:
                parser.error(f"Database {db_path} is missing tables: {', '.join(missing)}")
            if args.format == "table":
                _print_table(db.meanings(args.word, include_examples=args.examples))
            else:
                db.render(args.word, include_examples=args.examples, wrap=args.wrap)
    except WordnetLookupError as exc:
        LOGGER.error("%s", exc)
        parser.exit(1)


def _print_table(meanings: List[Meaning]) -> None:
    if not meanings:
        print("No meanings found")
        return
    rows = [[m.symbol, m.definition, "; ".join(m.examples)] for m in meanings]
    headers = ["POS", "Definition", "Examples"]
    if tabulate:
        print(tabulate(rows, headers=headers))
    else:
        print(json.dumps(dict(headers=headers, rows=rows), indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
