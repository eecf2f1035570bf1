"""WordNet meaning lookup over a pre-built SQLite database."""

from .database import LexiconDatabase, default_database_path, open_database
from .exceptions import (
    DatabaseError,
    QueryError,
    QueryExecutionError,
    QueryPreparationError,
    RowDecodeError,
    WordnetLookupError,
)
from .meanings import lookup_meanings, render_meanings, split_examples
from .models import Meaning, pos_symbol
from .queries import build_query

__all__ = [
    "DatabaseError",
    "LexiconDatabase",
    "Meaning",
    "QueryError",
    "QueryExecutionError",
    "QueryPreparationError",
    "RowDecodeError",
    "WordnetLookupError",
    "build_query",
    "default_database_path",
    "lookup_meanings",
    "open_database",
    "pos_symbol",
    "render_meanings",
    "split_examples",
]
