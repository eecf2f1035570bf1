"""Read-only access to a WordNet SQLite database."""
from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Optional, TextIO

from .exceptions import DatabaseError
from .meanings import lookup_meanings, render_meanings
from .models import Meaning

LOGGER = logging.getLogger(__name__)

DATABASE_ENV = "WORDNET_LOOKUP_DB"
DATABASE_FILENAME = "wordnet.db"
APP_DIRNAME = "wordnet_lookup"

REQUIRED_TABLES = ("words", "senses", "synsets", "domains", "samples")


def default_database_path() -> Path:
    """Resolve where the database lives when no path is given."""

    override = os.environ.get(DATABASE_ENV)
    if override:
        return Path(override).expanduser()

    local = Path.cwd() / DATABASE_FILENAME
    if local.exists():
        return local

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home) / APP_DIRNAME / DATABASE_FILENAME
    return Path.home() / ".local" / "share" / APP_DIRNAME / DATABASE_FILENAME


def open_database(path: str | Path) -> sqlite3.Connection:
    """Open an existing database file read-only."""

    db_path = Path(path)
    if not db_path.exists():
        raise DatabaseError(f"Database {db_path} does not exist")
    LOGGER.debug("Opening %s read-only", db_path)
    try:
        return sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as exc:
        raise DatabaseError(f"Unable to open {db_path}: {exc}") from exc


class LexiconDatabase:
    """Owner of a single read-only connection."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.conn = open_database(self.path)

    def __enter__(self) -> "LexiconDatabase":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.conn.close()

    def missing_tables(self) -> List[str]:
        try:
            rows = self.conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
            present = {row[0] for row in rows}
        except sqlite3.Error as exc:
            raise DatabaseError(f"Unable to read schema of {self.path}: {exc}") from exc
        return [table for table in REQUIRED_TABLES if table not in present]

    def meanings(self, word: str, include_examples: bool = False) -> List[Meaning]:
        return lookup_meanings(self.conn, word, include_examples)

    def render(
        self,
        word: str,
        include_examples: bool = False,
        stream: Optional[TextIO] = None,
        wrap: bool = False,
    ) -> None:
        render_meanings(self.conn, word, include_examples, stream=stream, wrap=wrap)
