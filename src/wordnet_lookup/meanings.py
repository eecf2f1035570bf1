"""Look up and print the meanings of a word."""
from __future__ import annotations

import logging
import sqlite3
import textwrap
from typing import Iterator, List, Optional, Sequence, TextIO

from .exceptions import QueryExecutionError, QueryPreparationError, RowDecodeError
from .models import Meaning, pos_symbol
from .queries import EXAMPLE_SEPARATOR, build_query

LOGGER = logging.getLogger(__name__)

# Only applied when wrapping is requested; default output is one line per item.
WRAP_WIDTH = 70
WRAP_INDENT = " " * 6

__all__ = [
    "WRAP_INDENT",
    "WRAP_WIDTH",
    "decode_row",
    "lookup_meanings",
    "pos_symbol",
    "render_meanings",
    "split_examples",
]


def split_examples(aggregated: Optional[str]) -> List[str]:
    """Split a ``GROUP_CONCAT`` examples column into individual sentences.

    Empty segments are dropped and a single pair of surrounding double
    quotes is removed from each remaining one.
    """

    if aggregated is None:
        return []
    return [_strip_quotes(part) for part in aggregated.split(EXAMPLE_SEPARATOR) if part]


def _strip_quotes(text: str) -> str:
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def decode_row(row: Sequence[object], include_examples: bool) -> Meaning:
    """Turn a result row into a :class:`Meaning`."""

    expected = 3 if include_examples else 2
    if len(row) != expected:
        raise RowDecodeError(f"Expected {expected} columns, got {len(row)}")
    pos = row[0]
    definition = row[1]
    if not isinstance(definition, str):
        raise RowDecodeError(f"Definition must be text, got {type(definition).__name__}")
    examples: List[str] = []
    if include_examples:
        aggregated = row[2]
        if aggregated is not None and not isinstance(aggregated, str):
            raise RowDecodeError(f"Examples must be text, got {type(aggregated).__name__}")
        examples = split_examples(aggregated)
    return Meaning(
        part_of_speech=pos if isinstance(pos, str) else None,
        definition=definition,
        examples=examples,
    )


def lookup_meanings(
    conn: sqlite3.Connection,
    word: str,
    include_examples: bool = False,
) -> List[Meaning]:
    """Return the meanings of ``word`` in display order."""

    cursor = _execute(conn, word, include_examples)
    try:
        return [decode_row(row, include_examples) for row in _iter_rows(cursor)]
    finally:
        cursor.close()


def render_meanings(
    conn: sqlite3.Connection,
    word: str,
    include_examples: bool = False,
    stream: Optional[TextIO] = None,
    wrap: bool = False,
) -> None:
    """Print the meanings of ``word`` grouped by part of speech.

    Output goes to ``stream`` (standard output by default). Lines printed
    before a failure stay printed.
    """

    LOGGER.debug("Looking up %r (examples=%s)", word, include_examples)
    cursor = _execute(conn, word, include_examples)
    try:
        print(f"\nMeanings of '{word}':", file=stream)
        count = 0
        for row in _iter_rows(cursor):
            meaning = decode_row(row, include_examples)
            _print_meaning(meaning, stream, wrap)
            count += 1
    finally:
        cursor.close()
    LOGGER.debug("Rendered %s meaning(s) for %r", count, word)


def _print_meaning(meaning: Meaning, stream: Optional[TextIO], wrap: bool) -> None:
    print(_fill(f"{meaning.symbol} {meaning.definition}", wrap), file=stream)
    for example in meaning.examples:
        print(_fill(f'{WRAP_INDENT}"{example}"', wrap, initial_indent=WRAP_INDENT), file=stream)


def _fill(line: str, wrap: bool, initial_indent: str = "") -> str:
    # Lines that fit are printed untouched in both modes.
    if not wrap or len(line) <= WRAP_WIDTH:
        return line
    return textwrap.fill(
        line[len(initial_indent):],
        width=WRAP_WIDTH,
        initial_indent=initial_indent,
        subsequent_indent=WRAP_INDENT,
    )


def _is_decode_failure(exc: sqlite3.Error) -> bool:
    return isinstance(exc, sqlite3.OperationalError) and "Could not decode" in str(exc)


def _execute(conn: sqlite3.Connection, word: str, include_examples: bool) -> sqlite3.Cursor:
    query = build_query(include_examples)
    try:
        cursor = conn.cursor()
    except sqlite3.Error as exc:
        raise QueryPreparationError(f"Unable to prepare lookup query: {exc}") from exc
    if not isinstance(word, str):
        cursor.close()
        raise QueryExecutionError(f"Unable to bind word of type {type(word).__name__}")
    try:
        cursor.execute(query, (word,))
    except (sqlite3.InterfaceError, sqlite3.ProgrammingError, UnicodeEncodeError) as exc:
        cursor.close()
        raise QueryExecutionError(f"Unable to execute lookup query: {exc}") from exc
    except sqlite3.Error as exc:
        cursor.close()
        if _is_decode_failure(exc):
            raise RowDecodeError(f"Unable to decode result row: {exc}") from exc
        raise QueryPreparationError(f"Unable to prepare lookup query: {exc}") from exc
    return cursor


def _iter_rows(cursor: sqlite3.Cursor) -> Iterator[Sequence[object]]:
    while True:
        try:
            row = cursor.fetchone()
        except sqlite3.Error as exc:
            if _is_decode_failure(exc):
                raise RowDecodeError(f"Unable to decode result row: {exc}") from exc
            raise QueryExecutionError(f"Lookup query failed while reading rows: {exc}") from exc
        if row is None:
            return
        yield row
