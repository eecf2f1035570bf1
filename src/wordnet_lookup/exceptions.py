"""Exceptions raised by wordnet_lookup."""


class WordnetLookupError(Exception):
    """Base exception for all lookup failures."""


class DatabaseError(WordnetLookupError):
    """Database file missing or could not be opened."""


class QueryError(WordnetLookupError):
    """The lookup query could not be run."""


class QueryPreparationError(QueryError):
    """The SQL failed to prepare (schema mismatch, closed connection)."""


class QueryExecutionError(QueryError):
    """Binding the word or stepping through the results failed."""


class RowDecodeError(WordnetLookupError):
    """A result row held a value of an unexpected type."""
