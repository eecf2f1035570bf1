"""Fixed SQL used to look up the meanings of a word."""
from __future__ import annotations

EXAMPLE_SEPARATOR = "; "

MEANINGS_QUERY = """
    SELECT domains.posid, synsets.definition
    FROM words
    JOIN senses ON senses.wordid = words.wordid
    JOIN synsets ON synsets.synsetid = senses.synsetid
    JOIN domains ON domains.domainid = synsets.domainid
    WHERE words.word = ?
    GROUP BY synsets.synsetid
    ORDER BY domains.posid, senses.senseid
"""

MEANINGS_WITH_EXAMPLES_QUERY = """
    SELECT domains.posid,
           synsets.definition,
           GROUP_CONCAT(samples.sample, '; ') AS examples
    FROM words
    JOIN senses ON senses.wordid = words.wordid
    JOIN synsets ON synsets.synsetid = senses.synsetid
    JOIN domains ON domains.domainid = synsets.domainid
    LEFT JOIN samples ON samples.synsetid = synsets.synsetid
    WHERE words.word = ?
    GROUP BY synsets.synsetid
    ORDER BY domains.posid, senses.senseid
"""


def build_query(include_examples: bool) -> str:
    """Return the lookup query, with the aggregated ``examples`` column if requested.

    The word is always bound as the single ``?`` parameter.
    """

    if include_examples:
        return MEANINGS_WITH_EXAMPLES_QUERY
    return MEANINGS_QUERY
