from __future__ import annotations

import sqlite3

import pytest

SCHEMA = """
CREATE TABLE words (
    wordid INTEGER PRIMARY KEY,
    word TEXT NOT NULL
);

CREATE TABLE domains (
    domainid INTEGER PRIMARY KEY,
    posid TEXT
);

CREATE TABLE synsets (
    synsetid INTEGER PRIMARY KEY,
    domainid INTEGER NOT NULL,
    definition TEXT
);

CREATE TABLE senses (
    senseid INTEGER PRIMARY KEY,
    wordid INTEGER NOT NULL,
    synsetid INTEGER NOT NULL
);

CREATE TABLE samples (
    synsetid INTEGER NOT NULL,
    sampleid INTEGER NOT NULL,
    sample TEXT NOT NULL
);
"""


class LexiconBuilder:
    """Populate the WordNet tables with just enough rows for a test."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._domains: dict[str, int] = {}

    def word(self, text: str, wordid: int) -> int:
        self.conn.execute("INSERT INTO words(wordid, word) VALUES (?, ?)", (wordid, text))
        return wordid

    def synset(self, synsetid: int, posid, definition, samples=()) -> int:
        domainid = self._domain(posid)
        self.conn.execute(
            "INSERT INTO synsets(synsetid, domainid, definition) VALUES (?, ?, ?)",
            (synsetid, domainid, definition),
        )
        for index, sample in enumerate(samples, 1):
            self.conn.execute(
                "INSERT INTO samples(synsetid, sampleid, sample) VALUES (?, ?, ?)",
                (synsetid, index, sample),
            )
        return synsetid

    def sense(self, senseid: int, wordid: int, synsetid: int) -> None:
        self.conn.execute(
            "INSERT INTO senses(senseid, wordid, synsetid) VALUES (?, ?, ?)",
            (senseid, wordid, synsetid),
        )

    def _domain(self, posid) -> int:
        key = repr(posid)
        if key not in self._domains:
            cur = self.conn.execute("INSERT INTO domains(posid) VALUES (?)", (posid,))
            self._domains[key] = int(cur.lastrowid)
        return self._domains[key]


@pytest.fixture()
def lexicon_path(tmp_path):
    db_path = tmp_path / "wordnet.db"
    conn = sqlite3.connect(db_path)
    conn.executescript(SCHEMA)
    builder = LexiconBuilder(conn)

    bank = builder.word("bank", 1)
    builder.synset(100, "n", "a financial institution")
    builder.synset(101, "n", "sloping land beside water", samples=['"the river bank"'])
    builder.sense(10, bank, 100)
    builder.sense(11, bank, 101)

    run = builder.word("run", 2)
    builder.synset(200, "v", "move fast by using one's feet", samples=['"run fast"', '"run away"'])
    builder.synset(201, "n", "a score in baseball")
    builder.synset(202, "r", "in a running manner")
    builder.synset(203, "s", "melted or liquefied")
    builder.sense(23, run, 200)
    builder.sense(22, run, 201)
    builder.sense(21, run, 202)
    builder.sense(20, run, 203)

    conn.commit()
    conn.close()
    return db_path


@pytest.fixture()
def conn(lexicon_path):
    connection = sqlite3.connect(lexicon_path)
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture()
def builder(conn):
    return LexiconBuilder(conn)
