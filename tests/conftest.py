"""
Shared fixtures for ithkuil_gloss tests.
"""

import pytest

from ithkuil_gloss.lexicon import AffixEntry, Lexicon, RootEntry, set_default_lexicon

DEGREES = ["one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]


@pytest.fixture(autouse=True)
def empty_default_lexicon():
    """Run every test against an empty default lexicon, then reset it."""
    set_default_lexicon(Lexicon())
    yield
    set_default_lexicon(None)


@pytest.fixture
def lexicon():
    """A small in-memory lexicon with one root and one affix."""
    return Lexicon(
        roots=[RootEntry("kl", ["cat", "feline", "", "kitten"])],
        affixes=[AffixEntry("n", "NUM", DEGREES)],
    )


@pytest.fixture
def roots_tsv(tmp_path):
    path = tmp_path / "roots.tsv"
    path.write_text(
        "-cr\tgeneral\tstem 1\tstem 2\tstem 3\n"
        "kl\tcat\tfeline\t\tkitten\n"
        "\n"
        "MR\tmind\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def affixes_tsv(tmp_path):
    path = tmp_path / "affixes.tsv"
    path.write_text(
        "#cs\tabbr\t" + "\t".join(f"d{i}" for i in range(1, 10)) + "\n"
        "n\tNUM\t" + "\t".join(DEGREES) + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "lexicon.db"


@pytest.fixture
def db_session(db_path):
    """Session on a fresh SQLite lexicon store in a temporary directory."""
    from ithkuil_gloss.db.connection import get_session, init_db

    init_db(db_path)
    session = get_session(db_path)
    yield session
    session.close()
