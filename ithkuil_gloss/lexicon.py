"""
Root and affix lexicon for ithkuil_gloss.

The decoder only ever asks two questions of the lexicon: what does this root
mean, and what does this affix mean. Both may go unanswered, in which case
the raw consonants are glossed instead.

Entries come from tab-separated exports of the root and affix sheets, or
from the SQLite store built from them (see ``ithkuil_gloss.db``).
"""

import csv
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

ROOT_DESCRIPTION_COUNT = 4
AFFIX_DEGREE_COUNT = 9


class LexiconError(Exception):
    """Raised when a lexicon source cannot be read."""


@dataclass(frozen=True)
class RootEntry:
    """
    A root and its meanings.

    ``descriptions[0]`` is the general meaning; ``descriptions[1:4]`` are
    the stem 1-3 meanings, empty when the stem has none of its own. Root
    sheets carry no abbreviation; a root is always glossed by meaning.
    """
    cr: str
    descriptions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "descriptions", tuple(self.descriptions))

    def description(self, stem: int) -> str:
        """Meaning of the root in a stem (0 is stem zero), with fallback."""
        if stem < len(self.descriptions) and self.descriptions[stem]:
            return self.descriptions[stem]
        return self.descriptions[0] if self.descriptions else ""


@dataclass(frozen=True)
class AffixEntry:
    """An affix: its abbreviation and one description per degree."""
    cs: str
    abbreviation: str
    descriptions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "descriptions", tuple(self.descriptions))

    def description(self, degree: int) -> Optional[str]:
        """Description of degree 1-9, or None if there is none."""
        if 1 <= degree <= len(self.descriptions):
            return self.descriptions[degree - 1]
        return None


class Lexicon:
    """Read-only mapping from consonant forms to root and affix entries."""

    def __init__(self, roots: Iterable[RootEntry] = (),
                 affixes: Iterable[AffixEntry] = ()):
        self._roots: Dict[str, RootEntry] = {r.cr: r for r in roots}
        self._affixes: Dict[str, AffixEntry] = {a.cs: a for a in affixes}

    def root(self, cr: str) -> Optional[RootEntry]:
        return self._roots.get(cr)

    def affix(self, cs: str) -> Optional[AffixEntry]:
        return self._affixes.get(cs)

    @property
    def roots(self) -> List[RootEntry]:
        return list(self._roots.values())

    @property
    def affixes(self) -> List[AffixEntry]:
        return list(self._affixes.values())

    def __len__(self) -> int:
        return len(self._roots) + len(self._affixes)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._roots)} roots, {len(self._affixes)} affixes)"


# ============================================================================
# TSV Loading
# ============================================================================

def _is_header(row: List[str]) -> bool:
    return bool(row) and row[0].strip().startswith(("-", "#"))


def _read_rows(path: Union[str, Path]) -> List[List[str]]:
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f, delimiter="\t"))
    except OSError as e:
        raise LexiconError(f"Cannot read {path}: {e}") from e

    return [
        row for row in rows
        if any(cell.strip() for cell in row) and not _is_header(row)
    ]


def load_roots_tsv(path: Union[str, Path]) -> List[RootEntry]:
    """
    Load root entries from a tab-separated file.

    Columns: cr, general meaning, stem 1, stem 2, stem 3. Missing stem
    columns are treated as empty.

    Args:
        path: Path to the TSV file.

    Returns:
        List of RootEntry objects.

    Raises:
        LexiconError: If the file can't be read or a row has no meaning.
    """
    entries = []
    for line_no, row in enumerate(_read_rows(path), 1):
        if len(row) < 2:
            raise LexiconError(f"{path}: root row {line_no} has no description")
        descriptions = [cell.strip() for cell in row[1:1 + ROOT_DESCRIPTION_COUNT]]
        descriptions += [""] * (ROOT_DESCRIPTION_COUNT - len(descriptions))
        entries.append(RootEntry(row[0].strip().lower(), descriptions))

    logger.info("Loaded %d roots from %s", len(entries), path)
    return entries


def load_affixes_tsv(path: Union[str, Path]) -> List[AffixEntry]:
    """
    Load affix entries from a tab-separated file.

    Columns: cs, abbreviation, degree 1 ... degree 9.

    Raises:
        LexiconError: If the file can't be read or a row is short.
    """
    entries = []
    for line_no, row in enumerate(_read_rows(path), 1):
        if len(row) < 2 + AFFIX_DEGREE_COUNT:
            raise LexiconError(
                f"{path}: affix row {line_no} has {len(row)} columns, "
                f"expected {2 + AFFIX_DEGREE_COUNT}"
            )
        entries.append(AffixEntry(
            cs=row[0].strip().lower(),
            abbreviation=row[1].strip(),
            descriptions=[cell.strip() for cell in row[2:2 + AFFIX_DEGREE_COUNT]],
        ))

    logger.info("Loaded %d affixes from %s", len(entries), path)
    return entries


def load_lexicon_tsv(roots_path: Optional[Union[str, Path]] = None,
                     affixes_path: Optional[Union[str, Path]] = None) -> Lexicon:
    """Build a lexicon from whichever of the two TSV files are given."""
    roots = load_roots_tsv(roots_path) if roots_path else []
    affixes = load_affixes_tsv(affixes_path) if affixes_path else []
    return Lexicon(roots, affixes)


# ============================================================================
# Default Lexicon
# ============================================================================

_default_lexicon: Optional[Lexicon] = None
_default_lock = threading.Lock()


def _build_default_lexicon() -> Lexicon:
    from ithkuil_gloss import settings

    if settings.DB_PATH.exists():
        from ithkuil_gloss.db.connection import get_session, load_lexicon
        session = get_session()
        try:
            return load_lexicon(session)
        finally:
            session.close()
    if settings.ROOTS_PATH.exists() or settings.AFFIXES_PATH.exists():
        return load_lexicon_tsv(
            settings.ROOTS_PATH if settings.ROOTS_PATH.exists() else None,
            settings.AFFIXES_PATH if settings.AFFIXES_PATH.exists() else None,
        )
    logger.warning("No lexicon found; roots and affixes will be glossed raw")
    return Lexicon()


def get_default_lexicon() -> Lexicon:
    """
    Get the process-wide lexicon, building it on first use.

    Sources are tried in order: the SQLite store at ``settings.DB_PATH``,
    the TSV files at ``settings.ROOTS_PATH`` / ``settings.AFFIXES_PATH``,
    and finally an empty lexicon. Concurrent first calls build it once.
    """
    global _default_lexicon

    lexicon = _default_lexicon
    if lexicon is not None:
        return lexicon

    with _default_lock:
        if _default_lexicon is None:
            _default_lexicon = _build_default_lexicon()
        return _default_lexicon


def set_default_lexicon(lexicon: Optional[Lexicon]):
    """Replace the process-wide lexicon. None resets it to lazy loading."""
    global _default_lexicon
    with _default_lock:
        _default_lexicon = lexicon
