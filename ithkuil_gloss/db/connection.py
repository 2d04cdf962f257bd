"""
Database connection management for the lexicon store.

Engines are cached per database path; sessions are cheap and handed out
fresh on each call.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from sqlalchemy import create_engine, delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ithkuil_gloss import settings
from ithkuil_gloss.db.models import AffixRecord, Base, RootRecord
from ithkuil_gloss.lexicon import Lexicon

logger = logging.getLogger(__name__)

_engines: Dict[Path, Engine] = {}


def get_db_path() -> Path:
    """Path of the configured lexicon database."""
    return settings.DB_PATH


def get_engine(db_path: Optional[Union[str, Path]] = None) -> Engine:
    """
    Get the engine for a database file, creating it on first use.

    Args:
        db_path: Path to the SQLite file. Defaults to settings.DB_PATH.
    """
    path = Path(db_path) if db_path is not None else get_db_path()

    if path not in _engines:
        path.parent.mkdir(parents=True, exist_ok=True)
        _engines[path] = create_engine(f"sqlite:///{path}", echo=settings.DEBUG)
        logger.debug("Created engine for %s", path)

    return _engines[path]


def get_session(db_path: Optional[Union[str, Path]] = None) -> Session:
    """Open a new session on the lexicon database."""
    factory = sessionmaker(bind=get_engine(db_path), expire_on_commit=False)
    return factory()


def init_db(db_path: Optional[Union[str, Path]] = None, drop: bool = False) -> Engine:
    """
    Create the lexicon tables.

    Args:
        db_path: Path to the SQLite file. Defaults to settings.DB_PATH.
        drop: Drop existing tables first.
    """
    engine = get_engine(db_path)
    if drop:
        Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    return engine


def store_lexicon(session: Session, lexicon: Lexicon) -> Tuple[int, int]:
    """
    Replace the stored lexicon with the given one.

    Returns:
        (root count, affix count) written.
    """
    session.execute(delete(RootRecord))
    session.execute(delete(AffixRecord))

    session.add_all(RootRecord.from_entry(r) for r in lexicon.roots)
    session.add_all(AffixRecord.from_entry(a) for a in lexicon.affixes)
    session.commit()

    counts = len(lexicon.roots), len(lexicon.affixes)
    logger.info("Stored %d roots and %d affixes", *counts)
    return counts


def load_lexicon(session: Session) -> Lexicon:
    """Read the whole stored lexicon into memory."""
    roots = [r.to_entry() for r in session.execute(select(RootRecord)).scalars()]
    affixes = [a.to_entry() for a in session.execute(select(AffixRecord)).scalars()]

    logger.info("Loaded %d roots and %d affixes from the database", len(roots), len(affixes))
    return Lexicon(roots, affixes)
