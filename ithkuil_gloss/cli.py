"""
Command line interface for ithkuil_gloss.

Usage:
    python -m ithkuil_gloss.cli "khe"                   # gloss one word
    python -m ithkuil_gloss.cli -p 2 khe "adnilo'o"    # full names
    python -m ithkuil_gloss.cli -j khe ëha              # JSON output
    python -m ithkuil_gloss.cli init-db --roots roots.tsv --affixes affixes.tsv
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ithkuil_gloss import __version__, gloss_many, settings
from ithkuil_gloss.lexicon import Lexicon, LexiconError, load_lexicon_tsv

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose or settings.DEBUG else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def init_db_command(args) -> int:
    """Build the SQLite lexicon store from the TSV sheets."""
    from ithkuil_gloss.db.connection import get_session, init_db, store_lexicon

    roots_path = Path(args.roots) if args.roots else settings.ROOTS_PATH
    affixes_path = Path(args.affixes) if args.affixes else settings.AFFIXES_PATH

    for path in (roots_path, affixes_path):
        if not path.exists():
            print(f"Error: lexicon file not found: {path}", file=sys.stderr)
            return 1

    db_path = Path(args.output) if args.output else settings.DB_PATH

    # Confirm overwrite
    if db_path.exists() and not args.force:
        print(f"Database already exists: {db_path}")
        response = input("Overwrite? [y/N]: ").strip().lower()
        if response != 'y':
            print("Aborted.")
            return 1

    db_path.parent.mkdir(parents=True, exist_ok=True)

    print("Initializing database...")
    print(f"  Roots:   {roots_path}")
    print(f"  Affixes: {affixes_path}")
    print(f"  Output:  {db_path}")
    print()

    t0 = time.perf_counter()

    try:
        lexicon = load_lexicon_tsv(roots_path, affixes_path)
        init_db(db_path, drop=True)
        session = get_session(db_path)
        try:
            roots, affixes = store_lexicon(session, lexicon)
        finally:
            session.close()
    except (LexiconError, SQLAlchemyError) as e:
        print(f"Error initializing database: {e}", file=sys.stderr)
        return 1

    elapsed = time.perf_counter() - t0

    print("Database initialized successfully!")
    print(f"   Roots:   {roots:,}")
    print(f"   Affixes: {affixes:,}")
    print(f"   Time:    {elapsed:.1f}s")
    print()
    print("Set ITHKUIL_GLOSS_DB_PATH to use this database:")
    print(f'  export ITHKUIL_GLOSS_DB_PATH="{db_path.absolute()}"')

    return 0


def main_init_db(args: list) -> int:
    """CLI entry point for init-db subcommand."""
    parser = argparse.ArgumentParser(
        description='Build the ithkuil_gloss lexicon database from TSV sheets',
        prog='ithkuil-gloss init-db',
    )

    parser.add_argument(
        '--roots', '-r',
        type=str,
        metavar='PATH',
        help='Root sheet TSV (default: data/roots.tsv)',
    )

    parser.add_argument(
        '--affixes', '-a',
        type=str,
        metavar='PATH',
        help='Affix sheet TSV (default: data/affixes.tsv)',
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        metavar='PATH',
        help='Output database path (default: data/lexicon.db)',
    )

    parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing database without prompting',
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug output',
    )

    parsed = parser.parse_args(args)
    setup_logging(parsed.verbose)
    return init_db_command(parsed)


def load_cli_lexicon(parsed) -> Optional[Lexicon]:
    """Lexicon selected by the command line options, if any were given."""
    if parsed.roots or parsed.affixes:
        return load_lexicon_tsv(parsed.roots, parsed.affixes)

    if parsed.database:
        from ithkuil_gloss.db.connection import get_session, load_lexicon
        session = get_session(parsed.database)
        try:
            return load_lexicon(session)
        finally:
            session.close()

    return None


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    # Check for subcommands
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'init-db':
        return main_init_db(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Command line interface for ithkuil_gloss (Ithkuil IV morphological decoder)',
        prog='ithkuil-gloss',
        epilog='Subcommands:\n  ithkuil-gloss init-db    Build the lexicon database from TSV sheets',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Ithkuil words to gloss',
    )

    parser.add_argument(
        '-p', '--precision',
        type=int,
        default=settings.DEFAULT_PRECISION,
        metavar='N',
        help='0: abbreviations only, 1: with meanings (default), 2: full names',
    )

    parser.add_argument(
        '--show-defaults',
        action='store_true',
        help='Show category values that are the default',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print results as JSON',
    )

    parser.add_argument(
        '-d', '--database',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to SQLite lexicon database',
    )

    parser.add_argument(
        '--roots',
        type=str,
        default=None,
        metavar='PATH',
        help='Root sheet TSV to use instead of the database',
    )

    parser.add_argument(
        '--affixes',
        type=str,
        default=None,
        metavar='PATH',
        help='Affix sheet TSV to use instead of the database',
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output',
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'ithkuil-gloss {__version__}')
        return 0

    if not parsed.words:
        parser.print_help()
        return 1

    setup_logging(parsed.verbose)

    if parsed.database and not Path(parsed.database).exists():
        print(f'Error: database not found: {parsed.database}', file=sys.stderr)
        return 1

    try:
        lexicon = load_cli_lexicon(parsed)
    except (LexiconError, SQLAlchemyError) as e:
        print(f'Error loading lexicon: {e}', file=sys.stderr)
        return 1

    batch = gloss_many(
        parsed.words,
        precision=parsed.precision,
        ignore_defaults=not parsed.show_defaults,
        lexicon=lexicon,
    )

    if parsed.json:
        print(batch.model_dump_json(indent=2))
    else:
        for result in batch.results:
            print(str(result))

    return 1 if batch.error_count else 0


if __name__ == '__main__':
    sys.exit(main())
