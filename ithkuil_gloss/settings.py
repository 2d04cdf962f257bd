"""
Settings and configuration for ithkuil_gloss.

Values are read once from the environment at import time.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Lexicon database - defaults to data/lexicon.db
DEFAULT_DB_PATH = DATA_DIR / "lexicon.db"

# Environment variable for custom database path
DB_PATH = Path(os.environ.get("ITHKUIL_GLOSS_DB_PATH", DEFAULT_DB_PATH))

# Tab-separated exports of the root and affix sheets
ROOTS_PATH = Path(os.environ.get("ITHKUIL_GLOSS_ROOTS", DATA_DIR / "roots.tsv"))
AFFIXES_PATH = Path(os.environ.get("ITHKUIL_GLOSS_AFFIXES", DATA_DIR / "affixes.tsv"))

# Debug mode
DEBUG = os.environ.get("ITHKUIL_GLOSS_DEBUG", "").lower() in ("1", "true", "yes")

# Rendering defaults
DEFAULT_PRECISION = 1
