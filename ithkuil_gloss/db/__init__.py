"""SQLite store for the root and affix lexicon."""
