"""
SQLAlchemy models for the lexicon store.

One row per root and one row per affix, keyed by their consonant form.
"""

from typing import List

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ithkuil_gloss.lexicon import AffixEntry, RootEntry


class Base(DeclarativeBase):
    pass


class RootRecord(Base):
    """A root (Cr) with its general and per-stem meanings."""
    __tablename__ = "root"

    cr: Mapped[str] = mapped_column(String(16), primary_key=True)
    general: Mapped[str] = mapped_column(Text, default="")
    stem1: Mapped[str] = mapped_column(Text, default="")
    stem2: Mapped[str] = mapped_column(Text, default="")
    stem3: Mapped[str] = mapped_column(Text, default="")

    @classmethod
    def from_entry(cls, entry: RootEntry) -> "RootRecord":
        descriptions = list(entry.descriptions) + [""] * 4
        return cls(
            cr=entry.cr,
            general=descriptions[0],
            stem1=descriptions[1],
            stem2=descriptions[2],
            stem3=descriptions[3],
        )

    def to_entry(self) -> RootEntry:
        return RootEntry(self.cr, [self.general, self.stem1, self.stem2, self.stem3])

    def __repr__(self) -> str:
        return f"<RootRecord {self.cr}: {self.general}>"


class AffixRecord(Base):
    """An affix (Cs) with its abbreviation and nine degree descriptions."""
    __tablename__ = "affix"

    cs: Mapped[str] = mapped_column(String(16), primary_key=True)
    abbreviation: Mapped[str] = mapped_column(String(16))
    descriptions: Mapped[List[str]] = mapped_column(JSON, default=list)

    @classmethod
    def from_entry(cls, entry: AffixEntry) -> "AffixRecord":
        return cls(
            cs=entry.cs,
            abbreviation=entry.abbreviation,
            descriptions=list(entry.descriptions),
        )

    def to_entry(self) -> AffixEntry:
        return AffixEntry(self.cs, self.abbreviation, tuple(self.descriptions or ()))

    def __repr__(self) -> str:
        return f"<AffixRecord {self.cs}: {self.abbreviation}>"
