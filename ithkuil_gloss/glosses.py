"""
Gloss values for ithkuil_gloss.

Everything a decoded word is made of renders itself through the
``Glossable`` interface. A ``Slot`` groups values sharing one position of a
word, and a ``Gloss`` is the complete, renderable analysis. Decoding never
raises: a failed decode produces an ``Error`` instead of a ``Gloss``.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from ithkuil_gloss.constants import CATEGORY_SEPARATOR, SLOT_SEPARATOR


class Glossable:
    """A value that can be rendered at a given precision."""

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        """
        Render the value.

        Args:
            precision: 0 for bare abbreviations, 1 for abbreviations with
                dictionary descriptions, 2 or more for full names.
            ignore_default: Render default values as the empty string.
        """
        raise NotImplementedError


class GlossString(Glossable):
    """Free-text annotation with an optional short form."""

    def __init__(self, full: str, abbreviation: Optional[str] = None,
                 ignorable: bool = False):
        self.full = full
        self.abbreviation = abbreviation if abbreviation is not None else full
        self.ignorable = ignorable

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        if ignore_default and self.ignorable:
            return ""
        return self.full if precision >= 2 else self.abbreviation

    def __eq__(self, other) -> bool:
        return (isinstance(other, GlossString)
                and (self.full, self.abbreviation) == (other.full, other.abbreviation))

    def __hash__(self) -> int:
        return hash((self.full, self.abbreviation))

    def __repr__(self) -> str:
        return f"GlossString({self.full!r}, {self.abbreviation!r})"


class Slot(Glossable):
    """
    Values occupying a single slot, rendered joined by "/".

    None members are dropped, so resolvers can pass optional values
    straight through.
    """

    separator = CATEGORY_SEPARATOR

    def __init__(self, *values: Optional[Glossable]):
        self.values = tuple(v for v in values if v is not None)

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        rendered = (v.to_string(precision, ignore_default) for v in self.values)
        return self.separator.join(r for r in rendered if r)

    def __iter__(self) -> Iterator[Glossable]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Glossable:
        return self.values[index]

    def __contains__(self, value) -> bool:
        return value in self.values

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.values!r}"


class Gloss(Slot):
    """
    A decoded word: slots rendered joined by "-".

    A gloss remembers the word type and stress it was decoded with, and the
    precision and default policy ``str()`` renders it at.
    """

    separator = SLOT_SEPARATOR

    def __init__(self, *slots: Optional[Glossable], word_type=None, stress=None,
                 ignorable: bool = True, separator: Optional[str] = None,
                 precision: int = 1, ignore_default: bool = True):
        super().__init__(*slots)
        self.word_type = word_type
        self.stress = stress
        self.ignorable = ignorable
        if separator is not None:
            self.separator = separator
        self.precision = precision
        self.ignore_default = ignore_default

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        return super().to_string(precision, ignore_default and self.ignorable)

    def replace(self, **changes) -> "Gloss":
        """Copy of this gloss with some of its keyword settings changed."""
        settings = dict(
            word_type=self.word_type,
            stress=self.stress,
            ignorable=self.ignorable,
            separator=self.separator,
            precision=self.precision,
            ignore_default=self.ignore_default,
        )
        settings.update(changes)
        return Gloss(*self.values, **settings)

    def rendered_with(self, precision: int, ignore_default: bool) -> "Gloss":
        """Copy of this gloss whose ``str()`` uses the given settings."""
        return self.replace(precision=precision, ignore_default=ignore_default)

    def __str__(self) -> str:
        return self.to_string(self.precision, self.ignore_default)


@dataclass(frozen=True)
class Error:
    """A failed decode."""
    message: str

    def __str__(self) -> str:
        return self.message


GlossOutcome = Union[Gloss, Error]
