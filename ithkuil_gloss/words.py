"""
Word formatting and classification for ithkuil_gloss.

``format_word`` turns raw input into a ``Word`` (its groups and stress), a
``ConcatenatedWords`` chain, or an ``Invalid`` explaining what is wrong with
it. ``word_type_of`` then picks the grammar a word is parsed with.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from ithkuil_gloss.characters import (
    GLOTTAL_STOP, ITHKUIL_III_HINT_CHARS, PUNCTUATION,
    clear_stress, codepoint_string, default_form_with_stress,
    foreign_characters, is_consonant, is_vowel, split_groups,
)
from ithkuil_gloss.constants import (
    CN_CONSONANTS, CZ_CONSONANTS, CZ_PLAIN_CONSONANTS,
    MOOD_CASE_SCOPE_CONSONANT, REFERENTIAL_GLIDES, SENTENCE_PREFIX,
    SUPPLETIVE_CONSONANTS,
)
from ithkuil_gloss.phonology import is_glottal_ca, un_glottal_ca
from ithkuil_gloss.resolvers import REFERENTS
from ithkuil_gloss.stress import Stress, find_stress

logger = logging.getLogger(__name__)

_PUNCTUATION_PATTERN = re.compile(
    f"([{re.escape(PUNCTUATION)}]*)(.*?)([{re.escape(PUNCTUATION)}]*)",
    re.DOTALL,
)


class WordType(Enum):
    """Grammar a word is parsed with."""
    FORMATIVE = "formative"
    REFERENTIAL = "referential"
    AFFIXUAL_ADJUNCT = "affixual adjunct"
    MULTIPLE_AFFIX_ADJUNCT = "multiple affix adjunct"
    MODULAR_ADJUNCT = "modular adjunct"
    MOOD_CASE_SCOPE_ADJUNCT = "mood/case-scope adjunct"
    SUPPLETIVE_ADJUNCT = "suppletive adjunct"
    BIAS_ADJUNCT = "bias adjunct"


# ============================================================================
# Formatting Outcomes
# ============================================================================

@dataclass(frozen=True)
class Invalid:
    """Input that could not be formatted into a word."""
    word: str
    message: str

    def __str__(self) -> str:
        return self.word


@dataclass(frozen=True)
class Word:
    """
    A well-formed word: its groups, still carrying stress marks, and stress.

    The stress-free groups are always derived from the stressed ones.
    Indexing, iteration and ``len()`` work on the stress-free groups.
    """
    stressed_groups: Tuple[str, ...]
    stress: Stress
    prefix_punctuation: str = ""
    postfix_punctuation: str = ""

    @property
    def groups(self) -> List[str]:
        return [clear_stress(g) for g in self.stressed_groups]

    def __len__(self) -> int:
        return len(self.stressed_groups)

    def __getitem__(self, index):
        return self.groups[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __str__(self) -> str:
        return self.prefix_punctuation + "".join(self.stressed_groups) + self.postfix_punctuation

    def strip_sentence_prefix(self) -> Tuple["Word", bool]:
        """
        Remove the sentence-start prefix, if any.

        Returns:
            (word without the prefix, whether a prefix was found)
        """
        groups = self.groups
        stressed = list(self.stressed_groups)

        if len(groups) >= 3 and groups[0] == SENTENCE_PREFIX and groups[1] == "ë":
            stressed = stressed[2:]
        elif len(groups) >= 2 and groups[0] == SENTENCE_PREFIX and is_vowel(groups[1]):
            stressed = stressed[1:]
        elif groups and groups[0] == "çw":
            stressed = ["w"] + stressed[1:]
        elif groups and groups[0] == "çç":
            stressed = ["y"] + stressed[1:]
        else:
            return self, False

        return Word(
            tuple(stressed), self.stress,
            self.prefix_punctuation, self.postfix_punctuation,
        ), True

    @property
    def word_type(self) -> Optional[WordType]:
        return word_type_of(self.strip_sentence_prefix()[0].groups)


@dataclass(frozen=True)
class ConcatenatedWords:
    """Formatives joined by hyphens into a concatenation chain."""
    words: Tuple[Word, ...]
    prefix_punctuation: str = ""
    postfix_punctuation: str = ""

    def __str__(self) -> str:
        return (self.prefix_punctuation
                + "-".join(str(w) for w in self.words)
                + self.postfix_punctuation)


FormattingOutcome = Union[Word, ConcatenatedWords, Invalid]


# ============================================================================
# Formatting
# ============================================================================

def format_word(full_word: str) -> FormattingOutcome:
    """
    Normalize, validate and segment a raw word.

    Args:
        full_word: The word as typed, possibly with surrounding punctuation
            or joined to others by hyphens.

    Returns:
        A Word, a ConcatenatedWords chain, or an Invalid with the reason.

    Example:
        >>> format_word("adnilo'o").groups
        ['a', 'dn', 'i', 'l', "o'o"]
    """
    prefix, word, postfix = _PUNCTUATION_PATTERN.fullmatch(full_word).groups()

    if not word:
        return Invalid(full_word, "Empty word")

    if any(c in PUNCTUATION for c in word):
        return Invalid(full_word, "Unexpected punctuation")

    if "-" in word:
        return _format_concatenated_words(word, prefix, postfix)

    clean = default_form_with_stress(word)

    if clean.endswith(GLOTTAL_STOP):
        return Invalid(word, "Word ends in glottal stop")

    foreign = foreign_characters(clean)
    if foreign:
        message = ", ".join(codepoint_string(c) for c in foreign)
        if any(c in ITHKUIL_III_HINT_CHARS for c in foreign):
            message += " You might be writing in Ithkuil III. Try \"!gloss\" instead."
        return Invalid(word, f"Non-ithkuil characters detected: {message}")

    stressed_groups = split_groups(clean)

    for group in stressed_groups:
        if is_consonant(group) == is_vowel(group):
            return Invalid(word, f"Unknown group: {group}")

    stress = find_stress(stressed_groups)

    if stress is Stress.INVALID_PLACE:
        return Invalid(word, "Unrecognized stress placement")
    if stress is Stress.MARKED_DEFAULT:
        return Invalid(word, "Marked default stress")
    if stress is Stress.DOUBLE_MARKED:
        return Invalid(word, "Double-marked stress")

    return Word(tuple(stressed_groups), stress, prefix, postfix)


def _format_concatenated_words(word: str, prefix: str, postfix: str) -> FormattingOutcome:
    words = []
    for outcome in format_all(word.split("-")):
        if isinstance(outcome, Invalid):
            return Invalid(word, f"{outcome.message} ({outcome})")
        if isinstance(outcome, ConcatenatedWords):
            return Invalid(word, f"Nested concatenation! ({outcome})")
        if outcome.word_type is not WordType.FORMATIVE:
            return Invalid(word, f"Non-formative concatenated: ({outcome})")
        words.append(outcome)

    return ConcatenatedWords(tuple(words), prefix, postfix)


def format_all(words: Sequence[str]) -> List[FormattingOutcome]:
    return [format_word(w) for w in words]


# ============================================================================
# Classification
# ============================================================================

def is_cz(vowel: str, consonant: str) -> bool:
    """
    Check if a consonant is the scope (Cz) of a multiple affix adjunct.

    A glottal stop closing the preceding vowel belongs to Cz.
    """
    cz = GLOTTAL_STOP + consonant if vowel.endswith(GLOTTAL_STOP) else consonant
    if is_glottal_ca(cz):
        return un_glottal_ca(cz) in CZ_CONSONANTS
    return cz in CZ_PLAIN_CONSONANTS


def _is_modular(groups: Sequence[str]) -> bool:
    body = groups[1:] if groups[0] in ("w", "y") else groups
    return (
        bool(body)
        and is_vowel(body[0])
        and is_vowel(body[-1])
        and all(is_vowel(g) or g in CN_CONSONANTS for g in body)
    )


def _is_referential(groups: Sequence[str]) -> bool:
    body = groups[1:] if groups[0] == "ë" else groups
    if len(body) == 2:
        return body[0] in REFERENTS and is_vowel(body[1])
    if len(body) == 5:
        return (
            body[0] in REFERENTS
            and body[2] in REFERENTIAL_GLIDES
            and body[4] in REFERENTS
        )
    return False


def word_type_of(groups: Sequence[str]) -> Optional[WordType]:
    """
    Classify a word by the shape of its stress-free groups.

    Returns None for an empty word.
    """
    if not groups:
        return None

    size = len(groups)

    if size == 1 and is_consonant(groups[0]):
        word_type = WordType.BIAS_ADJUNCT
    elif size == 2 and groups[0] == MOOD_CASE_SCOPE_CONSONANT:
        word_type = WordType.MOOD_CASE_SCOPE_ADJUNCT
    elif size == 2 and groups[0] in SUPPLETIVE_CONSONANTS:
        word_type = WordType.SUPPLETIVE_ADJUNCT
    elif 2 <= size <= 3 and is_consonant(groups[1]) \
            and groups[1] not in CN_CONSONANTS and groups[0] != "ë":
        word_type = WordType.AFFIXUAL_ADJUNCT
    elif (size >= 5 and is_consonant(groups[0]) and is_cz(groups[1], groups[2])) \
            or (size >= 6 and groups[0] == "ë" and is_cz(groups[2], groups[3])):
        word_type = WordType.MULTIPLE_AFFIX_ADJUNCT
    elif _is_modular(groups):
        word_type = WordType.MODULAR_ADJUNCT
    elif _is_referential(groups):
        word_type = WordType.REFERENTIAL
    else:
        word_type = WordType.FORMATIVE

    logger.debug("Classified %s as %s", "".join(groups), word_type.value)
    return word_type
