"""
Character handling for ithkuil_gloss.

Provides the Ithkuil IV character inventory, orthographic normalization
(allographs, stress marks), group classification and group splitting.
"""

import re
import unicodedata
from typing import List, Tuple

# ============================================================================
# Character Inventory
# ============================================================================

CONSONANTS = "bcčçdḑfghjklļmnňprřsštţvwxyzžẓ"

UNSTRESSED_VOWELS = "aäeëiïoöuü"
STRESSED_VOWELS = "áâéêíîóôúû"
VOWELS = UNSTRESSED_VOWELS + STRESSED_VOWELS

GLOTTAL_STOP = "'"
VOWELS_AND_GLOTTAL_STOP = VOWELS + GLOTTAL_STOP

ITHKUIL_CHARS = set(CONSONANTS + VOWELS_AND_GLOTTAL_STOP)

# Characters pointing at the older Ithkuil III romanization
ITHKUIL_III_HINT_CHARS = "qˇ^ʰ"

# Punctuation allowed around a word
PUNCTUATION = ".,?!:;⫶`\"*_"

# ============================================================================
# Orthographic Substitutions
# ============================================================================

# Variant spellings mapped onto the canonical letters (regex, replacement)
ALLOGRAPHS: List[Tuple[str, str]] = [
    ("[’ʼ‘]", "'"),
    ("ḍ", "ḑ"),
    ("ṭ", "ţ"),
    ("[ŗṛ]", "ř"),
    ("ł", "ļ"),
    ("ż", "ẓ"),
    ("[ṇṅ]", "ň"),
    ("ì", "i"),
    ("ù", "u"),
]

# Stressed vowel -> unstressed vowel
UNSTRESSED_FORMS: List[Tuple[str, str]] = [
    ("á", "a"), ("â", "ä"),
    ("é", "e"), ("ê", "ë"),
    ("í", "i"), ("î", "ï"),
    ("ó", "o"), ("ô", "ö"),
    ("ú", "u"), ("û", "ü"),
]

# Two-letter vowel groups that form a single syllabic nucleus
DIPHTHONGS = {
    "ai", "äi", "ei", "ëi", "oi", "öi", "ui",
    "au", "eu", "ëu", "ou", "iu",
}

_GROUP_PATTERN = re.compile(
    f"[{re.escape(VOWELS_AND_GLOTTAL_STOP)}]+|[{CONSONANTS}]+|."
)


def substitute_all(text: str, substitutions: List[Tuple[str, str]]) -> str:
    """Apply regex substitutions in order."""
    for pattern, replacement in substitutions:
        text = re.sub(pattern, replacement, text)
    return text


def clear_stress(text: str) -> str:
    """Replace stressed vowels with their unstressed forms."""
    return substitute_all(text, UNSTRESSED_FORMS)


def default_form_with_stress(text: str) -> str:
    """
    Canonical spelling of a word, keeping stress marks.

    Lowercases, composes combining diacritics and applies the allographs.
    """
    text = unicodedata.normalize("NFC", text.lower())
    return substitute_all(text, ALLOGRAPHS)


def default_form(text: str) -> str:
    """Canonical spelling of a word with stress marks removed."""
    return clear_stress(default_form_with_stress(text))


# ============================================================================
# Group Classification
# ============================================================================

def is_vowel(group: str) -> bool:
    """
    Check if a group has the shape of a vowel form.

    Matches "a", "ai", "a'", "a'i" and "ai'". Does not guarantee that the
    group is a valid vowel form.
    """
    if len(group) == 1:
        return group in VOWELS
    if len(group) == 2:
        return group[0] in VOWELS and group[1] in VOWELS_AND_GLOTTAL_STOP
    if len(group) == 3:
        return (
            all(c in VOWELS_AND_GLOTTAL_STOP for c in group)
            and group[0] != GLOTTAL_STOP
            and group.count(GLOTTAL_STOP) == 1
        )
    return False


def is_consonant(group: str) -> bool:
    """Check if a group consists only of consonants."""
    return bool(group) and all(c in CONSONANTS for c in group)


def is_stressed(char: str) -> bool:
    return char in STRESSED_VOWELS


def split_groups(word: str) -> List[str]:
    """
    Split a canonical word into alternating consonant and vowel groups.

    Each group is a maximal run of consonants or of vowels and glottal
    stops. Characters outside both classes end up as one-character groups,
    which the caller rejects.

    Example:
        >>> split_groups("adnilo'o")
        ['a', 'dn', 'i', 'l', "o'o"]
    """
    return _GROUP_PATTERN.findall(word)


def foreign_characters(word: str) -> str:
    """Return the characters of a canonical word outside the inventory."""
    return "".join(c for c in word if c not in ITHKUIL_CHARS)


def codepoint_string(char: str) -> str:
    """Describe a character with its code point, e.g. '"q" (U+0071)'."""
    return f'"{char}" (U+{ord(char):04X})'
