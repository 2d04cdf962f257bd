"""
Stress analysis for ithkuil_gloss.

Stress is read from the syllabic nuclei of a word's vowel groups, counted
from the end of the word. Penultimate stress is the default and must not be
marked.
"""

from enum import Enum
from typing import List, Optional, Sequence

from ithkuil_gloss.characters import (
    DIPHTHONGS, GLOTTAL_STOP, clear_stress, is_stressed, is_vowel,
)


class Stress(Enum):
    """Stress placement of a word."""
    ULTIMATE = "ultimate"
    PENULTIMATE = "penultimate"
    ANTEPENULTIMATE = "antepenultimate"
    MONOSYLLABIC = "monosyllabic"

    # Malformed stress
    MARKED_DEFAULT = "marked default"
    DOUBLE_MARKED = "double-marked"
    INVALID_PLACE = "invalid place"

    @property
    def is_valid(self) -> bool:
        return self not in (
            Stress.MARKED_DEFAULT, Stress.DOUBLE_MARKED, Stress.INVALID_PLACE,
        )


# Position counted from the end of the word -> stress
_POSITION_STRESS = {
    0: Stress.ULTIMATE,
    1: Stress.MARKED_DEFAULT,
    2: Stress.ANTEPENULTIMATE,
}


def has_stress(nucleus: str) -> Optional[bool]:
    """
    Check whether a nucleus carries a stress mark.

    Returns None when the mark sits on the second letter of a diphthong,
    which is never a valid place for it.
    """
    if len(nucleus) > 1 and is_stressed(nucleus[1]):
        return None
    return is_stressed(nucleus[0])


def syllabic_nuclei(groups: Sequence[str]) -> List[str]:
    """Extract the syllabic nuclei of a word, in order."""
    nuclei = []
    for group in groups:
        if not is_vowel(group):
            continue
        group = group.rstrip(GLOTTAL_STOP)
        if len(group) == 1 or clear_stress(group) in DIPHTHONGS:
            nuclei.append(group)
        else:
            nuclei.extend(c for c in group if c != GLOTTAL_STOP)
    return nuclei


def find_stress(groups: Sequence[str]) -> Stress:
    """
    Determine the stress of a word from its stress-marked groups.

    Args:
        groups: Groups of the word, still carrying stress diacritics.

    Returns:
        The stress placement, or one of the three malformed placements.

    Example:
        >>> find_stress(["a", "l", "á"])
        <Stress.ULTIMATE: 'ultimate'>
    """
    nuclei = syllabic_nuclei(groups)

    stresses = []
    for nucleus in reversed(nuclei):
        stressed = has_stress(nucleus)
        if stressed is None:
            return Stress.INVALID_PLACE
        stresses.append(stressed)

    count = sum(stresses)
    if count > 1:
        return Stress.DOUBLE_MARKED

    if len(nuclei) == 1:
        return Stress.MONOSYLLABIC if count == 0 else Stress.MARKED_DEFAULT

    if count == 0:
        return Stress.PENULTIMATE

    return _POSITION_STRESS.get(stresses.index(True), Stress.INVALID_PLACE)


def stress_position(stress: Stress) -> int:
    """
    Numeric position of a valid stress, counted from the end of the word.

    Monosyllabic words give -1.
    """
    positions = {
        Stress.MONOSYLLABIC: -1,
        Stress.ULTIMATE: 0,
        Stress.PENULTIMATE: 1,
        Stress.ANTEPENULTIMATE: 2,
    }
    if stress not in positions:
        raise ValueError(f"No position for malformed stress: {stress.value}")
    return positions[stress]
