"""
Phonological transforms for ithkuil_gloss.

Vowel-form indexing over the series/form table, and the two families of
consonant-cluster transforms (glottalization and gemination) that must be
undone before a cluster can be looked up.

The ``un_*`` transforms are only meaningful on clusters for which the
matching ``is_*`` predicate holds. Callers check first.

Both transforms are defined over well-formed clusters: the geminated or
glottalized form of a cluster that is itself plain. A plain cluster that
already reads as geminate or glottal ("tt" is MSS/ASO) has no transformed
form that can be told apart, so strings like "'tt" or "jč" un-transform to
clusters that still match the predicate.
"""

from typing import Tuple, Optional

from ithkuil_gloss.characters import GLOTTAL_STOP, is_vowel
from ithkuil_gloss.constants import (
    VOWEL_FORMS, SERIES_COUNT, FORM_COUNT,
    STOPS, FRICATIVES, AFFRICATES, NASALS, LIQUIDS,
    UNGEMINATE_MAP, UNGLOTTAL_MAP,
)


# ============================================================================
# Vowel Forms
# ============================================================================

def is_same_vowel(vowel: str, entry: str) -> bool:
    """Check a vowel against a table entry, honoring "/" alternatives."""
    return vowel in entry.split("/")


def series_and_form(vowel: str) -> Tuple[int, int]:
    """
    Get the (series, form) of a vowel.

    Args:
        vowel: Stress-free vowel group.

    Returns:
        (series, form) with series in 1..8 and form in 1..9, or (-1, -1)
        if the vowel is not in the table.

    Example:
        >>> series_and_form("ai")
        (2, 1)
        >>> series_and_form("uä")
        (3, 1)
    """
    for index, entry in enumerate(VOWEL_FORMS):
        if is_same_vowel(vowel, entry):
            return index // FORM_COUNT + 1, index % FORM_COUNT + 1
    return -1, -1


def by_series_and_form(series: int, form: int) -> Optional[str]:
    """Canonical spelling of a (series, form) pair, or None if out of range."""
    if not (1 <= series <= SERIES_COUNT and 1 <= form <= FORM_COUNT):
        return None
    return VOWEL_FORMS[FORM_COUNT * (series - 1) + (form - 1)].split("/")[0]


def is_glottal_vowel(vowel: str) -> bool:
    return GLOTTAL_STOP in vowel


def glottalize_vowel(vowel: str) -> str:
    """
    Insert a glottal stop into a vowel form.

    "a" becomes "a'a", "ai" becomes "a'i". Longer forms are returned as-is.
    """
    if len(vowel) == 1:
        return f"{vowel}{GLOTTAL_STOP}{vowel}"
    if len(vowel) == 2:
        return f"{vowel[0]}{GLOTTAL_STOP}{vowel[1]}"
    return vowel


def unglottalize_vowel(vowel: str) -> str:
    """
    Remove the glottal stop from a vowel form.

    "a'a" becomes "a", "a'i" and "ai'" become "ai".
    """
    plain = vowel.replace(GLOTTAL_STOP, "")
    if len(plain) == 2 and plain[0] == plain[1]:
        return plain[0]
    return plain


def split_glottal_vowel(vowel: str) -> Tuple[str, bool]:
    """Return the plain vowel and whether a glottal stop was removed."""
    if not is_vowel(vowel) or not is_glottal_vowel(vowel):
        return vowel, False
    return unglottalize_vowel(vowel), True


# ============================================================================
# Glottalized Clusters
# ============================================================================

def is_glottal_ca(cluster: str) -> bool:
    """
    Check if a consonant cluster is glottalized.

    A cluster is glottal when it starts with a glottal stop, is a doubled
    stop or affricate, is p/t/k followed by a doubled fricative, or starts
    with a doubled liquid, nasal, fricative or affricate.
    """
    if cluster.startswith(GLOTTAL_STOP):
        return True
    if len(cluster) == 2 and cluster[0] == cluster[1] and (
            cluster[0] in STOPS or cluster[0] in AFFRICATES):
        return True
    if len(cluster) > 2 and cluster[1] == cluster[2] and (
            cluster[0] in "ptk" and cluster[1] in FRICATIVES):
        return True
    if len(cluster) > 2 and cluster[0] == cluster[1] and (
            cluster[0] in LIQUIDS | NASALS | FRICATIVES | AFFRICATES):
        return True
    return False


def un_glottal_ca(cluster: str) -> str:
    """
    Plain form of a glottalized cluster.

    Example:
        >>> un_glottal_ca("'h")
        'h'
        >>> un_glottal_ca("nnw")
        'tw'
    """
    if cluster.startswith(GLOTTAL_STOP):
        return cluster[1:]
    if len(cluster) == 2 and cluster[0] == cluster[1] and (
            cluster[0] in STOPS or cluster[0] in AFFRICATES):
        return cluster[1:]
    if len(cluster) > 2 and cluster[1] == cluster[2] and (
            cluster[0] in "ptk" and cluster[1] in FRICATIVES):
        return cluster[0] + cluster[2:]
    if cluster in UNGLOTTAL_MAP:
        return UNGLOTTAL_MAP[cluster]
    if len(cluster) > 2 and cluster[0] == cluster[1] and (
            cluster[0] in LIQUIDS | NASALS | FRICATIVES | AFFRICATES):
        return cluster[1:]
    return cluster


# ============================================================================
# Geminated Clusters
# ============================================================================

def _has_repeated_letter(cluster: str) -> bool:
    return any(a == b for a, b in zip(cluster, cluster[1:]))


def is_geminate_ca(cluster: str) -> bool:
    """Check if a Ca cluster is geminated (marks filled slot V affixes)."""
    if _has_repeated_letter(cluster):
        return True
    if len(cluster) > 1 and cluster[0] in "ẓj":
        return True
    return cluster in UNGEMINATE_MAP


def un_geminate_ca(cluster: str) -> str:
    """
    Plain form of a geminated Ca cluster.

    Irregular pairs come from a fixed table, a leading ẓ or j stands for
    c or č, and any other run of a repeated letter is collapsed.

    Example:
        >>> un_geminate_ca("mmtw")
        'mtw'
        >>> un_geminate_ca("jn")
        'dn'
    """
    if cluster in UNGEMINATE_MAP:
        return UNGEMINATE_MAP[cluster]
    if len(cluster) > 1 and cluster[0] == "ẓ":
        return "c" + cluster[1:]
    if len(cluster) > 1 and cluster[0] == "j":
        return "č" + cluster[1:]
    if _has_repeated_letter(cluster):
        return "".join(
            letter for letter, following in zip(cluster, cluster[1:] + " ")
            if letter != following
        )
    return cluster
