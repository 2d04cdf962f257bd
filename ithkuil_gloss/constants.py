"""
Phonological tables for ithkuil_gloss.

Static, read-only data used by the category resolvers: the vowel-form
table, consonant sets for the slot grammar, and the cluster substitution
tables used to undo gemination, glottalization and Ca allomorphy.
"""

from typing import Dict, FrozenSet, List, Tuple

# ============================================================================
# Vowel Forms
# ============================================================================

# 8 series x 9 forms. Series 5-8 are the glottal-stop counterparts of
# series 1-4. Entries with "/" list interchangeable spellings, the first
# being canonical.
VOWEL_FORMS: Tuple[str, ...] = (
    # Series 1
    "a", "ä", "e", "ï", "i", "ö", "o", "ü", "u",
    # Series 2
    "ai", "au", "ei", "eu", "ëi", "ou", "oi", "iu", "ui",
    # Series 3
    "ia/uä", "ie/uë", "io/üä", "iö/üë", "eë", "uö/öë", "uo/öä", "ue/ië", "ua/iä",
    # Series 4
    "ao", "aö", "eo", "eö", "oë", "oe", "öe", "öa", "oa",
    # Series 5
    "a'a", "ä'ä", "e'e", "ï'ï", "i'i", "ö'ö", "o'o", "ü'ü", "u'u",
    # Series 6
    "a'i", "a'u", "e'i", "e'u", "ë'i", "o'u", "o'i", "i'u", "u'i",
    # Series 7
    "i'a/u'ä", "i'e/u'ë", "i'o/ü'ä", "i'ö/ü'ë", "e'ë", "u'ö/ö'ë", "u'o/ö'ä", "u'e/i'ë", "u'a/i'ä",
    # Series 8
    "a'o", "a'ö", "e'o", "e'ö", "o'ë", "o'e", "ö'e", "ö'a", "o'a",
)

SERIES_COUNT = 8
FORM_COUNT = 9

# Irregular "long" forms standing for form 0 (degree 0) of a series
ZERO_SERIES_FORMS: Dict[str, int] = {
    "üa": 1,
    "üe": 2,
    "üo": 3,
    "üö": 4,
}

# Zero-degree affix vowels only reach types 1-3; the fourth form is
# reserved for Ca stacking
CA_STACKING_VOWEL = "üö"

# ============================================================================
# Consonant Sets
# ============================================================================

# Slot I: concatenation and shortcut markers
CC_CONSONANTS: FrozenSet[str] = frozenset({"w", "y", "h", "hl", "hm", "hw", "hr", "hn"})

# Slot VIII: Cn, pattern 1 and pattern 2
CN_PATTERN_ONE: FrozenSet[str] = frozenset({"h", "hl", "hr", "hm", "hn", "hň"})
CN_PATTERN_TWO: FrozenSet[str] = frozenset({"w", "y", "hw", "hlw", "hly", "hnw", "hny"})
CN_CONSONANTS: FrozenSet[str] = CN_PATTERN_ONE | CN_PATTERN_TWO

# Scope consonant of multiple affix adjuncts. Only h and hw occur without
# a glottal stop; all four occur after one.
CZ_CONSONANTS: FrozenSet[str] = frozenset({"h", "hw", "w", "y"})
CZ_PLAIN_CONSONANTS: FrozenSet[str] = frozenset({"h", "hw"})

REFERENTIAL_GLIDES: FrozenSet[str] = frozenset({"w", "y"})

# Suppletive adjunct type consonants
SUPPLETIVE_CONSONANTS: FrozenSet[str] = frozenset({"hl", "hm", "hn", "hň"})

MOOD_CASE_SCOPE_CONSONANT = "hr"

# Sentence-start prefix
SENTENCE_PREFIX = "ç"

# Vv forms taking a Cs root or a personal-reference root
CS_ROOT_VV: FrozenSet[str] = frozenset({"ëi", "eë", "ëu", "öë"})
REFERENCE_ROOT_VV: FrozenSet[str] = frozenset({"eä", "öä"})
SPECIAL_VV: FrozenSet[str] = CS_ROOT_VV | REFERENCE_ROOT_VV

# Affix consonants carrying a case instead of a degree
CASE_AFFIXES: FrozenSet[str] = frozenset({
    "sw", "zw", "šw", "žw", "lw",
    "sy", "zy", "šy", "žy", "ly",
})

# ============================================================================
# Consonant Classes
# ============================================================================

STOPS = frozenset("ptkbdg")
FRICATIVES = frozenset("fţsšçxhvḑzž")
AFFRICATES = frozenset("cčjẓ")
NASALS = frozenset("mnň")
LIQUIDS = frozenset("lr")

# ============================================================================
# Cluster Substitutions
# ============================================================================

# Surface Ca allomorph -> underlying cluster (regex, replacement)
CA_SUBSTITUTIONS: List[Tuple[str, str]] = [
    ("vw", "fv"),
    ("ḑy", "ţy"),
]

# Irregular geminates and their plain counterparts
UNGEMINATE_MAP: Dict[str, str] = {
    "bd": "pt", "bg": "pk", "gd": "kt", "gb": "kp", "dg": "tk", "db": "tp",
    "bzm": "pm", "bzn": "pn", "gzm": "km", "gzn": "kn", "ẓm": "tm", "ẓn": "tn",
    "bžm": "bm", "bžn": "bn", "gžm": "gm", "gžn": "gn", "jm": "dm", "jn": "dn",
}

# Glottalized clusters whose plain form is a stop rather than a nasal
UNGLOTTAL_MAP: Dict[str, str] = {
    "nnw": "tw", "mmw": "pw", "ňňw": "kw",
    "nny": "ty", "mmy": "py", "ňňy": "ky",
}

# ============================================================================
# Output Separators
# ============================================================================

SLOT_SEPARATOR = "-"
CATEGORY_SEPARATOR = "/"
CONCATENATION_SEPARATOR = "—"
