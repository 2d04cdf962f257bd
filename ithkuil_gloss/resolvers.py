"""
Category resolvers for ithkuil_gloss.

One resolver per grammatical subsystem. Each takes the consonant and/or
vowel groups of one slot and returns the values they spell, or None when
the groups spell nothing. The word parsers in ``parsing`` turn a None into
the matching error message.

Root and affix values keep the lexicon entry they were resolved against and
render it lazily, since their rendering depends on precision.
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ithkuil_gloss.categories import (
    Affiliation, Aspect, Bias, Case, CaseScope, Concatenation, Configuration,
    Context, Effect, EffectAndPerson, Essence, Expectation, Extension,
    Function, Illocution, Level, Mood, Perspective, Phase, Referent,
    Specification, Stem, Valence, Validation, Version,
)
from ithkuil_gloss.characters import default_form, substitute_all
from ithkuil_gloss.constants import (
    CA_STACKING_VOWEL, CA_SUBSTITUTIONS, CASE_AFFIXES, CN_PATTERN_ONE,
    CN_PATTERN_TWO, REFERENCE_ROOT_VV, ZERO_SERIES_FORMS,
)
from ithkuil_gloss.glosses import Error, Gloss, GlossOutcome, Glossable, GlossString, Slot
from ithkuil_gloss.lexicon import Lexicon
from ithkuil_gloss.phonology import glottalize_vowel, series_and_form


class Shortcut(Enum):
    """Cc shortcut: the formative has no Vr and no Ca slot."""
    W_SHORTCUT = "w"
    Y_SHORTCUT = "y"


TYPE_SUBSCRIPTS = {1: "₁", 2: "₂", 3: "₃"}


# ============================================================================
# Lookup Tables
# ============================================================================

CONCATENATION_CONSONANTS: Dict[str, Concatenation] = {
    "h": Concatenation.TYPE_ONE, "hl": Concatenation.TYPE_ONE, "hm": Concatenation.TYPE_ONE,
    "hw": Concatenation.TYPE_TWO, "hr": Concatenation.TYPE_TWO, "hn": Concatenation.TYPE_TWO,
}

SHORTCUT_CONSONANTS: Dict[str, Shortcut] = {
    "w": Shortcut.W_SHORTCUT, "hl": Shortcut.W_SHORTCUT, "hr": Shortcut.W_SHORTCUT,
    "y": Shortcut.Y_SHORTCUT, "hm": Shortcut.Y_SHORTCUT, "hn": Shortcut.Y_SHORTCUT,
}

# Ca spelled by a shortcut, by Vv series
SHORTCUT_CA: Dict[Shortcut, Tuple[str, ...]] = {
    Shortcut.W_SHORTCUT: ("l", "r", "v", "tļ"),
    Shortcut.Y_SHORTCUT: ("s", "ř", "z", "sř"),
}

# Affix implied by a Vv of series 2-4 in a non-shortcut formative
VV_SERIES_AFFIXES: Dict[int, Tuple[str, str]] = {
    2: ("ï", "r"),
    3: ("ï", "t"),
    4: ("i", "t"),
}

VV_STEMS = {
    1: Stem.STEM_ONE, 2: Stem.STEM_ONE,
    3: Stem.STEM_TWO, 4: Stem.STEM_TWO, 5: Stem.STEM_TWO,
    6: Stem.STEM_ZERO, 7: Stem.STEM_ZERO,
    8: Stem.STEM_THREE, 9: Stem.STEM_THREE,
}

SERIES_CONTEXTS = {
    1: Context.EXISTENTIAL,
    2: Context.FUNCTIONAL,
    3: Context.REPRESENTATIONAL,
    4: Context.AMALGAMATIVE,
}

SERIES_SPECIFICATIONS = {
    1: Specification.BASIC,
    2: Specification.CONTENTIAL,
    3: Specification.CONSTITUTIVE,
    4: Specification.OBJECTIVE,
}

VR_SPECIFICATIONS = {
    1: Specification.BASIC, 9: Specification.BASIC,
    2: Specification.CONTENTIAL, 8: Specification.CONTENTIAL,
    3: Specification.CONSTITUTIVE, 7: Specification.CONSTITUTIVE,
    4: Specification.OBJECTIVE, 5: Specification.OBJECTIVE, 6: Specification.OBJECTIVE,
}

# Special Vv: (version, function)
SPECIAL_VV: Dict[str, Tuple[Version, Optional[Function]]] = {
    "ëi": (Version.PROCESSUAL, Function.STATIVE),
    "eë": (Version.PROCESSUAL, Function.DYNAMIC),
    "ëu": (Version.COMPLETIVE, Function.STATIVE),
    "öë": (Version.COMPLETIVE, Function.DYNAMIC),
    "eä": (Version.PROCESSUAL, None),
    "öä": (Version.COMPLETIVE, None),
}

VN_FAMILIES = {1: Valence, 2: Phase, 3: EffectAndPerson, 4: Level}

# Cn -> position in Mood / CaseScope
CN_VALUES: Dict[str, int] = {
    "h": 1, "w": 1, "y": 1,
    "hl": 2, "hw": 2,
    "hr": 3, "hlw": 3,
    "hm": 4, "hly": 4,
    "hn": 5, "hnw": 5,
    "hň": 6, "hny": 6,
}

VALIDATIONS = {
    1: Validation.OBSERVATIONAL,
    2: Validation.RECOLLECTIVE,
    3: Validation.REPORTIVE,
    4: Validation.PURPORTIVE,
    6: Validation.IMAGINARY,
    7: Validation.CONVENTIONAL,
    8: Validation.INTUITIVE,
    9: Validation.INFERENTIAL,
}

EXPECTATIONS = {
    1: Expectation.COGNITIVE,
    2: Expectation.RESPONSIVE,
    3: Expectation.EXECUTIVE,
}

VH_SCOPES = {
    "a": GlossString("{scope over formative}", "{form.}"),
    "e": GlossString("{scope over case/mood}", "{mood}"),
    "i": GlossString("{scope over formative, but not adjacent adjuncts}", "{under adj.}"),
    "u": GlossString("{scope over formative, but not adjacent adjuncts}", "{under adj.}"),
    "o": GlossString("{scope over formative and adjacent adjuncts}", "{over adj.}"),
}


def _by_consonant(table) -> Dict[str, Glossable]:
    return {c: value for consonants, value in table for c in consonants}


REFERENTS: Dict[str, Glossable] = _by_consonant([
    (("l", "r", "ř"), Referent.MONADIC_SPEAKER),
    (("s", "š", "ž"), Referent.MONADIC_ADDRESSEE),
    (("n", "t", "d"), Referent.POLYADIC_ADDRESSEE),
    (("m", "p", "b"), Referent.MONADIC_ANIMATE_THIRD_PARTY),
    (("ň", "k", "g"), Referent.POLYADIC_ANIMATE_THIRD_PARTY),
    (("z", "ţ", "ḑ"), Referent.MONADIC_INANIMATE_THIRD_PARTY),
    (("ẓ", "ļ", "f", "v"), Referent.POLYADIC_INANIMATE_THIRD_PARTY),
    (("c", "č", "j"), Referent.MIXED_THIRD_PARTY),
    (("th", "ph", "kh"), Referent.OBVIATIVE),
    (("ll", "rr", "řř"), Referent.PROVISIONAL),
    (("ç", "x"), Perspective.NOMIC),
    (("w", "y"), Perspective.ABSTRACT),
])

# Consonants without an entry here resolve to a referent with no effect
EFFECTS: Dict[str, Effect] = _by_consonant([
    (("l", "s", "n", "m", "ň", "z", "ẓ", "ļ", "c", "th", "ll"), Effect.NEUTRAL),
    (("r", "š", "t", "p", "k", "ţ", "f", "č", "ph", "rr"), Effect.BENEFICIAL),
    (("ř", "ž", "d", "b", "g", "ḑ", "v", "j", "kh", "řř"), Effect.DETRIMENTAL),
])

AFFIXUAL_SCOPES = {
    "h": "{VDom}", "a": "{VDom}",
    "'h": "{VSub}", "u": "{VSub}",
    "'w": "{VIIDom}", "e": "{VIIDom}",
    "'y": "{VIISub}", "i": "{VIISub}",
    "hw": "{formative}", "o": "{formative}",
    "'hw": "{adjacent}", "ö": "{adjacent}",
}

MOOD_CASE_SCOPE_VOWELS: Dict[str, Glossable] = {
    "a": Mood.FACTUAL,
    "e": Mood.SUBJUNCTIVE,
    "i": Mood.ASSUMPTIVE,
    "ö": Mood.SPECULATIVE,
    "o": Mood.COUNTERFACTIVE,
    "u": Mood.HYPOTHETICAL,
    "ai": CaseScope.NATURAL,
    "ei": CaseScope.ANTECEDENT,
    "iu": CaseScope.SUBALTERN,
    "ëi": CaseScope.QUALIFIER,
    "oi": CaseScope.PRECEDENT,
    "ui": CaseScope.SUCCESSIVE,
}

SUPPLETIVE_TYPES = {
    "hl": GlossString("[carrier]", "[CAR]"),
    "hm": GlossString("[quotative]", "[QUO]"),
    "hn": GlossString("[naming]", "[NAM]"),
    "hň": GlossString("[phrasal]", "[PHR]"),
}

# Case-accessor affixes: (accessor prefix, long prefix, type)
CASE_AFFIX_FORMS = {
    "sw": ("acc:", "case accessor:", 1),
    "sy": ("acc:", "case accessor:", 1),
    "zw": ("acc:", "case accessor:", 2),
    "zy": ("acc:", "case accessor:", 2),
    "šw": ("ia:", "inverse accessor:", 1),
    "šy": ("ia:", "inverse accessor:", 1),
    "žw": ("ia:", "inverse accessor:", 2),
    "žy": ("ia:", "inverse accessor:", 2),
    "lw": ("", "case-stacking:", None),
    "ly": ("", "case-stacking:", None),
}


# ============================================================================
# Roots and Affixes
# ============================================================================

def affix_type_and_degree(vx: str) -> Tuple[int, int]:
    """
    (type, degree) spelled by an affix vowel.

    The irregular zero-series forms give degree 0. Unknown vowels give
    (-1, -1).
    """
    series, form = series_and_form(vx)
    if series != -1:
        return series, form
    if vx in ZERO_SERIES_FORMS:
        return ZERO_SERIES_FORMS[vx], 0
    return -1, -1


def _affix_string(cs: str, degree: int, lexicon: Lexicon, precision: int) -> str:
    entry = lexicon.affix(cs)
    if entry is None:
        return f"**{cs}**/{degree}"
    if precision == 0 or degree == 0:
        return f"{entry.abbreviation}/{degree}"
    description = entry.description(degree)
    if description is None:
        return f"(Unknown affix degree: {degree})"
    return f"'{description}'"


class Root(Glossable):
    """A formative root (Cr), glossed with its meaning in the word's stem."""

    def __init__(self, cr: str, stem: int, lexicon: Lexicon):
        self.cr = cr
        self.stem = stem
        self.entry = lexicon.root(cr)

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        if self.entry is None:
            return f"**{self.cr}**"
        return f"'{self.entry.description(self.stem)}'"


class CsRoot(Glossable):
    """An affix used as a root; its degree comes from Vr."""

    def __init__(self, cs: str, degree: int, lexicon: Lexicon):
        self.cs = cs
        self.degree = degree
        self.lexicon = lexicon

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        return _affix_string(self.cs, self.degree, self.lexicon, precision)


class Affix(Glossable):
    """
    An affix (Cs) with its vowel (Vx).

    Vx normally gives the degree and the type. Two families of Cs are
    special: case-accessor affixes, whose Vx spells a case, and any Cs
    carrying the Ca-stacking vowel, which is itself a Ca complex.

    Build affixes read from a word with ``parse_affix``, which rejects the
    vowels and stacked Ca complexes that spell nothing.
    """

    def __init__(self, vx: str, cs: str, lexicon: Lexicon, no_type: bool = False):
        self.vx = vx
        self.cs = cs
        self.lexicon = lexicon
        self.no_type = no_type

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        if self.vx == CA_STACKING_VOWEL:
            return self._ca_stacking_string(precision, ignore_default)

        if self.cs in CASE_AFFIXES:
            return self._case_affix_string(precision)

        affix_type, degree = affix_type_and_degree(self.vx)
        affix_string = _affix_string(self.cs, degree, self.lexicon, precision)
        if self.no_type:
            return affix_string
        return affix_string + TYPE_SUBSCRIPTS[affix_type]

    def _ca_stacking_string(self, precision: int, ignore_default: bool) -> str:
        rendered = parse_ca(self.cs).to_string(precision, ignore_default)
        if not rendered:
            rendered = Configuration.UNIPLEX.to_string(precision, ignore_default=False)
        return f"({rendered})"

    def _case_affix_string(self, precision: int) -> str:
        case = Case.by_vowel(_case_affix_vowel(self.vx, self.cs))
        prefix, long_prefix, affix_type = CASE_AFFIX_FORMS[self.cs]
        prefix = long_prefix if precision > 1 else prefix
        subscript = TYPE_SUBSCRIPTS.get(affix_type, "")
        return f"({prefix}{case.to_string(precision, ignore_default=False)}){subscript}"

    def __repr__(self) -> str:
        return f"Affix({self.vx!r}, {self.cs!r})"


def _case_affix_vowel(vx: str, cs: str) -> str:
    return vx if cs.endswith("w") else glottalize_vowel(vx)


def parse_affix(vx: str, cs: str, lexicon: Lexicon,
                no_type: bool = False) -> Union[Affix, Error]:
    """
    Resolve a VxCs pair into an Affix.

    Series 4 vowels would spell a referential shortcut, which is not
    decoded, so they fail like any other vowel outside the three types.
    """
    if vx == CA_STACKING_VOWEL:
        if parse_ca(cs) is None:
            return Error(f"Unknown stacked Ca value: {cs}")
    elif cs in CASE_AFFIXES:
        vc = _case_affix_vowel(vx, cs)
        if Case.by_vowel(vc) is None:
            return Error(f"Unknown case: {vc}")
    else:
        affix_type, _ = affix_type_and_degree(vx)
        if affix_type == -1:
            return Error(f"Unknown Vx value: {vx}")
        if affix_type not in TYPE_SUBSCRIPTS:
            return Error(f"Unknown affix type: {vx}")
    return Affix(vx, cs, lexicon, no_type)


# ============================================================================
# Formative Resolvers
# ============================================================================

def parse_cc(cc: str) -> Tuple[Optional[Concatenation], Optional[Shortcut]]:
    """Concatenation type and shortcut marked by a Cc consonant."""
    return CONCATENATION_CONSONANTS.get(cc), SHORTCUT_CONSONANTS.get(cc)


def parse_vv(vv: str, shortcut: Optional[Shortcut], lexicon: Lexicon) -> Optional[Slot]:
    """
    Resolve a regular Vv into stem, version and the series' extra value.

    For shortcut formatives the series picks the Ca; otherwise series 2-4
    each imply an affix.
    """
    series, form = series_and_form(vv)

    if series == -1 or (series == 1 and form == 4) or (series != 1 and form == 5):
        return None
    if series > 4:
        return None

    stem = VV_STEMS[form]
    version = Version.PROCESSUAL if form in (1, 3, 7, 9) else Version.COMPLETIVE

    additional: Optional[Glossable] = None
    if shortcut is not None:
        additional = parse_ca(SHORTCUT_CA[shortcut][series - 1])
    elif series in VV_SERIES_AFFIXES:
        vx, cs = VV_SERIES_AFFIXES[series]
        additional = Affix(vx, cs, lexicon, no_type=True)

    return Slot(stem, version, additional)


def parse_special_vv(vv: str, shortcut: Optional[Shortcut]) -> Optional[Slot]:
    """Resolve a Vv marking a Cs root or a personal-reference root."""
    if vv not in SPECIAL_VV:
        return None

    version, function = SPECIAL_VV[vv]

    ca = None
    if shortcut is not None:
        if vv not in REFERENCE_ROOT_VV:
            return None
        ca = parse_ca(SHORTCUT_CA[shortcut][0])

    return Slot(version, function, ca)


def parse_vr(vr: str) -> Optional[Slot]:
    """Resolve Vr into function, specification and context."""
    series, form = series_and_form(vr)

    if series not in SERIES_CONTEXTS:
        return None
    if (series == 1 and form == 4) or (series != 1 and form == 5):
        return None

    function = Function.STATIVE if form <= 5 else Function.DYNAMIC
    return Slot(function, VR_SPECIFICATIONS[form], SERIES_CONTEXTS[series])


def parse_affix_vr(vr: str) -> Optional[Slot]:
    """Resolve the Vr of a Cs-root formative into degree and specification."""
    series, degree = affix_type_and_degree(vr)
    if series not in SERIES_SPECIFICATIONS:
        return None
    return Slot(GlossString(f"degree {degree}", f"D{degree}"), SERIES_SPECIFICATIONS[series])


def parse_ca(ca: str) -> Optional[Slot]:
    """
    Decompose a Ca cluster into its five categories.

    A handful of clusters are standalone forms with fixed values. Any other
    cluster is read left to right: configuration, extension, affiliation,
    then perspective and essence. Every letter must be consumed.

    Example:
        >>> parse_ca("rtř").to_string()
        'DSS/RPV'
    """
    original = default_form(ca)
    if not original:
        return None

    configuration = Configuration.UNIPLEX
    extension = Extension.DELIMITIVE
    affiliation = Affiliation.CONSOLIDATIVE
    perspective = Perspective.MONADIC
    essence = Essence.NORMAL

    standalone = {
        "l": {},
        "ř": {"essence": Essence.REPRESENTATIVE},
        "d": {"affiliation": Affiliation.ASSOCIATIVE},
        "g": {"affiliation": Affiliation.COALESCENT},
        "b": {"affiliation": Affiliation.VARIATIVE},
        "r": {"perspective": Perspective.POLYADIC},
        "tļ": {"perspective": Perspective.POLYADIC, "essence": Essence.REPRESENTATIVE},
        "v": {"perspective": Perspective.NOMIC},
        "lm": {"perspective": Perspective.NOMIC, "essence": Essence.REPRESENTATIVE},
        "z": {"perspective": Perspective.ABSTRACT},
        "ln": {"perspective": Perspective.ABSTRACT, "essence": Essence.REPRESENTATIVE},
    }
    if original in standalone:
        values = standalone[original]
        return Slot(
            configuration,
            extension,
            values.get("affiliation", affiliation),
            values.get("perspective", perspective),
            values.get("essence", essence),
        )

    normal = substitute_all(original, CA_SUBSTITUTIONS)
    index = 0

    # Configuration
    if normal[0] == "l":
        conf = "MF"
        index += 1
    elif normal[0] in "rř":
        conf = {
            "rt": "DS", "rk": "DS", "rp": "DS",
            "rn": "DD", "rň": "DD", "rm": "DD",
            "řt": "DF", "řk": "DF", "řp": "DF",
        }.get(normal[:2])
        if conf is None:
            return None
        index += 1
    elif normal[0] in "tkp":
        conf = "MS"
    elif normal[0] in "nňm":
        conf = "MD"
    else:
        conf = "UNI"

    if conf != "UNI":
        letter = normal[index:index + 1]
        suffix = {"t": "S", "n": "S", "k": "C", "ň": "C", "p": "F", "m": "F"}.get(letter)
        if suffix is None:
            return None
        conf += suffix
        index += 1

    configuration = Configuration.by_abbreviation(conf)
    if configuration is None:
        return None

    # Extension
    extensions = {
        "s": Extension.PROXIMAL,
        "š": Extension.INCIPIENT,
        "f": Extension.ATTENUATIVE,
        "ţ": Extension.GRADUATIVE,
        "ç": Extension.DEPLETIVE,
    }
    if normal[index:index + 1] in extensions:
        extension = extensions[normal[index]]
        index += 1

    # Affiliation
    affiliations = {
        "t": Affiliation.ASSOCIATIVE, "d": Affiliation.ASSOCIATIVE,
        "k": Affiliation.COALESCENT, "g": Affiliation.COALESCENT,
        "p": Affiliation.VARIATIVE, "b": Affiliation.VARIATIVE,
    }
    if normal[index:index + 1] in affiliations:
        affiliation = affiliations[normal[index]]
        index += 1

    # Perspective and essence
    if normal[index:] and index > 0:
        perspectives = {
            "ř": Perspective.MONADIC,
            "r": Perspective.POLYADIC, "v": Perspective.POLYADIC, "l": Perspective.POLYADIC,
            "w": Perspective.NOMIC, "m": Perspective.NOMIC, "h": Perspective.NOMIC,
            "y": Perspective.ABSTRACT, "n": Perspective.ABSTRACT, "ç": Perspective.ABSTRACT,
        }
        letter = normal[index]
        if letter not in perspectives:
            return None
        perspective = perspectives[letter]
        if letter in "řlmhnç":
            essence = Essence.REPRESENTATIVE
        index += 1

    if normal[index:]:
        return None

    return Slot(configuration, extension, affiliation, perspective, essence)


def parse_vn_cn(vn: str, cn: str, marks_mood: bool) -> Optional[Slot]:
    """
    Resolve a VnCn pair.

    The Cn pattern decides how Vn is read: pattern one picks valence,
    phase, effect or level by series; pattern two reads Vn as an aspect.
    Cn itself marks mood on verbal formatives and case-scope otherwise.
    """
    if cn in CN_PATTERN_ONE:
        series, form = series_and_form(vn)
        family = VN_FAMILIES.get(series)
        if family is None:
            return None
        vn_value = family.by_form(form)
    elif cn in CN_PATTERN_TWO:
        vn_value = Aspect.by_vowel(vn)
    else:
        return None

    if vn_value is None:
        return None

    cn_family = Mood if marks_mood else CaseScope
    return Slot(vn_value, cn_family.by_form(CN_VALUES[cn]))


def parse_vk(vk: str) -> Optional[Slot]:
    """Resolve Vk into illocution, expectation and validation."""
    series, form = series_and_form(vk)
    if not 1 <= series <= 4:
        return None

    illocution = Illocution.PERFORMATIVE if form == 5 else Illocution.ASSERTIVE
    values = Slot(illocution, EXPECTATIONS.get(series), VALIDATIONS.get(form))

    return values if len(values) > 1 else None


def parse_vh(vh: str) -> Optional[GlossString]:
    """Scope of a modular adjunct, spelled by its final vowel."""
    return VH_SCOPES.get(default_form(vh))


def parse_case(vc: str) -> Optional[Case]:
    return Case.by_vowel(default_form(vc))


# ============================================================================
# Adjunct Resolvers
# ============================================================================

def parse_personal_reference(c: str) -> Optional[Slot]:
    """
    Resolve a personal-reference consonant into referent and effect.

    Some consonants have no effect; they resolve to the referent alone.
    """
    r = default_form(c)
    referent = REFERENTS.get(r)
    if referent is None:
        return None
    return Slot(referent, EFFECTS.get(r))


def affixual_adjunct_scope(scope: Optional[str],
                           is_multiple_adjunct_vowel: bool = False) -> Optional[GlossString]:
    """
    Scope of an affixual adjunct, from its Cz consonant or Vs/Vz vowel.

    A missing scope is the default: {VDom} for single adjuncts, {same} for
    the final vowel of a multiple affix adjunct.
    """
    if scope is None:
        value = "{same}" if is_multiple_adjunct_vowel else "{VDom}"
    else:
        scope = default_form(scope)
        if scope == "ë":
            value = "{same}" if is_multiple_adjunct_vowel else None
        else:
            value = AFFIXUAL_SCOPES.get(scope)

    if value is None:
        return None

    is_default = (value == "{VDom}" and not is_multiple_adjunct_vowel) or \
                 (value == "{same}" and is_multiple_adjunct_vowel)
    return GlossString(value, ignorable=is_default)


def parse_mood_case_scope_adjunct(v: str) -> GlossOutcome:
    value = MOOD_CASE_SCOPE_VOWELS.get(v)
    if value is None:
        return Error(f"Unknown Mood/Case-Scope adjunct vowel: {v}")
    return Gloss(value, ignorable=False)


def parse_suppletive_adjunct(type_c: str, case_v: str) -> GlossOutcome:
    """Resolve a suppletive adjunct: its type consonant and its case."""
    adjunct_type = SUPPLETIVE_TYPES.get(default_form(type_c))
    if adjunct_type is None:
        return Error(f"Unknown suppletive adjunct consonant: {type_c}")

    case = parse_case(case_v)
    if case is None:
        return Error(f"Unknown case: {case_v}")

    return Gloss(adjunct_type, case)


def parse_bias_adjunct(cb: str) -> GlossOutcome:
    bias = Bias.by_group(default_form(cb))
    if bias is None:
        return Error(f"Unknown bias: {cb}")
    return Gloss(bias)
