"""
Word parsing for ithkuil_gloss.

Walks the groups of a formatted word through the slot grammar of its word
type, calling the category resolvers slot by slot. The first failing slot
ends the parse with an ``Error``; a successful parse is a ``Gloss``.

Main entry point:
    parse_word(word, lexicon=None) -> Gloss | Error
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from ithkuil_gloss.categories import Aspect, Bias, Case, Essence
from ithkuil_gloss.characters import GLOTTAL_STOP, is_consonant, is_vowel
from ithkuil_gloss.constants import (
    CC_CONSONANTS, CN_CONSONANTS, CONCATENATION_SEPARATOR,
    CS_ROOT_VV, REFERENCE_ROOT_VV, SPECIAL_VV,
)
from ithkuil_gloss.glosses import Error, Gloss, GlossOutcome, GlossString, Glossable
from ithkuil_gloss.lexicon import Lexicon, get_default_lexicon
from ithkuil_gloss.phonology import (
    glottalize_vowel, is_geminate_ca, is_glottal_vowel, split_glottal_vowel,
    un_geminate_ca, unglottalize_vowel,
)
from ithkuil_gloss.resolvers import (
    Affix, CsRoot, Root, affix_type_and_degree, affixual_adjunct_scope,
    parse_affix, parse_affix_vr, parse_bias_adjunct, parse_ca, parse_case, parse_cc,
    parse_mood_case_scope_adjunct, parse_personal_reference, parse_special_vv,
    parse_suppletive_adjunct, parse_vh, parse_vk, parse_vn_cn, parse_vr, parse_vv,
)
from ithkuil_gloss.stress import Stress
from ithkuil_gloss.words import (
    ConcatenatedWords, Invalid, Word, WordType, format_word, word_type_of,
)

logger = logging.getLogger(__name__)

SENTENCE_START = GlossString("[sentence start]", "[S]")
CONCATENATED_ONLY = GlossString("{concatenated formative only}", "{concat.}")
PARENT_ONLY = GlossString("{parent formative only}", "{parent}")
CA_MARKER = GlossString("{Ca}")

MAX_MODULAR_SLOTS = 3


# ============================================================================
# Entry Points
# ============================================================================

def parse_word(word: str, lexicon: Optional[Lexicon] = None) -> GlossOutcome:
    """
    Decode a single word, or a hyphen-joined concatenation chain.

    Args:
        word: Raw input word.
        lexicon: Root and affix lexicon. Defaults to the process-wide one.

    Returns:
        A Gloss on success, an Error describing the first problem otherwise.

    Example:
        >>> parse_word("khe").to_string()
        'Obv/DET-ABS'
    """
    if lexicon is None:
        lexicon = get_default_lexicon()

    formatted = format_word(word)

    if isinstance(formatted, Invalid):
        logger.debug("Invalid word %r: %s", word, formatted.message)
        return Error(formatted.message)
    if isinstance(formatted, ConcatenatedWords):
        return parse_concatenation(formatted, lexicon)
    return parse_single_word(formatted, lexicon)


def parse_single_word(word: Word, lexicon: Lexicon) -> GlossOutcome:
    """Parse a formatted word with the grammar of its word type."""
    stripped, has_prefix = word.strip_sentence_prefix()

    word_type = word_type_of(stripped.groups)
    if word_type is None:
        return Error("Unknown word type")

    outcome = _PARSERS[word_type](stripped, lexicon)
    if isinstance(outcome, Error):
        logger.debug("Failed to parse %s as %s: %s", word, word_type.value, outcome.message)
        return outcome

    outcome = outcome.replace(word_type=word_type, stress=word.stress)
    if has_prefix:
        outcome = Gloss(SENTENCE_START, outcome, word_type=word_type, stress=word.stress)
    return outcome


def parse_concatenation(chain: ConcatenatedWords, lexicon: Lexicon) -> GlossOutcome:
    """
    Parse a concatenation chain.

    Every formative but the last must carry a concatenation Cc. Failures are
    reported with the offending formative in parentheses.
    """
    glosses = []
    for position, word in enumerate(chain.words):
        is_last = position == len(chain.words) - 1
        if not is_last and parse_cc(word.groups[0])[0] is None:
            return Error(f"Non-concatenated formative in concatenation chain: ({word})")

        outcome = parse_single_word(word, lexicon)
        if isinstance(outcome, Error):
            return Error(f"{outcome.message} ({word})")
        glosses.append(outcome)

    return Gloss(
        *glosses,
        separator=CONCATENATION_SEPARATOR,
        word_type=WordType.FORMATIVE,
        stress=chain.words[-1].stress,
    )


# ============================================================================
# Formatives
# ============================================================================

def _remove_glottal_stop(groups: List[str], start: int,
                         concatenated: bool) -> Union[bool, Error]:
    """
    Remove the single glottal stop found in the vowels from ``start`` on.

    The glottal stop belongs to Vc, wherever it was written. Returns whether
    one was removed, so the caller can restore it on Vc.
    """
    positions = [
        i for i in range(start, len(groups))
        if is_vowel(groups[i]) and is_glottal_vowel(groups[i])
    ]
    if len(positions) > 1:
        return Error("Too many glottal stops found")
    if not positions:
        return False
    if concatenated:
        return Error("Unexpected glottal stop in incorporated formative")

    groups[positions[0]] = unglottalize_vowel(groups[positions[0]])
    return True


def parse_formative(word: Word, lexicon: Lexicon) -> GlossOutcome:
    """
    Parse a formative.

    Slots, in order: (Cc) (Vv) Cr (Vr) (CsVx...) (Ca) (VxCs...) (VnCn)
    (Vc|Vk) ('Cb). Shortcut formatives have neither Vr nor Ca; their
    affixes directly follow Cr.
    """
    groups = word.groups
    stress = word.stress

    # Slot X: a bias after a glottal stop
    bias: Optional[Bias] = None
    if len(groups) >= 3 and is_consonant(groups[-1]) and groups[-2].endswith(GLOTTAL_STOP):
        bias = Bias.by_group(groups[-1])
        if bias is None:
            return Error(f"Unknown bias: {groups[-1]}")
        groups = groups[:-2] + [groups[-2][:-1]]

    # Slot I
    index = 0
    concatenation, shortcut = None, None
    if groups[0] in CC_CONSONANTS:
        concatenation, shortcut = parse_cc(groups[0])
        index = 1
    concatenated = concatenation is not None

    # Slot II
    if index < len(groups) and is_vowel(groups[index]):
        vv = groups[index]
        index += 1
    elif index == 0:
        vv = "a"
    else:
        return Error("Unexpectedly few slots in formative")
    vv, vv_glottal = split_glottal_vowel(vv)

    glottal_shift = False
    if shortcut is None:
        removed = _remove_glottal_stop(groups, index, concatenated)
        if isinstance(removed, Error):
            return removed
        glottal_shift = removed

    # Slot III
    if index >= len(groups) or not is_consonant(groups[index]):
        return Error("Unexpectedly few slots in formative")
    cr = groups[index]
    index += 1

    if vv in SPECIAL_VV:
        vv_slot = parse_special_vv(vv, shortcut)
    else:
        vv_slot = parse_vv(vv, shortcut, lexicon)
    if vv_slot is None:
        return Error(f"Unknown Vv value: {vv}")

    # Slot IV
    vr = None
    if shortcut is None:
        if index < len(groups):
            vr = groups[index]
            index += 1
        else:
            vr = "a"

    root: Glossable
    if vv in CS_ROOT_VV:
        vr_slot = parse_affix_vr(vr)
        if vr_slot is None:
            return Error(f"Unknown Cs-root Vr value: {vr}")
        root = CsRoot(cr, affix_type_and_degree(vr)[1], lexicon)
    elif vv in REFERENCE_ROOT_VV:
        referent = parse_personal_reference(cr)
        if referent is None:
            return Error(f"Unknown personal reference cluster: {cr}")
        root = referent
        vr_slot = parse_vr(vr) if vr is not None else None
        if vr is not None and vr_slot is None:
            return Error(f"Unknown Vr value: {vr}")
    else:
        root = Root(cr, vv_slot[0].number, lexicon)
        vr_slot = parse_vr(vr) if vr is not None else None
        if vr is not None and vr_slot is None:
            return Error(f"Unknown Vr value: {vr}")

    slot_v: List[Affix] = []
    slot_vii: List[Affix] = []
    ca_marker = None
    ca_slot = None

    if shortcut is not None:
        # Slots V and VII: VxCs affixes; a glottal stop closes slot V
        affixes = []
        while index + 1 < len(groups) and groups[index + 1] not in CN_CONSONANTS:
            vx, glottal = split_glottal_vowel(groups[index])
            affix = parse_affix(vx, groups[index + 1], lexicon)
            if isinstance(affix, Error):
                return affix
            if glottal:
                if ca_marker is not None:
                    return Error("Too many glottal stops found")
                slot_v = affixes + [affix]
                affixes = []
                ca_marker = CA_MARKER
            else:
                affixes.append(affix)
            index += 2
        slot_vii = affixes

        removed = _remove_glottal_stop(groups, index, concatenated)
        if isinstance(removed, Error):
            return removed
        glottal_shift = removed
    else:
        # Slot V: CsVx affixes, closed by a geminated Ca
        position = index
        candidates = []
        geminate_found = False
        while position < len(groups) and is_consonant(groups[position]) \
                and groups[position] not in CN_CONSONANTS:
            if is_geminate_ca(groups[position]):
                geminate_found = True
                break
            if position + 1 >= len(groups):
                break
            candidates.append((groups[position + 1], groups[position]))
            position += 2
        if geminate_found and candidates:
            for vx, cs in candidates:
                affix = parse_affix(vx, cs, lexicon)
                if isinstance(affix, Error):
                    return affix
                slot_v.append(affix)
            index = position

    if vv_glottal and len(slot_v) < 2:
        return Error("Unexpectedly few slot V affixes")
    if not vv_glottal and len(slot_v) > 1:
        return Error("Unexpectedly many slot V affixes")

    if shortcut is None:
        # Slot VI
        if index >= len(groups):
            return Error("Unexpectedly few slots in formative")
        ca = groups[index]
        ca_slot = parse_ca(un_geminate_ca(ca) if slot_v else ca)
        if ca_slot is None:
            return Error(f"Unknown Ca value: {ca}")
        index += 1

        # Slot VII
        while index + 1 < len(groups) and groups[index + 1] not in CN_CONSONANTS:
            affix = parse_affix(groups[index], groups[index + 1], lexicon)
            if isinstance(affix, Error):
                return affix
            slot_vii.append(affix)
            index += 2

    # Slot VIII
    marks_mood = not concatenated and stress is Stress.ULTIMATE
    vn_cn = None
    if index + 1 < len(groups) and groups[index + 1] in CN_CONSONANTS:
        vn, cn = groups[index], groups[index + 1]
        vn_cn = parse_vn_cn(vn, cn, marks_mood)
        if vn_cn is None:
            return Error(f"Unknown VnCn: {vn}{cn}")
        index += 2

    # Slot IX
    vc = None
    if index < len(groups):
        vc = groups[index]
        index += 1

    if index < len(groups):
        return Error("Too many groups")

    if glottal_shift:
        vc = glottalize_vowel(vc or "a")

    if stress is Stress.ANTEPENULTIMATE:
        return Error("Unexpected antepenultimate stress")

    vc_slot: Optional[Glossable]
    if stress is Stress.ULTIMATE and not concatenated:
        vc_slot = parse_vk(vc or "a")
        if vc_slot is None:
            return Error(f"Unknown Vk value: {vc}")
    else:
        if stress is Stress.ULTIMATE:
            vc = glottalize_vowel(vc or "a")
        vc_slot = Case.by_vowel(vc) if vc is not None else Case.THEMATIC
        if vc_slot is None:
            return Error(f"Unknown Vc value: {vc}")

    return Gloss(
        concatenation,
        vv_slot,
        root,
        vr_slot,
        *slot_v,
        ca_marker,
        ca_slot,
        *slot_vii,
        vn_cn,
        vc_slot,
        bias,
    )


# ============================================================================
# Adjuncts and Referentials
# ============================================================================

def parse_referential(word: Word, lexicon: Lexicon) -> GlossOutcome:
    """Parse a personal-reference word: (ë) C1 Vc, or (ë) C1 Vc1 w|y Vc2 C2."""
    groups = word.groups
    body = groups[1:] if groups[0] == "ë" else groups

    values: List[Optional[Glossable]] = []
    for position, group in enumerate(body):
        if position in (1, 3):
            case = parse_case(group)
            if case is None:
                return Error(f"Unknown case: {group}")
            values.append(case)
        elif position in (0, 4):
            referent = parse_personal_reference(group)
            if referent is None:
                return Error(f"Unknown personal reference cluster: {group}")
            values.append(referent)

    if word.stress is Stress.ULTIMATE:
        values.append(Essence.REPRESENTATIVE)

    return Gloss(*values)


def parse_affixual_adjunct(word: Word, lexicon: Lexicon) -> GlossOutcome:
    """Parse a single affixual adjunct: Vx Cs (Vs)."""
    groups = word.groups
    vx, cs = groups[0], groups[1]
    vs = groups[2] if len(groups) > 2 else None

    scope = affixual_adjunct_scope(vs)
    if scope is None:
        return Error(f"Unknown Vs value: {vs}")

    concatenated_only = CONCATENATED_ONLY if word.stress is Stress.ULTIMATE else None

    affix = parse_affix(vx, cs, lexicon)
    if isinstance(affix, Error):
        return affix

    return Gloss(affix, scope, concatenated_only)


def parse_multiple_affix_adjunct(word: Word, lexicon: Lexicon) -> GlossOutcome:
    """Parse a multiple affix adjunct: (ë) Cs Vx Cz (VxCs...) (Vz)."""
    groups = word.groups
    index = 1 if groups[0] == "ë" else 0

    cs, vx = groups[index], groups[index + 1]
    first_affix = parse_affix(unglottalize_vowel(vx), cs, lexicon)
    if isinstance(first_affix, Error):
        return first_affix

    cz = groups[index + 2]
    if vx.endswith(GLOTTAL_STOP):
        cz = GLOTTAL_STOP + cz
    scope = affixual_adjunct_scope(cz)
    if scope is None:
        return Error(f"Unknown Cz value: {cz}")
    index += 3

    affixes = []
    while index + 1 < len(groups):
        affix = parse_affix(groups[index], groups[index + 1], lexicon)
        if isinstance(affix, Error):
            return affix
        affixes.append(affix)
        index += 2

    vz_scope = None
    if index < len(groups):
        vz = groups[index]
        vz_scope = affixual_adjunct_scope(vz, is_multiple_adjunct_vowel=True)
        if vz_scope is None:
            return Error(f"Unknown Vz value: {vz}")

    concatenated_only = CONCATENATED_ONLY if word.stress is Stress.ULTIMATE else None

    return Gloss(first_affix, scope, *affixes, vz_scope, concatenated_only)


def parse_modular_adjunct(word: Word, lexicon: Lexicon) -> GlossOutcome:
    """
    Parse a modular adjunct: (w|y) (VnCn){0,3} V.

    The final vowel is an aspect when it stands alone; otherwise stress
    decides whether it is a non-aspectual Vn or a scope (Vh).
    """
    groups = word.groups
    index = 0

    adjunct_type = None
    if groups[0] == "w":
        adjunct_type = PARENT_ONLY
        index = 1
    elif groups[0] == "y":
        adjunct_type = CONCATENATED_ONLY
        index = 1

    slots = []
    while index + 1 < len(groups):
        vn, cn = groups[index], groups[index + 1]
        slot = parse_vn_cn(vn, cn, marks_mood=True)
        if slot is None:
            return Error(f"Unknown VnCn: {vn}{cn}")
        slots.append(slot)
        index += 2

    if len(slots) > MAX_MODULAR_SLOTS:
        return Error("Too many groups")

    v = groups[index]
    final: Optional[Glossable]
    if not slots:
        final = Aspect.by_vowel(v)
        if final is None:
            return Error(f"Unknown aspect: {v}")
    elif word.stress in (Stress.PENULTIMATE, Stress.MONOSYLLABIC):
        final = parse_vn_cn(v, "h", marks_mood=True)
        if final is None:
            return Error(f"Unknown non-aspect Vn: {v}")
    elif word.stress is Stress.ULTIMATE:
        final = parse_vh(v)
        if final is None:
            return Error(f"Unknown Vh: {v}")
    else:
        return Error("Unknown stress on modular adjunct")

    return Gloss(adjunct_type, *slots, final)


def parse_mood_case_scope_word(word: Word, lexicon: Lexicon) -> GlossOutcome:
    return parse_mood_case_scope_adjunct(word.groups[1])


def parse_suppletive_word(word: Word, lexicon: Lexicon) -> GlossOutcome:
    return parse_suppletive_adjunct(word.groups[0], word.groups[1])


def parse_bias_word(word: Word, lexicon: Lexicon) -> GlossOutcome:
    return parse_bias_adjunct(word.groups[0])


_PARSERS: Dict[WordType, Callable[[Word, Lexicon], GlossOutcome]] = {
    WordType.FORMATIVE: parse_formative,
    WordType.REFERENTIAL: parse_referential,
    WordType.AFFIXUAL_ADJUNCT: parse_affixual_adjunct,
    WordType.MULTIPLE_AFFIX_ADJUNCT: parse_multiple_affix_adjunct,
    WordType.MODULAR_ADJUNCT: parse_modular_adjunct,
    WordType.MOOD_CASE_SCOPE_ADJUNCT: parse_mood_case_scope_word,
    WordType.SUPPLETIVE_ADJUNCT: parse_suppletive_word,
    WordType.BIAS_ADJUNCT: parse_bias_word,
}
