"""
Tests for resolvers.py and categories.py - slot values and their rendering.
"""

import pytest

from ithkuil_gloss.categories import Aspect, Bias, Case, Stem
from ithkuil_gloss.glosses import Error, Gloss
from ithkuil_gloss.lexicon import Lexicon
from ithkuil_gloss.resolvers import (
    Affix, CsRoot, Root, Shortcut, affix_type_and_degree, affixual_adjunct_scope,
    parse_affix, parse_bias_adjunct, parse_ca, parse_cc, parse_mood_case_scope_adjunct,
    parse_personal_reference, parse_suppletive_adjunct, parse_vk, parse_vn_cn,
    parse_vr, parse_vv,
)


class TestCategories:

    def test_default_hidden(self):
        assert Case.THEMATIC.to_string() == ""
        assert Case.THEMATIC.to_string(ignore_default=False) == "THM"

    def test_precision(self):
        assert Case.ABSOLUTIVE.to_string(precision=0) == "ABS"
        assert Case.ABSOLUTIVE.to_string(precision=2) == "absolutive"

    @pytest.mark.parametrize("vowel,case", [
        ("a", Case.THEMATIC),
        ("e", Case.ABSOLUTIVE),
        ("u", Case.INDUCIVE),
        ("eu", Case.ATTRIBUTIVE),
        ("a'a", Case.PERTINENTIAL),
        ("o'o", Case.UTILITATIVE),
        ("u'u", Case.RELATIVE),
        ("ö'e", Case.POSTCURSIVE),
    ])
    def test_case_by_vowel(self, vowel, case):
        assert Case.by_vowel(vowel) is case

    def test_glottal_form_five_is_not_a_case(self):
        assert Case.by_vowel("i'i") is None

    def test_aspect_by_vowel(self):
        assert Aspect.by_vowel("a") is Aspect.RETROSPECTIVE
        assert Aspect.by_vowel("a'a") is None

    def test_bias_by_group(self):
        assert Bias.by_group("ļļč") is Bias.STUPEFACTIVE
        assert Bias.by_group("pp") is None

    def test_stem_number(self):
        assert Stem.STEM_ZERO.number == 0
        assert Stem.STEM_THREE.number == 3


class TestFormativeResolvers:

    def test_parse_cc(self):
        assert parse_cc("hl") == (parse_cc("h")[0], Shortcut.W_SHORTCUT)
        assert parse_cc("w")[0] is None
        assert parse_cc("l") == (None, None)

    def test_parse_vv(self):
        assert parse_vv("a", None, Lexicon()).to_string() == "S1"
        assert parse_vv("u", None, Lexicon()).to_string() == "S3"
        assert parse_vv("ä", None, Lexicon()).to_string() == "S1/CPT"

    def test_parse_vv_series_affix(self):
        assert parse_vv("ai", None, Lexicon()).to_string() == "S1/**r**/4"

    def test_parse_vv_shortcut_ca(self):
        assert parse_vv("ei", Shortcut.Y_SHORTCUT, Lexicon()).to_string() == "S2/RPV"

    def test_parse_vv_rejects_unused_form(self):
        assert parse_vv("ï", None, Lexicon()) is None
        assert parse_vv("a'a", None, Lexicon()) is None

    def test_parse_vr(self):
        assert parse_vr("a").to_string() == ""
        assert parse_vr("o").to_string() == "DYN/CSV"
        assert parse_vr("ä").to_string() == "CTE"
        assert parse_vr("x") is None

    @pytest.mark.parametrize("ca,expected", [
        ("l", ""),
        ("ř", "RPV"),
        ("v", "N"),
        ("d", "ASO"),
        ("rtř", "DSS/RPV"),
        ("s", "PRX"),
        ("tļ", "P/RPV"),
    ])
    def test_parse_ca(self, ca, expected):
        assert parse_ca(ca).to_string() == expected

    def test_parse_ca_shows_defaults(self):
        assert parse_ca("l").to_string(ignore_default=False) == "UNI/DEL/CSL/M/NRM"

    def test_parse_ca_unknown(self):
        assert parse_ca("rf") is None

    def test_parse_vn_cn(self):
        assert parse_vn_cn("au", "h", marks_mood=True).to_string() == "PCT"
        assert parse_vn_cn("ï", "h", marks_mood=True).to_string() == "RCP"
        assert parse_vn_cn("a", "hl", marks_mood=True).to_string() == "SUB"
        assert parse_vn_cn("a", "hl", marks_mood=False).to_string() == "CCA"
        assert parse_vn_cn("ë", "h", marks_mood=True) is None

    def test_parse_vk(self):
        assert parse_vk("ai").to_string() == "RSP/OBS"
        assert parse_vk("a'a") is None


class TestRootsAndAffixes:

    def test_unknown_root(self):
        assert Root("mr", 1, Lexicon()).to_string() == "**mr**"

    def test_root_by_stem(self, lexicon):
        assert Root("kl", 1, lexicon).to_string() == "'feline'"
        assert Root("kl", 2, lexicon).to_string() == "'cat'"
        assert Root("kl", 3, lexicon).to_string() == "'kitten'"

    def test_affix_type_and_degree(self):
        assert affix_type_and_degree("a") == (1, 1)
        assert affix_type_and_degree("ai") == (2, 1)
        assert affix_type_and_degree("üo") == (3, 0)
        assert affix_type_and_degree("x") == (-1, -1)

    def test_unknown_affix(self):
        assert Affix("ï", "n", Lexicon()).to_string() == "**n**/4₁"

    def test_known_affix(self, lexicon):
        assert Affix("ï", "n", lexicon).to_string() == "'four'₁"
        assert Affix("ï", "n", lexicon).to_string(precision=0) == "NUM/4₁"

    def test_affix_without_type(self):
        assert Affix("ï", "r", Lexicon(), no_type=True).to_string() == "**r**/4"

    def test_ca_stacking_affix(self):
        assert Affix("üö", "rtř", Lexicon()).to_string() == "(DSS/RPV)"
        assert Affix("üö", "l", Lexicon()).to_string() == "(UNI)"

    def test_case_accessor_affix(self):
        assert Affix("e", "sw", Lexicon()).to_string() == "(acc:ABS)₁"
        assert Affix("a", "sy", Lexicon()).to_string() == "(acc:PRN)₁"
        assert Affix("e", "žw", Lexicon()).to_string(precision=2) == \
            "(inverse accessor:absolutive)₂"

    def test_parse_affix(self, lexicon):
        affix = parse_affix("ï", "n", lexicon)
        assert isinstance(affix, Affix)
        assert affix.to_string() == "'four'₁"

    @pytest.mark.parametrize("vx,cs,message", [
        ("aa", "n", "Unknown Vx value: aa"),
        ("ao", "n", "Unknown affix type: ao"),
        ("a'a", "n", "Unknown affix type: a'a"),
        ("üö", "rf", "Unknown stacked Ca value: rf"),
        ("i", "sy", "Unknown case: i'i"),
    ])
    def test_parse_affix_rejects(self, vx, cs, message):
        assert parse_affix(vx, cs, Lexicon()) == Error(message)

    def test_parse_affix_accepts_special_forms(self):
        assert parse_affix("üö", "rtř", Lexicon()).to_string() == "(DSS/RPV)"
        assert parse_affix("e", "sw", Lexicon()).to_string() == "(acc:ABS)₁"
        assert parse_affix("üo", "n", Lexicon()).to_string() == "**n**/0₃"

    def test_cs_root(self, lexicon):
        assert CsRoot("g", 0, Lexicon()).to_string() == "**g**/0"
        assert CsRoot("n", 2, lexicon).to_string() == "'two'"


class TestAdjunctResolvers:

    def test_personal_reference(self):
        assert parse_personal_reference("kh").to_string() == "Obv/DET"
        assert parse_personal_reference("l").to_string() == "1m"
        assert parse_personal_reference("x").to_string() == "N"
        assert parse_personal_reference("kš") is None

    def test_affixual_scope(self):
        assert affixual_adjunct_scope(None).to_string() == ""
        assert affixual_adjunct_scope("i").to_string() == "{VIISub}"
        assert affixual_adjunct_scope("'hw").to_string() == "{adjacent}"
        assert affixual_adjunct_scope(None, is_multiple_adjunct_vowel=True).to_string() == ""
        assert affixual_adjunct_scope("a", is_multiple_adjunct_vowel=True).to_string() == "{VDom}"
        assert affixual_adjunct_scope("x") is None

    def test_mood_case_scope_adjunct_shows_defaults(self):
        outcome = parse_mood_case_scope_adjunct("a")
        assert isinstance(outcome, Gloss)
        assert outcome.to_string() == "FAC"

    def test_mood_case_scope_adjunct_unknown(self):
        assert parse_mood_case_scope_adjunct("ü") == \
            Error("Unknown Mood/Case-Scope adjunct vowel: ü")

    def test_suppletive_adjunct(self):
        assert parse_suppletive_adjunct("hň", "u").to_string() == "[PHR]-IND"
        assert parse_suppletive_adjunct("hl", "a").to_string() == "[CAR]"
        assert parse_suppletive_adjunct("hl", "aa") == Error("Unknown case: aa")

    def test_bias_adjunct(self):
        assert parse_bias_adjunct("ļļč").to_string(precision=2) == "stupefactive"
        assert parse_bias_adjunct("pp") == Error("Unknown bias: pp")
