"""
Tests for characters.py and stress.py - normalization, groups and stress.
"""

import pytest

from ithkuil_gloss.characters import (
    clear_stress, codepoint_string, default_form, default_form_with_stress,
    foreign_characters, is_consonant, is_vowel, split_groups,
)
from ithkuil_gloss.stress import Stress, find_stress, has_stress, stress_position


class TestNormalization:

    def test_lowercases(self):
        assert default_form("KHE") == "khe"

    def test_allographs(self):
        assert default_form("ṭaḍa") == "ţaḑa"
        assert default_form("ła’a") == "ļa'a"

    def test_grave_accents_are_plain_vowels(self):
        assert default_form_with_stress("lìala") == "liala"

    def test_clear_stress(self):
        assert clear_stress("alái") == "alai"
        assert clear_stress("âêîôû") == "äëïöü"

    def test_keeps_stress(self):
        assert default_form_with_stress("Alá") == "alá"


class TestGroups:

    def test_split_groups(self):
        assert split_groups("adnilo'o") == ["a", "dn", "i", "l", "o'o"]

    def test_split_consonant_initial(self):
        assert split_groups("khe") == ["kh", "e"]

    def test_glottal_stop_joins_vowels(self):
        assert split_groups("ai'ļļč") == ["ai'", "ļļč"]

    @pytest.mark.parametrize("group", ["a", "ai", "a'", "a'i", "ai'", "á"])
    def test_is_vowel(self, group):
        assert is_vowel(group)

    @pytest.mark.parametrize("group", ["", "'a", "aiai", "a''", "l"])
    def test_is_not_vowel(self, group):
        assert not is_vowel(group)

    def test_is_consonant(self):
        assert is_consonant("çtļ")
        assert not is_consonant("")
        assert not is_consonant("la")

    def test_foreign_characters(self):
        assert foreign_characters("qal") == "q"
        assert foreign_characters("lala") == ""

    def test_codepoint_string(self):
        assert codepoint_string("q") == '"q" (U+0071)'


class TestStress:
    """Stress positions, counted from the end of the word."""

    @pytest.mark.parametrize("word,position", [
        ("a", -1),
        ("ala", 1),
        ("alá", 0),
        ("lìala", 1),
        ("ua", 1),
        ("ëu", -1),
        ("alái", 0),
        ("ála'a", 2),
    ])
    def test_stress_position(self, word, position):
        groups = split_groups(default_form_with_stress(word))
        assert stress_position(find_stress(groups)) == position

    def test_marked_penultimate_is_marked_default(self):
        assert find_stress(["á", "l", "a"]) is Stress.MARKED_DEFAULT

    def test_marked_monosyllable_is_marked_default(self):
        assert find_stress(["kh", "é"]) is Stress.MARKED_DEFAULT

    def test_double_marked(self):
        assert find_stress(["á", "l", "á"]) is Stress.DOUBLE_MARKED

    def test_mark_on_diphthong_tail(self):
        assert find_stress(["aí"]) is Stress.INVALID_PLACE

    def test_too_far_from_end(self):
        assert find_stress(["á", "l", "a", "l", "a", "l", "a"]) is Stress.INVALID_PLACE

    def test_has_stress(self):
        assert has_stress("á") is True
        assert has_stress("a") is False
        assert has_stress("aí") is None

    def test_no_position_for_malformed(self):
        with pytest.raises(ValueError):
            stress_position(Stress.DOUBLE_MARKED)

    def test_is_valid(self):
        assert Stress.PENULTIMATE.is_valid
        assert not Stress.INVALID_PLACE.is_valid
