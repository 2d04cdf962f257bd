"""
Tests for phonology.py - vowel forms, glottal stops and gemination.
"""

import itertools

import pytest

from ithkuil_gloss.constants import (
    AFFRICATES, FRICATIVES, LIQUIDS, NASALS, STOPS, UNGEMINATE_MAP, UNGLOTTAL_MAP,
)
from ithkuil_gloss.phonology import (
    by_series_and_form, glottalize_vowel, is_geminate_ca, is_glottal_ca,
    series_and_form, split_glottal_vowel, un_geminate_ca, un_glottal_ca,
    unglottalize_vowel,
)
from ithkuil_gloss.resolvers import parse_ca


# =============================================================================
# Well-formed clusters
# =============================================================================

# Pieces of a Ca complex, in the order they are written
CONFIGURATIONS = ["", "t", "k", "p", "n", "ň", "m", "lt", "lk", "lp",
                  "rt", "rk", "rp", "rn", "rň", "rm", "řt", "řk", "řp"]
EXTENSIONS = ["", "s", "š", "f", "ţ", "ç"]
AFFILIATIONS = ["", "t", "d", "k", "g", "p", "b"]
PERSPECTIVES = ["", "ř", "r", "v", "l", "w", "m", "h", "y", "n", "ç"]

SCOPE_CONSONANTS = ["h", "hw", "hl", "hr", "hm", "hn", "w", "y"]


def plain_ca_clusters():
    """Every Ca cluster the decoder accepts, as written before any transform."""
    clusters = {
        "".join(pieces)
        for pieces in itertools.product(CONFIGURATIONS, EXTENSIONS, AFFILIATIONS, PERSPECTIVES)
    }
    return sorted(c for c in clusters if c and parse_ca(c) is not None)


def geminated_ca_clusters():
    """
    Geminated forms of the plain Ca clusters.

    Plain clusters that already read as geminate (such as "tt", MSS/ASO)
    cannot be told apart from a geminated cluster and are left out.
    """
    plain = [c for c in plain_ca_clusters() if not is_geminate_ca(c)]
    doubled = [c[0] + c for c in plain]
    return doubled + list(UNGEMINATE_MAP) + ["ẓw", "jtw"]


def glottal_clusters():
    """
    Glottalized forms of the plain Ca and scope clusters.

    Plain clusters that already read as glottal are left out, since a
    glottal stop in front of them ("'tt") has no single plain form.
    """
    plain = [c for c in plain_ca_clusters() + SCOPE_CONSONANTS if not is_glottal_ca(c)]
    clusters = []
    for c in plain:
        clusters.append("'" + c)
        if len(c) == 1 and c in STOPS | AFFRICATES:
            clusters.append(c + c)
        elif len(c) > 1 and c[0] in "ptk" and c[1] in FRICATIVES:
            clusters.append(c[0] + c[1] + c[1:])
        elif len(c) > 1 and c[0] in LIQUIDS | NASALS | FRICATIVES | AFFRICATES:
            clusters.append(c[0] + c)
    return clusters + list(UNGLOTTAL_MAP)


# =============================================================================
# Vowel forms
# =============================================================================


class TestVowelForms:

    @pytest.mark.parametrize("vowel,expected", [
        ("a", (1, 1)),
        ("u", (1, 9)),
        ("ai", (2, 1)),
        ("ia", (3, 1)),
        ("uä", (3, 1)),
        ("oa", (4, 9)),
        ("a'a", (5, 1)),
        ("o'o", (5, 7)),
        ("ö'e", (8, 7)),
    ])
    def test_series_and_form(self, vowel, expected):
        assert series_and_form(vowel) == expected

    def test_unknown_vowel(self):
        assert series_and_form("aa") == (-1, -1)

    def test_by_series_and_form_gives_canonical_spelling(self):
        assert by_series_and_form(3, 1) == "ia"
        assert by_series_and_form(2, 9) == "ui"

    def test_by_series_and_form_out_of_range(self):
        assert by_series_and_form(9, 1) is None
        assert by_series_and_form(1, 0) is None

    @pytest.mark.parametrize("series,form", itertools.product(range(1, 9), range(1, 10)))
    def test_series_and_form_inverts_by_series_and_form(self, series, form):
        assert series_and_form(by_series_and_form(series, form)) == (series, form)


class TestGlottalVowels:

    def test_glottalize(self):
        assert glottalize_vowel("a") == "a'a"
        assert glottalize_vowel("ai") == "a'i"

    def test_unglottalize(self):
        assert unglottalize_vowel("a'a") == "a"
        assert unglottalize_vowel("a'i") == "ai"
        assert unglottalize_vowel("ai'") == "ai"

    def test_split(self):
        assert split_glottal_vowel("a'") == ("a", True)
        assert split_glottal_vowel("e") == ("e", False)


class TestGlottalClusters:

    @pytest.mark.parametrize("cluster,plain", [
        ("'h", "h"),
        ("'hw", "hw"),
        ("tt", "t"),
        ("pss", "ps"),
        ("llw", "lw"),
        ("nnw", "tw"),
        ("mmy", "py"),
    ])
    def test_un_glottal(self, cluster, plain):
        assert is_glottal_ca(cluster)
        assert un_glottal_ca(cluster) == plain

    def test_plain_clusters_are_not_glottal(self):
        assert not is_glottal_ca("h")
        assert not is_glottal_ca("ll")
        assert not is_glottal_ca("rt")

    @pytest.mark.parametrize("cluster", glottal_clusters())
    def test_un_glottal_gives_a_plain_cluster(self, cluster):
        assert is_glottal_ca(cluster)
        plain = un_glottal_ca(cluster)
        assert len(plain) <= len(cluster)
        assert not is_glottal_ca(plain)


class TestGemination:

    @pytest.mark.parametrize("cluster,plain", [
        ("pp", "p"),
        ("ggw", "gw"),
        ("mmtw", "mtw"),
        ("tççkl", "tçkl"),
        ("ẓw", "cw"),
        ("jtw", "čtw"),
        ("gd", "kt"),
        ("jn", "dn"),
    ])
    def test_un_geminate(self, cluster, plain):
        assert is_geminate_ca(cluster)
        assert un_geminate_ca(cluster) == plain

    @pytest.mark.parametrize("cluster", ["l", "rtř", "rf", "dn"])
    def test_not_geminate(self, cluster):
        assert not is_geminate_ca(cluster)

    @pytest.mark.parametrize("cluster", geminated_ca_clusters())
    def test_un_geminate_gives_a_plain_cluster(self, cluster):
        assert is_geminate_ca(cluster)
        plain = un_geminate_ca(cluster)
        assert not is_geminate_ca(plain)
        assert un_geminate_ca(plain) == plain

    def test_plain_ca_clusters_are_decodable(self):
        clusters = plain_ca_clusters()
        assert {"l", "rtř", "s", "d"} <= set(clusters)
        assert all(parse_ca(c) is not None for c in clusters)
