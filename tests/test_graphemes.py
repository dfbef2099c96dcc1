"""
Tests for the grapheme segmenter: each boundary rule, the join invariant
and segmentation stability over catalog sequences.
"""

import random

import pytest

from mojipack_graphemes import (
    classify,
    count_graphemes,
    is_pictographic,
    is_single_grapheme,
    segment,
    EXTEND,
    JOINER,
    OTHER,
    PICTOGRAPHIC,
    REGIONAL,
)
from mojipack_symbols import default_table

FLAG_JP = "\U0001F1EF\U0001F1F5"
FLAG_GB = "\U0001F1EC\U0001F1E7"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
WAVE_MEDIUM = "\U0001F44B\U0001F3FD"
RED_HEART = "\u2764\ufe0f"
KEYCAP_HASH = "#\ufe0f\u20e3"
ENGLAND = "\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F"
TECHNOLOGIST_MEDIUM = "\U0001F468\U0001F3FD\u200d\U0001F4BB"


class TestClassify:
    @pytest.mark.parametrize(
        "ch,kind",
        [
            ("a", OTHER),
            ("#", OTHER),
            ("\u200d", JOINER),
            ("\U0001F1E6", REGIONAL),
            ("\U0001F1FF", REGIONAL),
            ("\U0001F3FB", EXTEND),
            ("\ufe0f", EXTEND),
            ("\U000E0067", EXTEND),
            ("\U000E007F", EXTEND),
            ("\u20e3", EXTEND),
            ("\U0001F600", PICTOGRAPHIC),
            ("\u2764", PICTOGRAPHIC),
        ],
    )
    def test_scalar_kinds(self, ch, kind):
        assert classify(ch) == kind

    def test_pictographic_edges(self):
        assert is_pictographic(0x00A9)
        assert not is_pictographic(0x0041)
        assert not is_pictographic(0x1F3FB)
        assert is_pictographic(0x1FAF8)
        assert not is_pictographic(0x10FFFF)


class TestSegmentRules:
    def test_empty(self):
        assert segment("") == ()
        assert count_graphemes("") == 0

    def test_plain_scalars_split(self):
        assert segment("abc") == ("a", "b", "c")

    def test_regional_indicators_pair(self):
        assert segment(FLAG_JP) == (FLAG_JP,)
        assert segment(FLAG_JP + FLAG_GB) == (FLAG_JP, FLAG_GB)

    def test_odd_regional_indicator_starts_new_cluster(self):
        lone = "\U0001F1E6"
        assert segment(FLAG_JP + lone) == (FLAG_JP, lone)
        assert segment(lone + FLAG_JP) == (lone + "\U0001F1EF", "\U0001F1F5")

    def test_zwj_chain(self):
        assert segment(FAMILY) == (FAMILY,)
        assert segment(FAMILY + FAMILY) == (FAMILY, FAMILY)

    def test_zwj_after_modifier(self):
        assert segment(TECHNOLOGIST_MEDIUM) == (TECHNOLOGIST_MEDIUM,)

    def test_zwj_does_not_join_plain_text(self):
        assert segment("a\u200db") == ("a\u200d", "b")
        assert segment("\U0001F468\u200dA") == ("\U0001F468\u200d", "A")

    def test_modifier_binds(self):
        assert segment(WAVE_MEDIUM) == (WAVE_MEDIUM,)

    def test_leading_extender_is_own_cluster(self):
        assert segment("\U0001F3FB") == ("\U0001F3FB",)
        assert segment("\U0001F3FB\U0001F3FB") == ("\U0001F3FB\U0001F3FB",)
        assert segment("\ufe0fa") == ("\ufe0f", "a")

    def test_variation_selector_binds(self):
        assert segment(RED_HEART + RED_HEART) == (RED_HEART, RED_HEART)

    def test_tag_sequence(self):
        assert segment(ENGLAND) == (ENGLAND,)
        assert segment(ENGLAND + FLAG_JP) == (ENGLAND, FLAG_JP)

    def test_keycap(self):
        assert segment(KEYCAP_HASH) == (KEYCAP_HASH,)
        assert segment("1" + KEYCAP_HASH) == ("1", KEYCAP_HASH)

    def test_result_is_reiterable(self):
        clusters = segment(FAMILY + "x")
        assert list(clusters) == list(clusters)

    def test_join_restores_text(self):
        text = "hi " + FAMILY + FLAG_GB + "\U0001F1E6" + KEYCAP_HASH + "\u200d"
        assert "".join(segment(text)) == text

    def test_is_single_grapheme(self):
        assert is_single_grapheme(ENGLAND)
        assert not is_single_grapheme("")
        assert not is_single_grapheme("ab")


class TestCatalogStability:
    def test_every_sequence_is_one_cluster(self):
        for code, seq in default_table():
            assert segment(seq) == (seq,), code

    def test_full_concatenation(self):
        table = default_table()
        text = "".join(table.sequences)
        assert segment(text) == table.sequences

    def test_random_pairs_do_not_merge(self):
        rng = random.Random(7)
        seqs = default_table().sequences
        for _ in range(2000):
            a = segment(rng.choice(seqs) + rng.choice(seqs))
            b = segment(rng.choice(seqs))
            assert segment("".join(a) + "".join(b)) == a + b
