"""Tests for chat_pane.utils — glyph widths and text normalisation"""
import pytest

from chat_pane.utils import (
    char_width,
    decode_entities,
    expand_tabs,
    split_graphemes,
)


def columns(text):
    return sum(char_width(g) for g in split_graphemes(text))


class TestCharWidth:
    def test_ascii(self):
        assert char_width("a") == 1

    def test_cjk_is_wide(self):
        assert char_width("中") == 2

    def test_emoji_is_wide(self):
        assert char_width("\U0001f600") == 2

    def test_zwj_sequence_is_wide(self):
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        (glyph,) = split_graphemes(family)
        assert char_width(glyph) == 2

    def test_combining_cluster_is_narrow(self):
        assert char_width("e\u0301") == 1

    def test_stacked_combining_marks_stay_narrow(self):
        assert char_width("a\u0301\u0302") == 1

    def test_flag_is_one_wide_glyph(self):
        (flag,) = split_graphemes("\U0001f1fa\U0001f1f8")
        assert char_width(flag) == 2

    @pytest.mark.parametrize("glyph", ["\x07", "\x00", "\u200b", ""])
    def test_never_below_one(self, glyph):
        assert char_width(glyph) == 1


class TestSplitGraphemes:
    def test_plain(self):
        assert split_graphemes("abc") == ["a", "b", "c"]

    def test_empty(self):
        assert split_graphemes("") == []

    def test_combining_mark_attached(self):
        assert split_graphemes("e\u0301x") == ["e\u0301", "x"]

    def test_variation_selector_attached(self):
        assert split_graphemes("❤\ufe0f!") == ["❤\ufe0f", "!"]

    def test_skin_tone_modifier_attached(self):
        assert split_graphemes("\U0001f44d\U0001f3fd!") == ["\U0001f44d\U0001f3fd", "!"]

    @pytest.mark.parametrize("fmt", ["\u200b", "\u200f", "\u2060", "\u00ad"])
    def test_format_character_attached(self, fmt):
        assert split_graphemes(f"a{fmt}b") == [f"a{fmt}", "b"]


class TestColumns:
    def test_ascii(self):
        assert columns("hello") == 5

    def test_empty(self):
        assert columns("") == 0

    def test_mixed(self):
        assert columns("hi中") == 4

    def test_skin_tone_emoji(self):
        assert columns("\U0001f44d\U0001f3fd") == 2

    def test_zero_width_format_characters_add_nothing(self):
        assert columns("a\u200bb\u200fc\u2060d") == 4


class TestDecodeEntities:
    def test_named_entities(self):
        assert decode_entities("a &amp; b &lt;c&gt;") == "a & b <c>"

    def test_numeric_entities(self):
        assert decode_entities("it&#39;s") == "it's"

    def test_malformed_passes_through(self):
        assert decode_entities("&bogus; & &#xZZ;") == "&bogus; & &#xZZ;"

    def test_no_entities(self):
        assert decode_entities("plain") == "plain"


class TestExpandTabs:
    def test_default_width(self):
        assert expand_tabs("a\tb") == "a   b"

    def test_custom_width(self):
        assert expand_tabs("\t", 2) == "  "
