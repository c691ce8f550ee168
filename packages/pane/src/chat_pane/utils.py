"""
Terminal text utilities for the chat pane.

Provides:
- char_width(): terminal column width of a single glyph (always >= 1)
- split_graphemes(): group combining marks with their base character
- decode_entities(): best-effort HTML character-entity decoding
- expand_tabs(): tab normalisation used before cells are built
"""
from __future__ import annotations

import html
import unicodedata

from wcwidth import wcwidth

_JOINERS = (0x200D, 0xFE0F, 0x20E3)
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)
_SKIN_TONES = range(0x1F3FB, 0x1F400)

# Marks, enclosing marks and zero-width format characters ride on their base
_ATTACHED_CATEGORIES = ("Mn", "Me", "Cf")


def _could_be_emoji(cp: int, glyph: str) -> bool:
    return (
        (0x1f000 <= cp <= 0x1fbff) or
        (0x2300 <= cp <= 0x23ff) or
        (0x2600 <= cp <= 0x27bf) or
        (0x2b50 <= cp <= 0x2b55) or
        "\ufe0f" in glyph or
        "\u200d" in glyph
    )


def char_width(glyph: str) -> int:
    """
    Display width of one glyph (a grapheme cluster) in terminal columns.

    Never returns less than 1: zero-width or unknown glyphs still take
    a cell of their own once they reach the grid.
    """
    if not glyph:
        return 1

    cp = ord(glyph[0])

    if _could_be_emoji(cp, glyph):
        # ZWJ sequences, flags, skin tones
        if len(glyph) > 1:
            return 2
        if wcwidth(glyph[0]) == 2 or 0x1f000 <= cp <= 0x1fbff:
            return 2

    w = wcwidth(glyph[0])
    if w < 1:
        return 1
    return w


def split_graphemes(text: str) -> list[str]:
    """Segment text into glyphs, attaching combining marks to their base."""
    if not text:
        return []
    clusters: list[str] = []
    i = 0
    while i < len(text):
        cluster = text[i]
        i += 1
        # Flags are pairs of regional indicators
        if ord(cluster) in _REGIONAL_INDICATORS and i < len(text) and ord(text[i]) in _REGIONAL_INDICATORS:
            cluster += text[i]
            i += 1
        while i < len(text):
            ch = text[i]
            cp = ord(ch)
            if unicodedata.category(ch) in _ATTACHED_CATEGORIES or cp in _JOINERS or cp in _SKIN_TONES:
                cluster += ch
                i += 1
                # A ZWJ glues the following codepoint onto the cluster
                if cp == 0x200D and i < len(text):
                    cluster += text[i]
                    i += 1
            else:
                break
        clusters.append(cluster)
    return clusters


def decode_entities(raw: str) -> str:
    """Decode HTML character entities; anything malformed is kept as-is."""
    if "&" not in raw:
        return raw
    return html.unescape(raw)


def expand_tabs(text: str, tab_width: int = 3) -> str:
    if "\t" not in text:
        return text
    return text.replace("\t", " " * tab_width)
