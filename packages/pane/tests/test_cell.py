"""Tests for chat_pane.cell"""
import dataclasses

import pytest

from chat_pane.cell import Cell, blank, continuation, line_text, line_width


class TestCell:
    def test_width_measured_at_construction(self):
        assert Cell("a").width == 1
        assert Cell("中").width == 2
        assert Cell("\U0001f44d\U0001f3fd").width == 2

    def test_continuation_has_no_width(self):
        cell = continuation()
        assert cell.is_continuation
        assert cell.width == 0

    def test_width_not_an_init_argument(self):
        with pytest.raises(TypeError):
            Cell("a", "default", "default", 5)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Cell("a").width = 3

    def test_equality_ignores_cached_width(self):
        assert blank("black", "white") == Cell(" ", "black", "white")
        assert hash(blank()) == hash(Cell(" "))

    def test_line_helpers(self):
        line = (Cell("a"), Cell("中"), Cell("b"))
        assert line_width(line) == 4
        assert line_text(line) == "a中b"
