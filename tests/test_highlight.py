"""Tests for typespeed.ui.highlight – per-character sentence colouring."""

from __future__ import annotations

from typespeed.ui.colors import DarkColors
from typespeed.ui.highlight import CharStyle, char_styles, render_sentence_html, upcoming_color

M, E, U = CharStyle.MATCH, CharStyle.ERROR, CharStyle.UPCOMING


# ===========================================================================
# char_styles
# ===========================================================================

class TestCharStyles:
    def test_nothing_typed(self):
        assert char_styles("abc", "") == [U, U, U]

    def test_all_matched(self):
        assert char_styles("abc", "abc") == [M, M, M]

    def test_mismatch_in_middle(self):
        assert char_styles("abcd", "axc") == [M, E, M, U]

    def test_typed_longer_than_target(self):
        assert char_styles("ab", "abzz") == [M, M]

    def test_empty_target(self):
        assert char_styles("", "abc") == []

    def test_case_sensitive(self):
        assert char_styles("Hi", "hi") == [E, M]


# ===========================================================================
# upcoming_color
# ===========================================================================

class TestUpcomingColor:
    def test_full_opacity_is_text_color(self):
        assert upcoming_color(100) == DarkColors.TEXT.upper()

    def test_zero_opacity_is_background(self):
        assert upcoming_color(0) == DarkColors.BG.upper()

    def test_partial_opacity_differs_from_both(self):
        c = upcoming_color(40)
        assert c not in (DarkColors.TEXT.upper(), DarkColors.BG.upper())


# ===========================================================================
# render_sentence_html
# ===========================================================================

class TestRenderSentenceHtml:
    def test_empty_target(self):
        assert render_sentence_html("", "x", 40) == ""

    def test_runs_are_grouped(self):
        out = render_sentence_html("Hello.", "Hex", 40)
        assert f'<span style="color:{DarkColors.TEXT};">He</span>' in out
        assert f'<span style="color:{DarkColors.ERROR};">l</span>' in out
        assert f'<span style="color:{upcoming_color(40)};">lo.</span>' in out

    def test_html_is_escaped(self):
        out = render_sentence_html("a<b & c>.", "", 100)
        assert "a&lt;b &amp; c&gt;." in out
        assert "<b " not in out

    def test_whitespace_preserved(self):
        out = render_sentence_html("a  b.", "", 40)
        assert "white-space:pre-wrap" in out
        assert "a  b." in out
