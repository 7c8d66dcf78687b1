"""Per-character highlighting of the sentence being typed."""

from __future__ import annotations

import html
from enum import Enum
from itertools import groupby
from typing import List

from typespeed.ui.colors import DarkColors, blend_hex


class CharStyle(Enum):
    MATCH = "match"
    ERROR = "error"
    UPCOMING = "upcoming"


def char_styles(target: str, typed: str) -> List[CharStyle]:
    """Style of each character of *target* given what has been *typed* so far.

    Characters at or beyond ``len(typed)`` are upcoming; the rest are matches
    or errors depending on the typed character at the same position.
    """
    styles = []
    for i, ch in enumerate(target):
        if i >= len(typed):
            styles.append(CharStyle.UPCOMING)
        elif ch != typed[i]:
            styles.append(CharStyle.ERROR)
        else:
            styles.append(CharStyle.MATCH)
    return styles


def upcoming_color(opacity: int) -> str:
    """Text color faded towards the background by *opacity* (0-100)."""
    return blend_hex(DarkColors.BG, DarkColors.TEXT, opacity / 100.0)


def render_sentence_html(target: str, typed: str, opacity: int) -> str:
    """Rich text for a QLabel, one span per run of equally styled characters."""
    if not target:
        return ""
    colors = {
        CharStyle.MATCH: DarkColors.TEXT,
        CharStyle.ERROR: DarkColors.ERROR,
        CharStyle.UPCOMING: upcoming_color(opacity),
    }
    parts = []
    pos = 0
    for style, run in groupby(char_styles(target, typed)):
        length = len(list(run))
        text = html.escape(target[pos:pos + length])
        pos += length
        parts.append(f'<span style="color:{colors[style]};">{text}</span>')
    return f'<span style="white-space:pre-wrap;">{"".join(parts)}</span>'
