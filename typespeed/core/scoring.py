from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class FinalStats:
    """Summary shown once every sentence has been typed."""

    words_per_minute: int
    accuracy: int


def count_mistakes(typed: str, target: str) -> int:
    """Position-wise mismatch count between *typed* and *target*.

    Every index up to the longer string's length is compared; an index past the
    end of either string counts as a mismatch. No alignment is attempted, so a
    single inserted or dropped character shifts and counts every later position.
    """
    mistakes = 0
    for i in range(max(len(typed), len(target))):
        a = typed[i] if i < len(typed) else None
        b = target[i] if i < len(target) else None
        if a != b:
            mistakes += 1
    return mistakes


def count_words(text: str) -> int:
    """Number of whitespace-delimited words in *text*."""
    return len(text.split())


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def _per_minute(words: int, elapsed_seconds: int) -> int:
    if elapsed_seconds <= 0:
        return 0
    return round_half_up(words / elapsed_seconds * 60)


def live_wpm(words_typed: int, elapsed_seconds: int) -> int:
    """Words per minute for the in-progress input, 0 before the first second."""
    return _per_minute(words_typed, elapsed_seconds)


def total_characters(sentences: Sequence[str]) -> int:
    """Length of all sentences joined by single spaces."""
    return len(" ".join(sentences))


def final_stats(
    words_typed: int,
    elapsed_seconds: int,
    mistakes: int,
    sentences: Sequence[str],
) -> FinalStats:
    """Final WPM and accuracy.

    ``words_typed`` is whatever the last in-flight input held, not a session
    total. Accuracy is not clamped and can fall below zero when mistakes
    outnumber the characters of the text.
    """
    total_chars = total_characters(sentences)
    if total_chars == 0:
        accuracy = 0
    else:
        accuracy = round_half_up((total_chars - mistakes) / total_chars * 100)
    return FinalStats(
        words_per_minute=_per_minute(words_typed, elapsed_seconds),
        accuracy=accuracy,
    )
