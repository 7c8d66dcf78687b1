"""Tests for typespeed.core.scoring – mistakes, WPM and accuracy."""

from __future__ import annotations

import pytest

from typespeed.core.scoring import (
    FinalStats,
    count_mistakes,
    count_words,
    final_stats,
    live_wpm,
    round_half_up,
    total_characters,
)


# ---------------------------------------------------------------------------
# count_mistakes
# ---------------------------------------------------------------------------

class TestCountMistakes:
    @pytest.mark.parametrize("s", ["", "a", "Hello world.", "  spaced  "])
    def test_identity_is_zero(self, s: str):
        assert count_mistakes(s, s) == 0

    def test_single_substitution(self):
        assert count_mistakes("cat", "cot") == 1

    def test_all_different(self):
        assert count_mistakes("abc", "xyz") == 3

    def test_missing_tail_counts_each_position(self):
        assert count_mistakes("abc", "abcdef") == 3

    def test_against_empty(self):
        assert count_mistakes("", "abcd") == 4

    def test_insertion_shifts_every_later_position(self):
        # Position-wise comparison: one extra character misaligns the rest.
        assert count_mistakes("xabcd", "abcd") == 5

    def test_transposition_counts_two(self):
        assert count_mistakes("ab", "ba") == 2

    @pytest.mark.parametrize(
        "a,b",
        [("abc", "abd"), ("short", "much longer"), ("", "x"), ("Hello.", "hello!")],
    )
    def test_symmetric(self, a: str, b: str):
        assert count_mistakes(a, b) == count_mistakes(b, a)

    @pytest.mark.parametrize(
        "a,b",
        [("abc", "abcdef"), ("hello", "help"), ("", "four"), ("same", "same")],
    )
    def test_at_least_length_difference(self, a: str, b: str):
        assert count_mistakes(a, b) >= abs(len(a) - len(b))


# ---------------------------------------------------------------------------
# count_words
# ---------------------------------------------------------------------------

class TestCountWords:
    def test_empty(self):
        assert count_words("") == 0

    def test_whitespace_only(self):
        assert count_words("   \t ") == 0

    def test_simple(self):
        assert count_words("Hello world.") == 2

    def test_runs_of_whitespace(self):
        assert count_words("  one   two\tthree\n") == 3

    def test_partial_word_counts(self):
        assert count_words("Hel") == 1


# ---------------------------------------------------------------------------
# round_half_up
# ---------------------------------------------------------------------------

class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3

    def test_negative_half_rounds_towards_positive(self):
        assert round_half_up(-2.5) == -2

    def test_below_half(self):
        assert round_half_up(2.49) == 2

    def test_returns_int(self):
        assert isinstance(round_half_up(1.0), int)


# ---------------------------------------------------------------------------
# live_wpm
# ---------------------------------------------------------------------------

class TestLiveWpm:
    def test_zero_elapsed_is_zero(self):
        assert live_wpm(50, 0) == 0

    def test_basic(self):
        # 2 words in 2 seconds -> 60 wpm
        assert live_wpm(2, 2) == 60

    def test_rounding(self):
        # 1 word in 7 seconds -> 8.57 -> 9
        assert live_wpm(1, 7) == 9

    def test_half_rounds_up(self):
        # 1 word in 24 seconds -> 2.5 -> 3
        assert live_wpm(1, 24) == 3

    def test_no_words(self):
        assert live_wpm(0, 30) == 0


# ---------------------------------------------------------------------------
# final_stats
# ---------------------------------------------------------------------------

class TestFinalStats:
    def test_total_characters_joins_with_spaces(self):
        assert total_characters(["Hello world.", "Testing now!"]) == 25

    def test_total_characters_empty(self):
        assert total_characters([]) == 0

    def test_perfect_run(self):
        stats = final_stats(2, 5, 0, ["Hello world.", "Testing now!"])
        assert stats == FinalStats(words_per_minute=24, accuracy=100)

    def test_accuracy_with_mistakes(self):
        # 25 chars, 5 mistakes -> 80%
        stats = final_stats(2, 5, 5, ["Hello world.", "Testing now!"])
        assert stats.accuracy == 80

    def test_accuracy_can_go_negative(self):
        stats = final_stats(1, 1, 20, ["Hi."])
        assert stats.accuracy == round_half_up((3 - 20) / 3 * 100)
        assert stats.accuracy < 0

    def test_zero_elapsed_gives_zero_wpm(self):
        assert final_stats(3, 0, 0, ["One two three."]).words_per_minute == 0

    def test_no_sentences_gives_zero_accuracy(self):
        assert final_stats(0, 10, 0, []).accuracy == 0

    def test_uses_given_word_count_not_a_total(self):
        # Only the last input's word count is used.
        stats = final_stats(1, 60, 0, ["A long first sentence here.", "Done."])
        assert stats.words_per_minute == 1
