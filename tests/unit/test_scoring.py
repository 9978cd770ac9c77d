"""Tests for the heuristic role scorer."""

from __future__ import annotations

import pytest

from chatsnip.models import Thresholds
from chatsnip.scoring import looks_like_assistant, looks_like_user, strong_signal


class TestLooksLikeUser:
    """Tests for looks_like_user()."""

    def test_trailing_question_mark(self) -> None:
        question = "Could the compiler " + "x" * 150 + " really do that?"
        assert looks_like_user(question) is True

    @pytest.mark.parametrize(
        "phrase", ["I want", "I need", "please", "could you", "can you"]
    )
    def test_request_phrases(self, phrase: str) -> None:
        text = f"{phrase.upper()} " + "y" * 200
        assert looks_like_user(text) is True

    def test_request_phrase_needs_word_boundary(self) -> None:
        text = "pleased " + "y" * 200
        assert looks_like_user(text) is False

    def test_just_below_short_threshold(self) -> None:
        assert looks_like_user("x" * 99) is True

    def test_exactly_short_threshold_is_not_short(self) -> None:
        assert looks_like_user("x" * 100) is False

    def test_length_ignores_surrounding_whitespace(self) -> None:
        assert looks_like_user("   " + "x" * 100 + "\n\n") is False

    def test_custom_threshold(self) -> None:
        thresholds = Thresholds(short_message=60)
        assert looks_like_user("x" * 59, thresholds) is True
        assert looks_like_user("x" * 60, thresholds) is False


class TestLooksLikeAssistant:
    """Tests for looks_like_assistant()."""

    def test_above_long_threshold(self) -> None:
        assert looks_like_assistant("x" * 151) is True

    def test_exactly_long_threshold_is_not_long(self) -> None:
        assert looks_like_assistant("x" * 150) is False

    @pytest.mark.parametrize(
        "marker",
        [
            "Here's",
            "Here’s",
            "I'd be happy to",
            "Certainly",
            "Absolutely",
            "To answer your question",
            "As requested",
            "In summary",
            "To summarize",
        ],
    )
    def test_discourse_markers(self, marker: str) -> None:
        assert looks_like_assistant(f"{marker}, it works.") is True

    @pytest.mark.parametrize(
        "marker",
        ["First", "second", "third", "Finally", "In conclusion", "Step 1", "step 2"],
    )
    def test_enumeration_markers(self, marker: str) -> None:
        assert looks_like_assistant(f"{marker} run the build.") is True

    def test_plain_short_text(self) -> None:
        assert looks_like_assistant("Thanks, that works.") is False

    def test_marker_inside_word_does_not_fire(self) -> None:
        assert looks_like_assistant("Firstly ignored, seconds later.") is False


class TestStrongSignal:
    """Tests for strong_signal() tie handling."""

    def test_user_only(self) -> None:
        assert strong_signal("How do I reverse a list?") is True

    def test_assistant_only(self) -> None:
        assert strong_signal("z" * 200) is False

    def test_both_fire(self) -> None:
        # Short (user) and contains "Certainly" (assistant)
        assert strong_signal("Certainly, happy to help") is None

    def test_neither_fires(self) -> None:
        assert strong_signal("x" * 120) is None
