"""Unit tests for the "User:" / "Assistant:" prefix strategy."""

from __future__ import annotations

import logging

import pytest

from chatsnip.models import DEFAULT_THRESHOLDS, Message
from chatsnip.strategies.explicit_prefix import ExplicitPrefixStrategy


class TestExplicitPrefixMatches:
    """Tests for prefix detection."""

    @pytest.mark.parametrize(
        "label", ["User", "You", "AI", "Assistant", "ChatGPT", "Claude", "Gemini"]
    )
    def test_matches_each_label(self, label: str) -> None:
        assert ExplicitPrefixStrategy().matches(f"Intro line\n{label}: hello") is True

    def test_matches_case_insensitively(self) -> None:
        assert ExplicitPrefixStrategy().matches("user: hello") is True

    def test_prefix_must_start_a_line(self) -> None:
        assert ExplicitPrefixStrategy().matches("He wrote User: hello") is False
        assert ExplicitPrefixStrategy().matches("  User: hello") is False


class TestExplicitPrefixExtract:
    """Tests for prefix extraction."""

    def test_two_party_exchange(self) -> None:
        messages = ExplicitPrefixStrategy().extract(
            "You: Hello\n\nChatGPT: Hi there", DEFAULT_THRESHOLDS
        )
        assert messages == [
            Message(is_user=True, content="Hello"),
            Message(is_user=False, content="Hi there"),
        ]

    def test_content_spans_lines_until_next_prefix(self) -> None:
        text = "User: line one\nline two\nAssistant: answer\n\nmore answer"
        messages = ExplicitPrefixStrategy().extract(text, DEFAULT_THRESHOLDS)
        assert messages == [
            Message(is_user=True, content="line one\nline two"),
            Message(is_user=False, content="answer\n\nmore answer"),
        ]

    def test_label_on_its_own_line(self) -> None:
        text = "You:\nHello there friend\n\nChatGPT:\nHi there, how can I help?"
        messages = ExplicitPrefixStrategy().extract(text, DEFAULT_THRESHOLDS)
        assert messages == [
            Message(is_user=True, content="Hello there friend"),
            Message(is_user=False, content="Hi there, how can I help?"),
        ]

    def test_non_user_labels_are_assistant(self) -> None:
        text = "user: hi there\nCLAUDE: hello\nGemini: hey\nAI: yo"
        messages = ExplicitPrefixStrategy().extract(text, DEFAULT_THRESHOLDS)
        assert [message.is_user for message in messages] == [True, False, False, False]

    def test_preamble_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        text = "Transcript export\nUser: hi there\nAI: hello there"
        with caplog.at_level(logging.DEBUG, logger="chatsnip.strategies"):
            messages = ExplicitPrefixStrategy().extract(text, DEFAULT_THRESHOLDS)
        assert [message.content for message in messages] == ["hi there", "hello there"]
        assert "before the first role prefix" in caplog.text

    def test_empty_content_dropped(self) -> None:
        messages = ExplicitPrefixStrategy().extract(
            "User:\nAssistant: hello there", DEFAULT_THRESHOLDS
        )
        assert messages == [Message(is_user=False, content="hello there")]
