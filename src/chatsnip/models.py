"""Data models for classified chat transcripts.

These are plain frozen dataclasses created fresh for every classification
call and consumed once by the renderers.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

Role = Literal["user", "assistant"]

# Heuristic tuning knobs used by the normalizer and the role scorer
SHORT_MESSAGE_THRESHOLD = 100
LONG_MESSAGE_THRESHOLD = 150
MIN_CONTENT_LENGTH = 3

# Labels offered by the model picker; "Custom" switches to free text
KNOWN_ASSISTANT_NAMES = ("ChatGPT-4o", "GPT-4", "Claude 3 Opus", "Gemini 1.5 Pro")
CUSTOM_ASSISTANT_CHOICE = "Custom"
DEFAULT_CUSTOM_NAME = "Assistant"
USER_DISPLAY_NAME = "You"


@dataclass(frozen=True)
class Thresholds:
    """Length thresholds for the role heuristics.

    Attributes:
        short_message: Spans shorter than this read as user-authored.
        long_message: Spans longer than this read as assistant-authored.
        min_content: Lines shorter than this are treated as UI fragments.
    """

    short_message: int = SHORT_MESSAGE_THRESHOLD
    long_message: int = LONG_MESSAGE_THRESHOLD
    min_content: int = MIN_CONTENT_LENGTH


DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class Message:
    """A single conversational turn.

    Attributes:
        is_user: True when the human user wrote the text.
        content: Trimmed, non-empty message text.
    """

    is_user: bool
    content: str

    @property
    def role(self) -> Role:
        return "user" if self.is_user else "assistant"


@dataclass(frozen=True)
class Conversation:
    """Ordered sequence of messages in inferred turn order.

    Attributes:
        messages: Messages in the order they appeared in the source text.
        strategy: Name of the classification strategy that produced the
            messages, or None for an empty conversation.
    """

    messages: tuple[Message, ...] = ()
    strategy: str | None = None

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __getitem__(self, index: int) -> Message:
        return self.messages[index]


def resolve_assistant_name(choice: str, custom: str = "") -> str:
    """Return the display name for the assistant picker selection.

    Args:
        choice: One of KNOWN_ASSISTANT_NAMES, "Custom", or any other label.
        custom: Free-text name used when ``choice`` is "Custom".

    Returns:
        The label to show next to assistant messages.
    """
    if choice == CUSTOM_ASSISTANT_CHOICE:
        return custom.strip() or DEFAULT_CUSTOM_NAME
    return choice
