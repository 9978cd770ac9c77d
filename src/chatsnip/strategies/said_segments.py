"""Strategy for two-party "You:" / "ChatGPT:" segments.

Catches transcripts where the role markers are indented or do not start
the text, which the line-anchored prefix strategy misses.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chatsnip.normalizer import is_speaker_label
from chatsnip.scoring import looks_like_user
from chatsnip.strategies.base import append_message

if TYPE_CHECKING:
    from chatsnip.models import Message, Thresholds

_SEGMENT_PATTERN = re.compile(r"You:\s+.*\n\s*ChatGPT:")

_SEGMENT_SPLIT = re.compile(r"\n\s*(You|ChatGPT):\s*")

_INLINE_MARKER = re.compile(r"(You|ChatGPT):\s*")

_MIN_PREAMBLE_LENGTH = 3


class SaidSegmentStrategy:
    """Accumulate content between role tokens, flushing on a role switch."""

    name: str = "said_segments"
    priority: int = 50

    def matches(self, text: str) -> bool:
        return bool(_SEGMENT_PATTERN.search(text))

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        head, *tokens = _SEGMENT_SPLIT.split(text)

        messages: list[Message] = []
        buffer: list[str] = []
        is_user: bool | None = None

        marker = _INLINE_MARKER.search(head)
        preamble = head[: marker.start()] if marker else head
        preamble = preamble.strip()
        if len(preamble) > _MIN_PREAMBLE_LENGTH and not is_speaker_label(preamble):
            append_message(messages, looks_like_user(preamble, thresholds), preamble)
        if marker:
            is_user = marker.group(1) == "You"
            buffer.append(head[marker.end() :])

        for role, content in zip(tokens[0::2], tokens[1::2], strict=True):
            role_is_user = role == "You"
            if is_user is not None and role_is_user != is_user:
                _flush(messages, is_user, buffer)
                buffer = []
            is_user = role_is_user
            buffer.append(content)

        if is_user is not None:
            _flush(messages, is_user, buffer)
        return messages


def _flush(messages: list[Message], is_user: bool, buffer: list[str]) -> None:
    parts = [part.strip() for part in buffer if part.strip()]
    append_message(messages, is_user, "\n".join(parts))


# Module-level strategy instance for autodiscovery
strategy = SaidSegmentStrategy()
