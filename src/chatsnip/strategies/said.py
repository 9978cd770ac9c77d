"""Strategy for "You said:" / "ChatGPT said:" role markers.

ChatGPT renders screen-reader headings such as "You said:" above every
turn; they survive a select-all copy and are the most reliable boundary
available in plain text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chatsnip.normalizer import is_speaker_label
from chatsnip.scoring import looks_like_user
from chatsnip.strategies.base import append_message, is_user_label

if TYPE_CHECKING:
    from chatsnip.models import Message, Thresholds

_ROLES = r"(?:You|ChatGPT|Claude|Gemini|AI|Assistant)"

_MARKER_PATTERN = re.compile(rf"\b{_ROLES}\s+said:", re.IGNORECASE)

# Zero-width split so each marker starts the next chunk
_CHUNK_SPLIT = re.compile(rf"(?=\b{_ROLES}\s+said:)", re.IGNORECASE)

_LEADING_MARKER = re.compile(rf"^({_ROLES})\s+said:", re.IGNORECASE)

# Unmarked leading chunks this short are discarded
_MIN_UNMARKED_LENGTH = 3


class SaidPatternStrategy:
    """Split text at "<Role> said:" markers."""

    name: str = "said"
    priority: int = 10

    def matches(self, text: str) -> bool:
        return bool(_MARKER_PATTERN.search(text))

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        """Build one message per marker-led chunk.

        Text before the first marker is kept only if it is more than a
        few characters and not a bare role label; its role is decided by
        the user heuristic.
        """
        messages: list[Message] = []
        for chunk in _CHUNK_SPLIT.split(text):
            chunk = chunk.strip()
            if not chunk:
                continue

            marker = _LEADING_MARKER.match(chunk)
            if marker:
                append_message(
                    messages, is_user_label(marker.group(1)), chunk[marker.end() :]
                )
                continue

            if len(chunk) > _MIN_UNMARKED_LENGTH and not is_speaker_label(chunk):
                append_message(messages, looks_like_user(chunk, thresholds), chunk)

        return messages


# Module-level strategy instance for autodiscovery
strategy = SaidPatternStrategy()
