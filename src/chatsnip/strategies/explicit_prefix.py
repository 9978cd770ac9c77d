"""Strategy for transcripts with "User:" / "Assistant:" line prefixes."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chatsnip.strategies.base import append_message, is_user_label

if TYPE_CHECKING:
    from chatsnip.models import Message, Thresholds

logger = logging.getLogger(__name__)

_PREFIX_PATTERN = re.compile(
    r"^(User|You|AI|Assistant|ChatGPT|Claude|Gemini):",
    re.IGNORECASE | re.MULTILINE,
)


class ExplicitPrefixStrategy:
    """Split text at role prefixes that start a line."""

    name: str = "explicit_prefix"
    priority: int = 20

    def matches(self, text: str) -> bool:
        return bool(_PREFIX_PATTERN.search(text))

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        """Take each run from one prefix up to the next prefix or end of text.

        Text before the first prefix is not part of any turn and is dropped.
        """
        prefixes = list(_PREFIX_PATTERN.finditer(text))
        if prefixes and text[: prefixes[0].start()].strip():
            logger.debug(
                "Dropping %d characters before the first role prefix",
                prefixes[0].start(),
            )

        messages: list[Message] = []
        for index, prefix in enumerate(prefixes):
            end = prefixes[index + 1].start() if index + 1 < len(prefixes) else None
            content = text[prefix.end() : end]
            append_message(messages, is_user_label(prefix.group(1)), content)
        return messages


# Module-level strategy instance for autodiscovery
strategy = ExplicitPrefixStrategy()
