"""Strategy for text copied straight out of a chat UI without labels.

When a selection starts with the user's question ("What is ...", "Can
you ...") the paragraphs are assumed to alternate strictly, user first.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chatsnip.models import Message
from chatsnip.normalizer import is_speaker_label
from chatsnip.strategies.base import split_paragraphs

if TYPE_CHECKING:
    from chatsnip.models import Thresholds

_OPENER_PATTERN = re.compile(
    r"(?:answer|what|how|why|when|is|can|could|would|should)\b", re.IGNORECASE
)


class DirectCopyStrategy:
    """Alternate roles over paragraphs of an interrogative-led selection."""

    name: str = "direct_copy"
    priority: int = 30

    def matches(self, text: str) -> bool:
        return bool(_OPENER_PATTERN.match(text.lstrip()))

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        paragraphs = [
            paragraph
            for paragraph in split_paragraphs(text)
            if not is_speaker_label(paragraph)
            and len(paragraph) >= thresholds.min_content
        ]
        return [
            Message(is_user=index % 2 == 0, content=paragraph)
            for index, paragraph in enumerate(paragraphs)
        ]


# Module-level strategy instance for autodiscovery
strategy = DirectCopyStrategy()
