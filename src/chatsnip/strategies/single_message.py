"""Last-resort classification: the whole text is one message."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatsnip.models import Message
from chatsnip.scoring import looks_like_user

if TYPE_CHECKING:
    from chatsnip.models import Thresholds

SINGLE_MESSAGE = "single_message"


def single_message(text: str, thresholds: Thresholds) -> list[Message]:
    """Wrap the entire text in one message.

    The role is user when the text reads like a user prompt, otherwise
    assistant. Returns an empty list only for blank text.
    """
    content = text.strip()
    if not content:
        return []
    return [Message(is_user=looks_like_user(content, thresholds), content=content)]
