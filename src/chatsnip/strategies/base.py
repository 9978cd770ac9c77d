"""Shared helpers for classification strategies."""

from __future__ import annotations

import re

from chatsnip.models import Message

# Labels that mark the human side of a conversation
_USER_LABELS = frozenset({"you", "user"})

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def is_user_label(label: str) -> bool:
    """Return True if a role label names the human user."""
    return label.strip().casefold() in _USER_LABELS


def has_paragraph_break(text: str) -> bool:
    return bool(_PARAGRAPH_BREAK.search(text))


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    paragraphs = (part.strip() for part in _PARAGRAPH_BREAK.split(text))
    return [paragraph for paragraph in paragraphs if paragraph]


def append_message(messages: list[Message], is_user: bool, content: str) -> None:
    """Append a message unless its trimmed content is empty."""
    content = content.strip()
    if content:
        messages.append(Message(is_user=is_user, content=content))
