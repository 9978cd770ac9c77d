"""Heuristic role scoring for unlabelled spans of chat text.

The two predicates are independent: a span can read as both
user- and assistant-authored, or as neither. Callers decide what a
disagreement means; ``strong_signal`` collapses the pair for callers that
only act when exactly one predicate fires.
"""

from __future__ import annotations

import re

from chatsnip.models import DEFAULT_THRESHOLDS, Thresholds

_REQUEST_PATTERN = re.compile(
    r"\b(?:i want|i need|please|could you|can you)\b", re.IGNORECASE
)

_DISCOURSE_PATTERN = re.compile(
    r"\b(?:here[’']s|i[’']d be happy to|certainly|absolutely"
    r"|to answer your question|as requested|in summary|to summarize)\b",
    re.IGNORECASE,
)

_ENUMERATION_PATTERN = re.compile(
    r"\b(?:first|second|third|finally|in conclusion|step 1|step 2)\b",
    re.IGNORECASE,
)


def looks_like_user(span: str, thresholds: Thresholds | None = None) -> bool:
    """Return True if the span reads like a user prompt.

    Fires on a trailing question mark, a request phrase ("please",
    "can you", ...), or a length below ``thresholds.short_message``.
    """
    limits = thresholds or DEFAULT_THRESHOLDS
    text = span.strip()
    if text.endswith("?"):
        return True
    if _REQUEST_PATTERN.search(text):
        return True
    return len(text) < limits.short_message


def looks_like_assistant(span: str, thresholds: Thresholds | None = None) -> bool:
    """Return True if the span reads like an assistant answer.

    Fires on a length above ``thresholds.long_message``, an explanatory
    discourse marker ("certainly", "in summary", ...), or an enumeration
    marker ("first", "step 1", ...).
    """
    limits = thresholds or DEFAULT_THRESHOLDS
    text = span.strip()
    if len(text) > limits.long_message:
        return True
    if _DISCOURSE_PATTERN.search(text):
        return True
    return bool(_ENUMERATION_PATTERN.search(text))


def strong_signal(span: str, thresholds: Thresholds | None = None) -> bool | None:
    """Collapse both predicates into a single verdict.

    Returns:
        True for user, False for assistant, or None when both or neither
        predicate fires.
    """
    user = looks_like_user(span, thresholds)
    assistant = looks_like_assistant(span, thresholds)
    if user == assistant:
        return None
    return user
