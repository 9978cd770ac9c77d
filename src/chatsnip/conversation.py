"""Public entry point: classify raw pasted text into a conversation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chatsnip.normalizer import normalize
from chatsnip.strategies import classify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chatsnip.models import Conversation, Thresholds

logger = logging.getLogger(__name__)


class NoUsableTextError(ValueError):
    """Raised when the input is empty or whitespace-only."""


def classify_conversation(
    raw_text: str,
    *,
    thresholds: Thresholds | None = None,
    assistant_labels: Iterable[str] = (),
) -> Conversation:
    """Normalize and classify pasted chat text.

    Args:
        raw_text: Text as copied from a chat interface.
        thresholds: Optional threshold overrides for normalization and
            role scoring.
        assistant_labels: Extra assistant labels (e.g. a custom model
            name) to strip when they appear alone on a line.

    Returns:
        Conversation with at least one message.

    Raises:
        NoUsableTextError: If the input has no non-whitespace content.
    """
    if not raw_text or not raw_text.strip():
        msg = "No usable text provided: input is empty or whitespace-only"
        raise NoUsableTextError(msg)

    text = normalize(
        raw_text, thresholds=thresholds, assistant_labels=assistant_labels
    )
    conversation = classify(text, thresholds=thresholds)
    logger.debug(
        "Classified %d messages using %s", len(conversation), conversation.strategy
    )
    return conversation
