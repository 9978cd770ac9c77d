"""Whitespace and UI-label cleanup for pasted chat text.

Copying a chat out of a browser drags along role badges ("You",
"ChatGPT-4o") and button captions on their own lines. These are removed
here so the classifier only sees conversational content.
"""

# Pattern: Functional Core (pure functions, no I/O)

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from chatsnip.models import DEFAULT_THRESHOLDS, KNOWN_ASSISTANT_NAMES, Thresholds

logger = logging.getLogger(__name__)

_SPEAKER_LABEL = re.compile(
    r"(?:you|user|chatgpt(?:-\S+)?|claude|gemini|ai|assistant)",
    re.IGNORECASE,
)

# Model picker labels ("Claude 3 Opus", ...) also appear as UI badges
_KNOWN_LABELS = frozenset(name.casefold() for name in KNOWN_ASSISTANT_NAMES)

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


def is_speaker_label(text: str, extra_labels: Iterable[str] = ()) -> bool:
    """Return True if the text is nothing but a speaker badge.

    Args:
        text: Candidate line or paragraph.
        extra_labels: Additional labels (e.g. a custom model name) to treat
            as badges. Compared case-insensitively.
    """
    stripped = text.strip()
    if not stripped:
        return False
    if _SPEAKER_LABEL.fullmatch(stripped):
        return True
    folded = stripped.casefold()
    if folded in _KNOWN_LABELS:
        return True
    return any(folded == label.strip().casefold() for label in extra_labels)


def _clean_text(text: str) -> str:
    """Normalize line endings and strip trailing whitespace per line."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.rstrip() for line in text.split("\n")).strip()


def _collapse_blank_lines(text: str) -> str:
    return _EXCESS_BLANK_LINES.sub("\n\n", text).strip()


def _is_noise_line(
    line: str, min_content: int, extra_labels: tuple[str, ...]
) -> bool:
    stripped = line.strip()
    if not stripped:
        # Blank lines separate paragraphs
        return False
    if is_speaker_label(stripped, extra_labels):
        return True
    return len(stripped) < min_content


def normalize(
    raw: str,
    *,
    thresholds: Thresholds | None = None,
    assistant_labels: Iterable[str] = (),
) -> str:
    """Clean raw pasted text into canonical paragraph form.

    Steps:
    - Normalize line endings, strip trailing whitespace, trim.
    - Collapse 3+ consecutive newlines to exactly 2.
    - Drop lines that are only a speaker label or shorter than
      ``thresholds.min_content``, unless that would empty the text.
    - Re-collapse blank-line runs.

    Args:
        raw: Text as pasted by the user.
        thresholds: Optional threshold overrides.
        assistant_labels: Extra assistant labels to strip as UI badges.

    Returns:
        Normalized text, or "" for empty/whitespace-only input.
    """
    limits = thresholds or DEFAULT_THRESHOLDS
    labels = tuple(assistant_labels)

    text = _collapse_blank_lines(_clean_text(raw))
    if not text:
        return ""

    kept = [
        line
        for line in text.split("\n")
        if not _is_noise_line(line, limits.min_content, labels)
    ]
    filtered = _collapse_blank_lines("\n".join(kept))

    if not filtered:
        logger.debug("Label filtering would empty the input, keeping it unfiltered")
        return text

    return filtered
