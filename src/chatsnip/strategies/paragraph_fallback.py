"""Strategy that merges paragraphs into turns until a strong role flip.

Consecutive paragraphs from the same speaker (a long answer split over
several paragraphs) stay in one message. A new message starts only when
a paragraph carries a strong signal for the opposite role.
"""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, NamedTuple

from chatsnip.models import Message
from chatsnip.scoring import strong_signal
from chatsnip.strategies.base import has_paragraph_break, split_paragraphs

if TYPE_CHECKING:
    from chatsnip.models import Thresholds


class _FoldState(NamedTuple):
    messages: tuple[Message, ...]
    running: tuple[str, ...]
    is_user: bool


def _close(running: tuple[str, ...], is_user: bool) -> Message:
    return Message(is_user=is_user, content="\n\n".join(running))


def _step(state: _FoldState, item: tuple[str, bool | None]) -> _FoldState:
    paragraph, verdict = item
    if not state.running:
        # First paragraph seeds the running message, user unless told otherwise
        seed = True if verdict is None else verdict
        return _FoldState(state.messages, (paragraph,), seed)
    if verdict is not None and verdict != state.is_user:
        closed = _close(state.running, state.is_user)
        return _FoldState(state.messages + (closed,), (paragraph,), verdict)
    return state._replace(running=state.running + (paragraph,))


class ParagraphFallbackStrategy:
    """Greedy paragraph grouping driven by strong role signals."""

    name: str = "paragraph_fallback"
    priority: int = 60

    def matches(self, text: str) -> bool:
        return bool(text.strip()) and has_paragraph_break(text)

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        paragraphs = split_paragraphs(text)
        verdicts = [strong_signal(paragraph, thresholds) for paragraph in paragraphs]

        if all(verdict is None for verdict in verdicts):
            return [
                Message(is_user=index % 2 == 0, content=paragraph)
                for index, paragraph in enumerate(paragraphs)
            ]

        initial = _FoldState(messages=(), running=(), is_user=True)
        final = reduce(_step, zip(paragraphs, verdicts, strict=True), initial)
        if not final.running:
            return list(final.messages)
        return [*final.messages, _close(final.running, final.is_user)]


# Module-level strategy instance for autodiscovery
strategy = ParagraphFallbackStrategy()
