"""Strategy that alternates roles per paragraph, overridden by strong signals."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, NamedTuple

from chatsnip.models import Message
from chatsnip.scoring import strong_signal
from chatsnip.strategies.base import split_paragraphs

if TYPE_CHECKING:
    from collections.abc import Callable

    from chatsnip.models import Thresholds


class _TurnState(NamedTuple):
    messages: tuple[Message, ...]
    is_user: bool


def _advance(thresholds: Thresholds) -> Callable[[_TurnState, str], _TurnState]:
    def step(state: _TurnState, paragraph: str) -> _TurnState:
        # Ties (both or neither heuristic) keep the expected turn
        verdict = strong_signal(paragraph, thresholds)
        is_user = state.is_user if verdict is None else verdict
        message = Message(is_user=is_user, content=paragraph)
        return _TurnState(state.messages + (message,), not is_user)

    return step


class ParagraphHeuristicStrategy:
    """One message per paragraph, turns flipping after every paragraph."""

    name: str = "paragraph_heuristic"
    priority: int = 40

    def matches(self, text: str) -> bool:
        return len(split_paragraphs(text)) >= 2

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        initial = _TurnState(messages=(), is_user=True)
        final = reduce(_advance(thresholds), split_paragraphs(text), initial)
        return list(final.messages)


# Module-level strategy instance for autodiscovery
strategy = ParagraphHeuristicStrategy()
