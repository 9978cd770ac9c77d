"""Structure classification strategies for pasted chat text.

This module provides a Protocol + Registry pattern for the ordered list of
pattern-detection strategies ("You said:" markers, "User:" prefixes,
paragraph heuristics, ...). Strategies are tried in ascending priority and
the first whose precondition matches is used exclusively.

Usage:
    from chatsnip.strategies import classify

    conversation = classify(normalized_text)
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Protocol, runtime_checkable

from chatsnip.models import DEFAULT_THRESHOLDS, Conversation, Message, Thresholds
from chatsnip.strategies.single_message import SINGLE_MESSAGE, single_message

__all__ = ["ClassificationStrategy", "classify", "get_strategies", "get_strategy"]

logger = logging.getLogger(__name__)

# Registry of strategies, populated by autodiscovery
_strategies: dict[str, ClassificationStrategy] = {}


@runtime_checkable
class ClassificationStrategy(Protocol):
    """Protocol for a single structure-detection strategy.

    Each strategy must implement:
    - name: Identifier for the strategy (e.g., "said", "explicit_prefix")
    - priority: Position in the chain; lower runs first
    - matches(): Precondition check against normalized text
    - extract(): Split the text into messages
    """

    name: str
    priority: int

    def matches(self, text: str) -> bool:
        """Return True if this strategy should handle the text."""
        ...

    def extract(self, text: str, thresholds: Thresholds) -> list[Message]:
        """Split the text into messages in source order.

        May return an empty list; the caller then falls back to treating
        the whole text as one message.
        """
        ...


def _discover_strategies() -> None:
    """Auto-discover all strategies in this package.

    Scans for modules with a `strategy` attribute that implements
    ClassificationStrategy. Import failures are logged and skipped.
    """
    for _finder, name, _ispkg in pkgutil.iter_modules(__path__, f"{__name__}."):
        if name.endswith((".base", ".single_message")):
            continue
        try:
            module = importlib.import_module(name)
            if hasattr(module, "strategy"):
                strategy = module.strategy
                if isinstance(strategy, ClassificationStrategy):
                    _strategies[strategy.name] = strategy
                    logger.debug(
                        "Registered strategy: %s (priority %d)",
                        strategy.name,
                        strategy.priority,
                    )
                else:
                    logger.warning(
                        "Module %s has 'strategy' but doesn't implement "
                        "ClassificationStrategy",
                        name,
                    )
        except Exception:
            logger.exception("Failed to import strategy module: %s", name)


def get_strategies() -> list[ClassificationStrategy]:
    """Return registered strategies in the order they are tried."""
    return sorted(_strategies.values(), key=lambda strategy: strategy.priority)


def get_strategy(text: str) -> ClassificationStrategy | None:
    """Find the first strategy whose precondition matches the text.

    Args:
        text: Normalized chat text.

    Returns:
        The matching strategy, or None when only the single-message
        fallback applies.
    """
    for strategy in get_strategies():
        if strategy.matches(text):
            return strategy
    return None


def classify(text: str, *, thresholds: Thresholds | None = None) -> Conversation:
    """Infer the message sequence of normalized chat text.

    Args:
        text: Output of ``chatsnip.normalizer.normalize``.
        thresholds: Optional threshold overrides for the role heuristics.

    Returns:
        Conversation with at least one message for any non-blank text,
        or an empty Conversation for blank text.
    """
    if not text.strip():
        return Conversation()

    limits = thresholds or DEFAULT_THRESHOLDS

    strategy = get_strategy(text)
    if strategy is not None:
        messages = strategy.extract(text, limits)
        if messages:
            logger.debug(
                "Strategy %s produced %d messages", strategy.name, len(messages)
            )
            return Conversation(messages=tuple(messages), strategy=strategy.name)
        logger.debug(
            "Strategy %s matched but extracted nothing, using single message",
            strategy.name,
        )
    else:
        logger.debug("No strategy matched, using single message")

    return Conversation(
        messages=tuple(single_message(text, limits)), strategy=SINGLE_MESSAGE
    )


# Run autodiscovery on module import
_discover_strategies()
