"""Shared pytest fixtures for chatsnip tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chatsnip.config import get_settings

# 27 characters; repeated to build paragraphs of a known length
_FILLER = "lorem ipsum dolor sit amet "


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> None:
    """Ensure every test sees freshly loaded settings."""
    get_settings.cache_clear()


@pytest.fixture
def neutral_paragraph() -> Callable[[str], str]:
    """Build a paragraph that fires neither role heuristic.

    The result is 100-150 characters long with no question mark, request
    phrase, discourse marker or enumeration marker.
    """

    def _build(seed: str) -> str:
        paragraph = f"{seed} {_FILLER * 5}".strip()
        assert 100 <= len(paragraph) <= 150, paragraph
        return paragraph

    return _build


@pytest.fixture
def long_paragraph() -> Callable[[str], str]:
    """Build a paragraph that only fires the assistant heuristic (>150 chars)."""

    def _build(seed: str) -> str:
        paragraph = f"{seed} {_FILLER * 8}".strip()
        assert len(paragraph) > 150, paragraph
        return paragraph

    return _build
