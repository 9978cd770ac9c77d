"""Block-quoted Markdown transcript rendering."""

from __future__ import annotations

import html as html_module
from typing import TYPE_CHECKING

from chatsnip.models import USER_DISPLAY_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chatsnip.models import Message

_SEPARATOR = ">"

# Backslash-escaped brackets can't open a link or image
_LINK_BRACKETS = str.maketrans({"[": r"\[", "]": r"\]"})


def _escape(text: str) -> str:
    # Entity-escape <, > and & so Markdown-to-HTML converters can't emit raw tags
    return html_module.escape(text, quote=False).translate(_LINK_BRACKETS)


def _quote_message(name: str, content: str) -> list[str]:
    first, *rest = content.split("\n")
    lines = [f"> **{name}**: {first}"]
    lines.extend(f"> {line}" for line in rest)
    return [line.rstrip() for line in lines]


def _collapse_separators(lines: list[str]) -> list[str]:
    """Collapse runs of bare '>' lines and drop any at the end."""
    collapsed: list[str] = []
    for line in lines:
        if line == _SEPARATOR and collapsed and collapsed[-1] == _SEPARATOR:
            continue
        collapsed.append(line)
    while collapsed and collapsed[-1] == _SEPARATOR:
        collapsed.pop()
    return collapsed


def render_markdown(messages: Iterable[Message], assistant_name: str) -> str:
    """Render messages as a block-quoted transcript.

    Each message becomes ``> **Name**: text`` with continuation lines
    prefixed by ``> ``. Consecutive messages are separated by a single
    bare ``>`` line; there is none after the last message.

    Args:
        messages: Messages in conversation order.
        assistant_name: Display name for assistant messages.

    Returns:
        Markdown text without a trailing newline ("" for no messages).
    """
    lines: list[str] = []
    for message in messages:
        name = USER_DISPLAY_NAME if message.is_user else assistant_name
        if lines:
            lines.append(_SEPARATOR)
        lines.extend(_quote_message(_escape(name), _escape(message.content)))
    return "\n".join(_collapse_separators(lines))
