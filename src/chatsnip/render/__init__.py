"""Renderers that turn a classified conversation into shareable markup.

Usage:
    from chatsnip.render import render

    html = render(conversation, "ChatGPT-4o", "html")
    markdown = render(conversation, "ChatGPT-4o", "markdown")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from chatsnip.render.html_output import render_html
from chatsnip.render.markdown_output import render_markdown

if TYPE_CHECKING:
    from chatsnip.models import Conversation

__all__ = [
    "OUTPUT_FORMATS",
    "OutputFormat",
    "render",
    "render_html",
    "render_markdown",
]

OUTPUT_FORMATS = ("html", "markdown")
OutputFormat = Literal["html", "markdown"]


def render(
    conversation: Conversation,
    assistant_name: str,
    output_format: OutputFormat = "html",
) -> str:
    """Render a conversation in the requested format.

    Args:
        conversation: Classified conversation.
        assistant_name: Display name for assistant messages.
        output_format: "html" or "markdown".

    Returns:
        The rendered transcript.

    Raises:
        ValueError: If the output format is not supported.
    """
    if output_format == "html":
        return render_html(conversation.messages, assistant_name)
    if output_format == "markdown":
        return render_markdown(conversation.messages, assistant_name)
    msg = (
        f"Unsupported output format: {output_format!r} "
        f"(expected one of {', '.join(OUTPUT_FORMATS)})"
    )
    raise ValueError(msg)
