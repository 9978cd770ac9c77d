"""Chat-bubble HTML rendering.

Produces a self-contained fragment: one container, a row and bubble per
message, and a single inline stylesheet. All message text and the
assistant name are escaped, so pasted markup is shown literally rather
than interpreted.
"""

from __future__ import annotations

import html as html_module
from typing import TYPE_CHECKING

from chatsnip.models import USER_DISPLAY_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chatsnip.models import Message

_STYLESHEET = """<style>
  .chat-container {
    font-family: system-ui, -apple-system, BlinkMacSystemFont, sans-serif;
    max-width: 800px;
    margin: 0 auto;
    padding: 20px;
  }
  .chat-row {
    display: flex;
    flex-direction: column;
    margin-bottom: 16px;
    align-items: flex-start;
  }
  .chat-row.user {
    align-items: flex-end;
  }
  .chat-name {
    font-size: 12px;
    color: #666;
    margin-bottom: 4px;
  }
  .chat-bubble {
    padding: 12px 16px;
    border-radius: 18px;
    max-width: 80%;
    white-space: pre-wrap;
    background-color: #f0f0f0;
  }
  .chat-bubble.user {
    background-color: #1e88e5;
    color: white;
  }
  .chat-bubble.agent {
    background-color: #f0f0f0;
    color: #333;
  }
</style>"""


def _render_row(message: Message, assistant_name: str) -> list[str]:
    if message.is_user:
        row_class, bubble_class = "chat-row user", "chat-bubble user"
        name = USER_DISPLAY_NAME
    else:
        row_class, bubble_class = "chat-row", "chat-bubble agent"
        name = html_module.escape(assistant_name)
    content = html_module.escape(message.content)
    return [
        f'  <div class="{row_class}">',
        f'    <div class="chat-name">{name}</div>',
        f'    <div class="{bubble_class}">{content}</div>',
        "  </div>",
    ]


def render_html(messages: Iterable[Message], assistant_name: str) -> str:
    """Render messages as chat bubbles.

    User rows are right-aligned and labelled "You"; assistant rows are
    labelled with ``assistant_name``.

    Args:
        messages: Messages in conversation order.
        assistant_name: Display name for assistant messages.

    Returns:
        HTML fragment followed by the stylesheet.
    """
    lines = ['<div class="chat-container">']
    for message in messages:
        lines.extend(_render_row(message, assistant_name))
    lines.append("</div>")
    lines.append(_STYLESHEET)
    return "\n".join(lines)
