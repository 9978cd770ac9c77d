"""Unit tests for chat-bubble HTML rendering."""

from __future__ import annotations

from selectolax.lexbor import LexborHTMLParser

from chatsnip.models import Message
from chatsnip.render.html_output import render_html

_MESSAGES = [
    Message(is_user=True, content="What is Rust?"),
    Message(is_user=False, content="Rust is a systems language.\n\nIt is fast."),
]


class TestRenderHtml:
    """Tests for render_html()."""

    def test_one_row_and_bubble_per_message(self) -> None:
        tree = LexborHTMLParser(render_html(_MESSAGES, "ChatGPT-4o"))
        assert len(tree.css("div.chat-container")) == 1
        assert len(tree.css("div.chat-row")) == 2
        assert [node.text() for node in tree.css("div.chat-bubble")] == [
            message.content for message in _MESSAGES
        ]

    def test_user_and_assistant_classes(self) -> None:
        tree = LexborHTMLParser(render_html(_MESSAGES, "ChatGPT-4o"))
        rows = tree.css("div.chat-row")
        assert rows[0].attributes["class"] == "chat-row user"
        assert rows[1].attributes["class"] == "chat-row"
        assert tree.css_first("div.chat-bubble.user").text() == "What is Rust?"
        assert tree.css_first("div.chat-bubble.agent") is not None

    def test_names_shown_per_role(self) -> None:
        tree = LexborHTMLParser(render_html(_MESSAGES, "Claude 3 Opus"))
        assert [node.text() for node in tree.css("div.chat-name")] == [
            "You",
            "Claude 3 Opus",
        ]

    def test_single_stylesheet_after_container(self) -> None:
        output = render_html(_MESSAGES, "ChatGPT-4o")
        assert output.count("<style>") == 1
        assert output.index("</style>") > output.index('<div class="chat-container">')
        assert "white-space: pre-wrap" in output

    def test_markup_in_content_is_not_interpreted(self) -> None:
        messages = [
            Message(is_user=True, content="<img src=x onerror=alert(1)>"),
            Message(is_user=False, content="<script>alert('x')</script> & more"),
        ]
        output = render_html(messages, "ChatGPT-4o")
        tree = LexborHTMLParser(output)

        assert tree.css("img") == []
        assert tree.css("script") == []
        assert "&lt;img src=x onerror=alert(1)&gt;" in output
        assert [node.text() for node in tree.css("div.chat-bubble")] == [
            "<img src=x onerror=alert(1)>",
            "<script>alert('x')</script> & more",
        ]

    def test_assistant_name_is_escaped(self) -> None:
        messages = [Message(is_user=False, content="Hello")]
        output = render_html(messages, '<b onclick="x">Bot</b>')
        tree = LexborHTMLParser(output)

        assert tree.css("b") == []
        assert tree.css_first("div.chat-name").text() == '<b onclick="x">Bot</b>'

    def test_empty_conversation_renders_empty_container(self) -> None:
        tree = LexborHTMLParser(render_html([], "ChatGPT-4o"))
        assert len(tree.css("div.chat-container")) == 1
        assert tree.css("div.chat-row") == []

    def test_output_is_deterministic(self) -> None:
        assert render_html(_MESSAGES, "GPT-4") == render_html(_MESSAGES, "GPT-4")
