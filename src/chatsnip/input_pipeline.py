"""Input adapter: turn pasted clipboard content into plain chat text.

Browsers put both an HTML and a plain-text flavour on the clipboard. The
classifier works on plain text, so HTML input is flattened here with
block elements becoming paragraph breaks. No provider-specific selectors
are applied; screen-reader labels such as "You said:" are kept because
the classifier keys on them.
"""

# Pattern: Functional Core (pure functions for content detection and transformation)

from __future__ import annotations

import logging
import re
from typing import Any, Literal

from selectolax.lexbor import LexborHTMLParser

logger = logging.getLogger(__name__)

# Content types supported by the pipeline
CONTENT_TYPES = ("html", "text")
ContentType = Literal["html", "text"]

# Tags to skip entirely (never conversational content)
_SKIP_TAGS = frozenset(
    ("script", "style", "noscript", "template", "svg", "head", "title", "img")
)

# Block-level elements that start a new paragraph
_BLOCK_TAGS = frozenset(
    (
        "p",
        "div",
        "section",
        "article",
        "aside",
        "header",
        "footer",
        "main",
        "nav",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "ul",
        "ol",
        "li",
        "dl",
        "dt",
        "dd",
        "table",
        "tr",
        "blockquote",
        "figure",
        "figcaption",
        "hr",
    )
)

# Button captions that mark UI chrome rather than content
_ACTION_WORDS = ("copy", "share", "download")

# Whitespace pattern matching \s plus \u00a0 (nbsp)
_WHITESPACE_RUN = re.compile(r"[\s\u00a0]+")

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")

# Closing tags only: plain text that mentions "<div>" must stay plain text
_HTML_CLOSING_TAG = re.compile(
    r"</(div|p|span|pre|article|section|blockquote|h[1-6]|ul|ol|li|table|body)\s*>",
    re.IGNORECASE,
)


def _decode_bytes(content: bytes) -> str:
    """Decode clipboard bytes, accepting any byte sequence."""
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        # Fall back to latin-1 which accepts all byte values
        return content.decode("latin-1")


def detect_content_type(content: str | bytes) -> ContentType:
    """Detect whether pasted content is HTML or plain text.

    Args:
        content: Raw content (string or bytes).

    Returns:
        "html" when the content starts with a doctype/html tag or contains
        closing tags of common elements, otherwise "text".
    """
    if isinstance(content, bytes):
        content = _decode_bytes(content)

    stripped = content.lstrip()
    lower = stripped.lower()
    if lower.startswith("<!doctype") or lower.startswith("<html"):
        return "html"
    if _HTML_CLOSING_TAG.search(stripped):
        return "html"
    return "text"


def _is_action_button(node: Any) -> bool:
    text = (node.text() or "").strip().lower()
    return any(action in text for action in _ACTION_WORDS)


def _collect_segments(root: Any) -> list[tuple[str, bool]]:
    """Walk the DOM into (text, preformatted) segments in document order."""
    segments: list[tuple[str, bool]] = []

    def _walk(node: Any) -> None:
        tag = node.tag

        # Text node: selectolax uses "-text" as the tag
        if tag == "-text":
            text = node.text_content
            if not text:
                return
            parent = node.parent
            if (
                parent is not None
                and parent.tag in _BLOCK_TAGS
                and _WHITESPACE_RUN.fullmatch(text)
            ):
                return
            segments.append((_WHITESPACE_RUN.sub(" ", text), False))
            return

        if tag in _SKIP_TAGS:
            return
        if tag == "button" and _is_action_button(node):
            return
        if tag == "br":
            segments.append(("\n", False))
            return
        if tag == "pre":
            segments.append((node.text(deep=True) or "", True))
            return

        is_block = tag in _BLOCK_TAGS
        if is_block:
            segments.append(("\n\n", False))
        child = node.child
        while child is not None:
            _walk(child)
            child = child.next
        if is_block:
            segments.append(("\n\n", False))

    child = root.child
    while child is not None:
        _walk(child)
        child = child.next
    return segments


def _join_segments(segments: list[tuple[str, bool]]) -> str:
    """Join segments, trimming flowed lines and keeping <pre> indentation."""
    blocks: list[str] = []
    flowed: list[str] = []

    def _flush_flowed() -> None:
        if flowed:
            text = "".join(flowed)
            blocks.append("\n".join(line.strip() for line in text.split("\n")))
            flowed.clear()

    for text, preformatted in segments:
        if preformatted:
            _flush_flowed()
            lines = (line.rstrip() for line in text.strip("\n").split("\n"))
            blocks.append("\n\n" + "\n".join(lines) + "\n\n")
        else:
            flowed.append(text)
    _flush_flowed()

    return _EXCESS_BLANK_LINES.sub("\n\n", "".join(blocks)).strip()


def extract_text_from_html(html: str) -> str:
    """Flatten HTML to plain text with paragraph breaks between blocks.

    Rules:
    - script / style / noscript / template / svg / img → skipped
    - copy / share / download buttons → skipped
    - block elements → surrounded by blank lines
    - ``<br>`` → newline; ``<pre>`` → text kept verbatim
    - other whitespace runs (including ``\\u00a0``) → single space

    Args:
        html: HTML fragment or document.

    Returns:
        Plain text, or "" if the HTML has no text content.
    """
    if not html:
        return ""

    tree = LexborHTMLParser(html)
    root = tree.body if tree.body is not None else tree.root
    if root is None:
        return ""

    return _join_segments(_collect_segments(root))


def to_plain_text(
    content: str | bytes, content_type: ContentType | None = None
) -> str:
    """Convert pasted content to plain text for classification.

    Args:
        content: Clipboard or file content.
        content_type: Force "html" or "text"; detected when None.

    Returns:
        Plain text with LF line endings.
    """
    if isinstance(content, bytes):
        content = _decode_bytes(content)

    detected = content_type or detect_content_type(content)
    logger.debug("Input content type: %s", detected)

    if detected == "html":
        return extract_text_from_html(content)
    return content.replace("\r\n", "\n").replace("\r", "\n")
