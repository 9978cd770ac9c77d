"""Command-line front end for chatsnip.

Reads pasted chat text (or clipboard HTML saved to a file) from a path or
stdin, classifies it and writes the rendered transcript to stdout or a
file. Status and errors go to stderr so the transcript can be piped.

Usage:
    chatsnip chat.txt --format markdown --model "Claude 3 Opus"
    pbpaste | chatsnip --model Custom --custom-name "My Bot" -o chat.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chatsnip import _setup_logging
from chatsnip.config import get_settings
from chatsnip.conversation import NoUsableTextError, classify_conversation
from chatsnip.input_pipeline import CONTENT_TYPES, to_plain_text
from chatsnip.models import (
    CUSTOM_ASSISTANT_CHOICE,
    KNOWN_ASSISTANT_NAMES,
    resolve_assistant_name,
)
from chatsnip.render import OUTPUT_FORMATS, render

console = Console(stderr=True, highlight=False)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for the chatsnip command."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="chatsnip",
        description="Convert text copied from an AI chat into HTML or Markdown.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File with the pasted conversation (default: read stdin)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=settings.render.format,
        help=f"Output format (default: {settings.render.format})",
    )
    parser.add_argument(
        "-m",
        "--model",
        default=settings.render.assistant_name,
        help=(
            "Assistant display name: one of the known models or "
            f"'{CUSTOM_ASSISTANT_CHOICE}' (default: {settings.render.assistant_name})"
        ),
    )
    parser.add_argument(
        "--custom-name",
        default="",
        help=f"Display name used with --model {CUSTOM_ASSISTANT_CHOICE}",
    )
    parser.add_argument(
        "--input-format",
        choices=("auto", *CONTENT_TYPES),
        default="auto",
        help="Treat input as HTML or plain text (default: auto-detect)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Write output to a file"
    )
    parser.add_argument(
        "--list-models", action="store_true", help="List known model names and exit"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _print_models() -> None:
    table = Table(title="Known models")
    table.add_column("Name")
    for name in (*KNOWN_ASSISTANT_NAMES, CUSTOM_ASSISTANT_CHOICE):
        table.add_row(name)
    console.print(table)


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``chatsnip`` console script."""
    settings = get_settings()
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    level = "DEBUG" if args.verbose else settings.app.log_level
    _setup_logging(level, settings.app.log_dir)

    if args.list_models:
        _print_models()
        return

    try:
        raw = _read_input(args.input)
    except OSError as e:
        console.print(
            f"[red]Error:[/] cannot read {escape(args.input)}: {escape(str(e))}"
        )
        sys.exit(1)

    logger.debug("Read %d bytes from %s", len(raw), args.input)

    content_type = None if args.input_format == "auto" else args.input_format
    text = to_plain_text(raw, content_type)

    # The chosen name is also stripped when it appears alone as a UI badge
    assistant_name = resolve_assistant_name(args.model, args.custom_name)
    try:
        conversation = classify_conversation(
            text,
            thresholds=settings.classifier.to_thresholds(),
            assistant_labels=[*settings.classifier.assistant_labels, assistant_name],
        )
    except NoUsableTextError:
        console.print("[red]No usable text:[/] select some chat text and try again")
        sys.exit(1)

    output = render(conversation, assistant_name, args.format)

    if args.output is None:
        sys.stdout.write(output + "\n")
    else:
        args.output.write_text(output + "\n", encoding="utf-8")

    console.print(
        f"[green]{len(conversation)} messages[/] "
        f"({conversation.strategy}) rendered as {args.format}"
        + (f" to {escape(str(args.output))}" if args.output else "")
    )


if __name__ == "__main__":
    main()
