"""chatsnip - turn text copied from AI chat interfaces into shareable transcripts.

Infers which parts of a pasted conversation were written by the user and
which by the assistant, then renders the result as chat-bubble HTML or a
block-quoted Markdown transcript.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

__version__ = "0.1.0"

_logging_configured = False


def _setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure logging to the console and, optionally, a rotating file."""
    global _logging_configured
    if _logging_configured:
        return
    _logging_configured = True

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "chatsnip.log"

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    logging.info("Logging configured. Log file: %s", log_file.absolute())
