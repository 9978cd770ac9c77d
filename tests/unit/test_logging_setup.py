"""Tests for chatsnip._setup_logging()."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import chatsnip
from chatsnip import _setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


class TestSetupLogging:
    """Console and rotating-file handlers on the root logger."""

    def test_file_handler_and_idempotence(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        monkeypatch.setattr(chatsnip, "_logging_configured", False)
        log_dir = tmp_path / "logs"

        try:
            _setup_logging("WARNING", log_dir)
            added = [handler for handler in root.handlers if handler not in before]

            file_handlers = [h for h in added if isinstance(h, RotatingFileHandler)]
            console_handlers = [
                h for h in added if not isinstance(h, RotatingFileHandler)
            ]
            assert len(file_handlers) == 1
            assert len(console_handlers) == 1
            assert file_handlers[0].maxBytes == 10 * 1024 * 1024
            assert file_handlers[0].backupCount == 5
            assert console_handlers[0].level == logging.WARNING

            logging.getLogger("chatsnip.test").debug("debug goes to the file")
            log_text = (log_dir / "chatsnip.log").read_text(encoding="utf-8")
            assert "Logging configured" in log_text
            assert "debug goes to the file" in log_text

            # A second call leaves the handlers alone
            _setup_logging("DEBUG", log_dir)
            assert [h for h in root.handlers if h not in before] == added
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(level)

    def test_console_only_without_log_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        monkeypatch.setattr(chatsnip, "_logging_configured", False)
        monkeypatch.chdir(tmp_path)

        try:
            _setup_logging("INFO")
            added = [handler for handler in root.handlers if handler not in before]
            assert len(added) == 1
            assert not isinstance(added[0], RotatingFileHandler)
            assert list(tmp_path.iterdir()) == []
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(level)
