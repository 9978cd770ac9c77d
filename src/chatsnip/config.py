"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.

Environment variables use the ``CHATSNIP_`` prefix and a double-underscore
delimiter for nesting, e.g. ``CHATSNIP_CLASSIFIER__SHORT_MESSAGE_THRESHOLD``
or ``CHATSNIP_RENDER__ASSISTANT_NAME``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatsnip.models import (
    LONG_MESSAGE_THRESHOLD,
    MIN_CONTENT_LENGTH,
    SHORT_MESSAGE_THRESHOLD,
    Thresholds,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class ClassifierConfig(BaseModel):
    """Heuristic tuning for normalization and role scoring."""

    short_message_threshold: int = SHORT_MESSAGE_THRESHOLD
    long_message_threshold: int = LONG_MESSAGE_THRESHOLD
    min_content_length: int = MIN_CONTENT_LENGTH
    assistant_labels: list[str] = []

    @model_validator(mode="after")
    def thresholds_are_consistent(self) -> ClassifierConfig:
        if min(
            self.short_message_threshold,
            self.long_message_threshold,
            self.min_content_length,
        ) < 1:
            msg = "CLASSIFIER thresholds must be positive integers"
            raise ValueError(msg)
        if self.short_message_threshold > self.long_message_threshold:
            msg = (
                "CLASSIFIER__SHORT_MESSAGE_THRESHOLD must not exceed "
                "CLASSIFIER__LONG_MESSAGE_THRESHOLD"
            )
            raise ValueError(msg)
        return self

    def to_thresholds(self) -> Thresholds:
        return Thresholds(
            short_message=self.short_message_threshold,
            long_message=self.long_message_threshold,
            min_content=self.min_content_length,
        )


class RenderConfig(BaseModel):
    """Output defaults."""

    assistant_name: str = "ChatGPT-4o"
    format: Literal["html", "markdown"] = "html"


class AppConfig(BaseModel):
    """Runtime configuration for the command-line front end."""

    log_dir: Path | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation."""

    model_config = SettingsConfigDict(
        env_prefix="CHATSNIP_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    classifier: ClassifierConfig = ClassifierConfig()
    render: RenderConfig = RenderConfig()
    app: AppConfig = AppConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.debug("Settings: no .env file found, using env vars and defaults")

    return settings
