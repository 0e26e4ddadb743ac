"""
Configuration management for the order bot.
Loads settings from environment variables with validation.
"""

import logging
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Telegram
    telegram_bot_token: Optional[str] = Field(
        default=None, description="Telegram Bot API token"
    )

    # Dispatcher notification
    dispatcher_chat_id: Optional[int] = Field(
        default=None, description="Telegram chat ID of the dispatcher receiving orders"
    )

    # Conversation flow
    collect_quantity: bool = Field(
        default=False, description="Ask for a quantity between product and address"
    )
    session_idle_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds after which a stalled conversation restarts from the menu",
    )

    # Debug
    debug: bool = Field(default=False, description="Debug mode")

    @field_validator("dispatcher_chat_id", mode="before")
    @classmethod
    def parse_dispatcher_chat_id(cls, value: Any) -> Optional[int]:
        """Treat empty, zero or malformed IDs as "no dispatcher configured"."""
        if value is None or value == "" or value == 0 or value == "0":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid dispatcher ID: {value!r}, notifications disabled")
            return None


# Global settings instance
settings = Settings()
