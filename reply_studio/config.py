"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    openai_api_key: Optional[str] = Field(
        default=None, description="Secret key for the chat completion API."
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model_translate: str = "gpt-4o-mini"
    openai_model_reply: str = "gpt-4o-mini"
    openai_timeout_seconds: float = 60.0

    presets_path: Optional[str] = None
    block_add_policy: Literal["toggle", "unique", "append"] = "toggle"
    reply_translate_debounce_seconds: float = 1.0
    studio_base_url: str = "http://localhost:8000"

    log_level: str = "INFO"
    log_format: str = "text"
    allow_tiktoken_fallback: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def presets_path_obj(self) -> Optional[Path]:
        return Path(self.presets_path) if self.presets_path else None


settings = Settings()
