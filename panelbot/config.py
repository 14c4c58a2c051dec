"""Configuration settings using Pydantic."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Docs: https://docs.pydantic.dev/2.8/concepts/pydantic_settings/


class Settings(BaseSettings):
    # App name used in logs
    app_name: str = "panelbot"

    # Allows to detect type of deployment
    environment: Literal["dev", "prod"]

    # Token got from https://t.me/BotFather
    telegram_bot_token: str

    # Logfire token
    logfire_token: str | None = None

    # Where bot sessions live: "memory://" or "redis://host:port/db"
    session_cache_url: str = "memory://"

    # Session lifetime in seconds, None keeps sessions forever
    session_ttl: int | None = None

    model_config = SettingsConfigDict(
        # `.env.prod` takes priority over `.env`
        env_file=(".env", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )

    @property
    def bot_id(self) -> int:
        return int(self.telegram_bot_token.split(":")[0])


settings = Settings()
