"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_UPLOAD_BYTES = 8 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "File Relay"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3000, validation_alias=AliasChoices("api_port", "port"))
    cors_origins: list[str] = ["*"]

    # Inbound
    api_key: SecretStr | None = None
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    # Outbound webhook
    discord_webhook_url: SecretStr | None = None

    @property
    def webhook_url(self) -> str | None:
        """Plain webhook URL, or None when unset or blank."""
        if self.discord_webhook_url is None:
            return None
        return self.discord_webhook_url.get_secret_value().strip() or None

    @property
    def expected_api_key(self) -> str:
        """The key callers must send; empty when none is configured."""
        return self.api_key.get_secret_value() if self.api_key else ""


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
