"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SecuritySettings(BaseSettings):
    """Password hashing configuration."""

    model_config = SettingsConfigDict(env_prefix="SECURITY_")

    # bcrypt cost factor (log2 of the iteration count)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class CurrencySettings(BaseSettings):
    """Currency used when amounts are rendered for display."""

    model_config = SettingsConfigDict(env_prefix="CURRENCY_")

    code: str = "PEN"
    symbol: str = "S/"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Bodega POS"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    currency: CurrencySettings = Field(default_factory=CurrencySettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
