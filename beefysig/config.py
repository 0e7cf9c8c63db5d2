"""Configuration management with Pydantic settings."""

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SchemeName = Literal["ecdsa-keccak256"]

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """beefysig configuration settings.

    Precedence: explicit argument > environment variable > .env file > defaults.
    Key material is never read from settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="BEEFYSIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    scheme: SchemeName = Field(
        default="ecdsa-keccak256",
        description="Signing scheme wired at construction time",
    )

    log_level: LogLevelName = Field(
        default="WARNING",
        description="Level applied to the beefysig logger by configure_logging()",
    )

    log_digests: bool = Field(
        default=False,
        description="Log a digest prefix at DEBUG level for every signature",
    )

    def get_log_level(self) -> int:
        """Return ``log_level`` as a :mod:`logging` level number."""
        return logging.getLevelName(self.log_level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
