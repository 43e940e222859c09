"""
Application configuration using pydantic-settings.

Loads configuration from environment variables with sensible defaults.
"""
from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IXA_",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Generation
    default_currency: str = "GBP"
    balance_tolerance: Decimal = Decimal("1")
    taxonomy_version: str = "2025-01-01"
    document_extension: str = "html"
    generator_name: str = "IXAccounts iXBRL Generator"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
