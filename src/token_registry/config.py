"""Library configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from token_registry.core.types import Strategy


class TokenRegistrySettings(BaseSettings):
    """Library configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="TOKEN_REGISTRY_",
    )

    # HTTP
    request_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Timeout in seconds for each token list request",
    )

    # Resolution
    default_strategy: Strategy = Field(
        default=Strategy.CDN,
        description="Strategy used when none is given",
    )
    fallback_url: str = Field(
        default="",
        description="Fallback token list URL used when none is given",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level for the token_registry logger",
    )


@lru_cache
def get_settings() -> TokenRegistrySettings:
    """Get cached settings instance."""
    return TokenRegistrySettings()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Set the level of the package logger, defaulting to ``settings.log_level``."""
    package_logger = logging.getLogger("token_registry")
    package_logger.setLevel(level if level is not None else get_settings().log_level.upper())
    return package_logger
