"""Catalog configuration settings.

Provides settings for the default model and logging.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from genai_catalog.llm.models import DEFAULT_MODEL_NAME


class CatalogSettings(BaseSettings):
    """Model catalog settings."""

    default_model: str = Field(
        default=DEFAULT_MODEL_NAME,
        description="Model name used when the caller does not request one",
    )
    verify_default_model: bool = Field(
        default=True,
        description="Fail registry construction if the default model is not registered",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON. Set to False for console output.",
    )

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_catalog_settings() -> CatalogSettings:
    """Get cached catalog settings."""
    return CatalogSettings()
