"""hgts configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Translator and logging configuration.

    Values only seed translators built through the factory; a translator
    configured explicitly with locales ignores them.

    Environment Variables:
        HGTS_DEFAULT_LOCALE: Locale a new translator starts in (default: en)
        HGTS_FALLBACK_LOCALE: Locale consulted on a miss (default: the default locale)
        HGTS_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        HGTS_ENVIRONMENT: "production" switches log output to JSON

    Example:
        ```python
        from hgts.configuration import get_settings

        if get_settings().is_production:
            ...
        ```
    """

    DEFAULT_LOCALE: str = Field(
        default="en",
        alias="HGTS_DEFAULT_LOCALE",
        description="Locale a new translator starts in",
    )
    FALLBACK_LOCALE: Optional[str] = Field(
        default=None,
        alias="HGTS_FALLBACK_LOCALE",
        description="Locale consulted when a key is missing in the current one",
    )
    LOG_LEVEL: str = Field(default="INFO", alias="HGTS_LOG_LEVEL")
    ENVIRONMENT: str = Field(default="development", alias="HGTS_ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {value}. Expected one of {', '.join(VALID_LOG_LEVELS)}"
            )
        return level

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    @property
    def fallback_locale(self) -> str:
        """Fallback locale with the default locale filled in."""
        return self.FALLBACK_LOCALE or self.DEFAULT_LOCALE


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Settings are read on first call, so a bad environment value surfaces
    where settings are used, not when hgts is imported.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
