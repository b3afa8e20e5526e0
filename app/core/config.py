"""Phrasebook configuration settings."""

from functools import lru_cache
from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LangSettings(BaseSettings):
    """Localisation configuration settings.

    Environment Variables:
        DEFAULT_LANG: Language used when a caller supplies no usable language
        PHRASE_FILES: JSON list of phrase file paths, ingested in order
        LANG_RATE_LIMIT: Rate limit applied to the public phrase endpoints

    Example:
        ```python
        from core.config import settings

        default_lang = settings.lang.DEFAULT_LANG
        ```
    """

    DEFAULT_LANG: str = Field(default="en", alias="DEFAULT_LANG")
    PHRASE_FILES: List[str] = Field(default_factory=list, alias="PHRASE_FILES")
    LANG_RATE_LIMIT: str = Field(default="50/minute", alias="LANG_RATE_LIMIT")

    @field_validator("PHRASE_FILES", mode="before")
    @classmethod
    def validate_phrase_files(cls, v: Any) -> Any:
        """Validate the PHRASE_FILES field.

        Args:
            cls: The class itself.
            v: The value of the PHRASE_FILES field.

        Returns:
            The list of phrase file paths. A single path string becomes a
            one-element list and None an empty list.

        Raises:
            ValueError: If the value is neither a path string nor a list.
        """
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v.strip() else []
        if not isinstance(v, (list, tuple)):
            raise ValueError(
                f"PHRASE_FILES must be a list of paths, got {type(v).__name__}"
            )
        return [str(path) for path in v]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Phrasebook configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    lang: LangSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "lang" not in kwargs:
            kwargs["lang"] = LangSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get application-scoped settings singleton."""
    return settings


# Create the settings instance
settings = Settings()
