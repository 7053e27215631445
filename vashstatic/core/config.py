"""
Application configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_IGNORE_START = "@*VASH_IGNORE_START*@"
DEFAULT_IGNORE_END = "@*VASH_IGNORE_END*@"


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="VASHSTATIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Ignore spans (removed before any rewriting)
    IGNORE_START: str = DEFAULT_IGNORE_START
    IGNORE_END: str = DEFAULT_IGNORE_END

    # Template layout
    PAGE_DIR_TYPE: str = "pg"
    DIR_TYPES: list[str] = ["pg"]

    # Compiler options
    MODEL_NAME: str = "Model"
    HELPERS_NAME: str = "Html"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


class NormalizerOptions(BaseModel):
    """
    Per-call options for the syntax normalizer.

    Passed explicitly into every normalize call so that two callers using
    different ignore markers never see each other's configuration.
    """

    model_config = ConfigDict(frozen=True)

    ignore_start: str = DEFAULT_IGNORE_START
    ignore_end: str = DEFAULT_IGNORE_END
    helpers_name: str = "Html"

    @field_validator("ignore_start", "ignore_end", "helpers_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "NormalizerOptions":
        settings = settings or get_settings()
        return cls(
            ignore_start=settings.IGNORE_START,
            ignore_end=settings.IGNORE_END,
            helpers_name=settings.HELPERS_NAME,
        )
