"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from ROLLDICE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ROLLDICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Explosion safety valve: most extra dice appended to one wild group.
    # A 1-sided wild die would otherwise explode forever.
    max_explosions: int = Field(default=100, ge=1)

    # Logging
    debug: bool = False
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level


def describe_settings_error(error: ValidationError) -> str:
    """Summarize a settings validation error on one line.

    Examples:
        "Invalid setting max_explosions: Input should be greater than or equal to 1"
    """
    problems = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "settings"
        problems.append(f"{field}: {detail['msg']}")
    return "Invalid setting " + "; ".join(problems)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
