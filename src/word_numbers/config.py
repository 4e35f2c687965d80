"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (WORD_NUMBERS_*)
3. Defaults (lowest priority)
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ExpansionSettings(BaseSettings):
    """Settings for rewriting macro invocations in source files."""

    macro_name: str = Field(
        default="num",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Name of the macro to expand, as in num!(...)",
    )
    literal_style: Literal["suffixed", "plain"] = Field(
        default="suffixed",
        description="Splice 1337i16 (suffixed) or 1337 (plain)",
    )

    model_config = {"env_prefix": "WORD_NUMBERS_EXPANSION_"}


class OpenTelemetrySettings(BaseSettings):
    """Settings for OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable tracing",
    )
    service_name: str = Field(
        default="word-numbers",
        description="Service name reported with spans",
    )
    endpoint: str = Field(
        default="",
        description="OTLP collector endpoint (console only when empty)",
    )

    model_config = {"env_prefix": "WORD_NUMBERS_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: LogLevel = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    expansion: ExpansionSettings = Field(
        default_factory=ExpansionSettings,
        description="Macro expansion settings",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="Tracing settings",
    )

    model_config = {"env_prefix": "WORD_NUMBERS_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug output is on, else the configured level."""
        return "DEBUG" if self.debug else self.log_level


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()
