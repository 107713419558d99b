"""Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Demo runner
    demo_inputs: list[str] = Field(
        default=["1", "2", "5", "0", "a"],
        description="Inputs the demo runner uses when none are given on the command line",
    )

    # Status codes reported for pipeline failures
    not_a_number_status: int = Field(
        default=400, ge=400, le=599, description="Status code for non-numeric input"
    )
    zero_reciprocal_status: int = Field(
        default=422, ge=400, le=599, description="Status code for a zero input"
    )

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="DISJUNCTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
