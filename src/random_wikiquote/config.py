# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Also defines the shared, mutable quote filter thresholds read by the validator

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://en.wikiquote.org/w/api.php"
DEFAULT_ATTEMPT_LIMIT = 7


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="RANDOM_WIKIQUOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Remote API
    api_url: str = Field(default=DEFAULT_API_URL, description="MediaWiki API endpoint of the quotation wiki")
    user_agent: str = Field(
        default="random-wikiquote/0.1 (https://github.com/random-wikiquote/random-wikiquote)",
        description="User-Agent header sent with every API request",
    )
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")

    # Pipeline
    attempt_limit: int = Field(
        default=DEFAULT_ATTEMPT_LIMIT, ge=1, description="Full pipeline attempts before giving up"
    )

    # Quote filter defaults
    min_length: int = Field(default=20, ge=0, description="Shortest accepted quote, in characters")
    max_length: int = Field(default=300, ge=0, description="Longest accepted quote, in characters")
    numeric_limit: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Highest accepted share of digit characters (0.0-1.0)"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


class QuoteFilterConfig(BaseModel):
    """Thresholds a candidate must meet to be accepted as a quote.

    One instance is shared by reference between a service and its validator, so a
    setter call is visible to every validation that runs after it, including the
    remaining attempts of a pipeline already in flight. Build a separate instance
    when a caller needs isolation.
    """

    model_config = ConfigDict(validate_assignment=True)

    min_length: int = Field(default=20, ge=0)
    max_length: int = Field(default=300, ge=0)
    # Some 'quotes' are just dates and times
    numeric_limit: float = Field(default=0.1, ge=0.0, le=1.0)

    @classmethod
    def from_config(cls, config: Config) -> "QuoteFilterConfig":
        return cls(
            min_length=config.min_length,
            max_length=config.max_length,
            numeric_limit=config.numeric_limit,
        )

    def set_min_length(self, min_length: int) -> None:
        self.min_length = min_length

    def set_max_length(self, max_length: int) -> None:
        self.max_length = max_length

    def set_numeric_limit(self, numeric_limit: float) -> None:
        self.numeric_limit = numeric_limit


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
