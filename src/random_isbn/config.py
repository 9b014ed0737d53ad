"""Configuration management using Pydantic settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .models import (
    BOOKLAND_HEAD_CODES,
    MAX_COUNTRY_CODE_LENGTH,
    CodeWidthError,
    InvalidCodeError,
    require_digits,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be overridden with a ``RANDOM_ISBN_`` prefixed variable,
    e.g. ``RANDOM_ISBN_MAX_ATTEMPTS=20``, or from a ``.env`` file.
    """

    model_config = {
        "extra": "ignore",
        "env_prefix": "RANDOM_ISBN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # Identifier scope: Bookland prefix, Japanese registration group
    head_code: str = "978"
    country_code: str = "4"

    # Publisher reference table (None uses the packaged isbn978.csv)
    publisher_table: Path | None = None

    # National Diet Library OpenSearch endpoint
    catalog_url: str = "https://iss.ndl.go.jp/api/opensearch"
    request_timeout: float = 10.0

    # Lookup loop
    max_attempts: int = 10
    poll_interval_seconds: float = 1.0  # Fixed delay between lookup attempts

    # Transport retry settings
    network_max_retries: int = 3
    network_retry_max_wait: int = 10

    # Output: booklog item pages are keyed by ISBN-10
    link_template: str = "https://booklog.jp/item/1/{isbn10}"

    log_level: str = "INFO"

    @field_validator("head_code")
    @classmethod
    def _bookland_head_code(cls, value: str) -> str:
        require_digits(value, "head code")
        if value not in BOOKLAND_HEAD_CODES:
            raise InvalidCodeError(
                f"head code must be one of {', '.join(BOOKLAND_HEAD_CODES)}, got {value!r}"
            )
        return value

    @field_validator("country_code")
    @classmethod
    def _country_code_digits(cls, value: str) -> str:
        require_digits(value, "country code")
        if len(value) > MAX_COUNTRY_CODE_LENGTH:
            raise CodeWidthError(
                f"country code is {len(value)} digits, max {MAX_COUNTRY_CODE_LENGTH}"
            )
        return value


# Global settings instance
settings = Settings()


def get_config() -> Settings:
    """Get the global configuration instance."""
    return settings
