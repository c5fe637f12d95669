"""Configuration management for URL shortener."""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from shortener.shortcode import ShortCodeGenerator
from shortener.common.validators import DEFAULT_BLOCKED_DOMAINS, MAX_URL_LENGTH


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL for generating short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    short_code_length: int = Field(
        default=ShortCodeGenerator.DEFAULT_LENGTH,
        ge=1,
        description="Length of generated short codes"
    )

    short_code_alphabet: str = Field(
        default=ShortCodeGenerator.BASE62_CHARS,
        min_length=1,
        description="Symbols generated short codes are drawn from"
    )

    max_collision_retries: int = Field(
        default=ShortCodeGenerator.DEFAULT_MAX_ATTEMPTS,
        ge=1,
        description="Maximum candidate codes tried per request before giving up"
    )

    hash_algorithm: str = Field(
        default="md5",
        description="hashlib algorithm used to derive short codes"
    )

    max_url_length: int = Field(
        default=MAX_URL_LENGTH,
        ge=1,
        description="Longest URL accepted for shortening"
    )

    blocked_domains: List[str] = Field(
        default_factory=lambda: list(DEFAULT_BLOCKED_DOMAINS),
        description="Domains that may not be shortened"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
