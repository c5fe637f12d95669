"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_valid_short_code
from .urls import extract_forwarded_headers, build_base_url, build_short_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_short_code",
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "setup_logging",
    "get_logger",
]
