"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Iterable, Tuple

MAX_URL_LENGTH = 2048

DEFAULT_BLOCKED_DOMAINS = ("malware.com", "phishing.net", "spam.org")


def is_valid_url(
    url: str,
    max_length: int = MAX_URL_LENGTH,
    blocked_domains: Iterable[str] = DEFAULT_BLOCKED_DOMAINS,
) -> Tuple[bool, str]:
    """Validate a URL.

    Args:
        url: The URL to validate
        max_length: Maximum accepted length
        blocked_domains: Domains that may not be shortened

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if not url.strip():
        return False, "URL must not contain only whitespace"

    if len(url) > max_length:
        return False, f"URL is too long (max {max_length} characters)"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"

    # Check if scheme is http or https
    if result.scheme not in ["http", "https"]:
        return False, "URL must use http or https protocol"

    # Credentials or a port alone leave the host empty
    host = result.hostname
    if not host:
        return False, "URL must have a valid domain"

    host = host.lower()
    for blocked in blocked_domains:
        if blocked.lower() in host:
            return False, f"Domain '{blocked}' is blocked"

    return True, ""


def is_valid_short_code(short_code: str, length: int, alphabet: str) -> Tuple[bool, str]:
    """Validate a short code.

    Args:
        short_code: The short code to validate
        length: Expected code length
        alphabet: Symbols a code may contain

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) != length:
        return False, f"Short code must be exactly {length} characters"

    if any(c not in alphabet for c in short_code):
        return False, "Short code contains characters outside the code alphabet"

    return True, ""
