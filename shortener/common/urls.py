"""Building the public short URL for a request."""

from typing import Dict, Mapping, Optional

# Request state attribute -> proxy header
FORWARDED_HEADERS = {
    "forwarded_proto": "x-forwarded-proto",
    "forwarded_host": "x-forwarded-host",
    "forwarded_for": "x-forwarded-for",
}


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Pick the X-Forwarded-* values out of request headers.

    Lookup is case-insensitive; missing headers map to None.
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    return {key: lowered.get(name) for key, name in FORWARDED_HEADERS.items()}


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Work out the externally visible base URL.

    The host comes from X-Forwarded-Host, then the request Host, then the
    configured fallback. The scheme comes from X-Forwarded-Proto, then the
    request scheme.
    """
    forwarded = extract_forwarded_headers(headers)
    host = forwarded["forwarded_host"] or request_host
    if not host:
        return fallback_base_url.rstrip("/")

    scheme = forwarded["forwarded_proto"] or request_scheme or "http"
    return f"{scheme}://{host}"


def build_short_url(short_code: str, base_url: str, path_prefix: str = "") -> str:
    """Join base URL, optional path prefix and short code."""
    parts = (base_url.rstrip("/"), path_prefix.strip("/"), short_code)
    return "/".join(part for part in parts if part)
