"""Middleware for URL shortener web app."""

from .headers import ForwardedHeadersMiddleware
from .logging import LoggingMiddleware
from .request_id import RequestIDMiddleware

__all__ = ["ForwardedHeadersMiddleware", "LoggingMiddleware", "RequestIDMiddleware"]
