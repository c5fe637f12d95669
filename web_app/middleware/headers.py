"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortener.common.urls import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and store X-Forwarded-* headers."""
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Process request and extract forwarded headers."""
        for key, value in extract_forwarded_headers(request.headers).items():
            setattr(request.state, key, value)
        
        response = await call_next(request)
        return response
