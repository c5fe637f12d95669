"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""
    
    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.perf_counter()
        
        client_ip = getattr(request.state, "forwarded_for", None) or (
            request.client.host if request.client else "unknown"
        )
        request_id = getattr(request.state, "request_id", "-")
        self.logger.info(
            f"Request [{request_id}]: {request.method} {request.url.path} from {client_ip}"
        )
        
        response = await call_next(request)
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            f"Response [{request_id}]: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        
        return response
