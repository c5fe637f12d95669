"""Request ID middleware."""

from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and echo it on the response.

    An incoming ``X-Request-ID`` is reused so IDs set by a proxy carry
    through; otherwise a fresh one is generated.
    """
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Assign the request ID and add it to the response headers."""
        request_id = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if not request_id or len(request_id) > MAX_REQUEST_ID_LENGTH:
            request_id = uuid4().hex
        request.state.request_id = request_id
        
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
