"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shortener.errors import (
    ShortenerError,
    EmptyInputError,
    InvalidTargetError,
    CodeNotFoundError,
    GenerationExhaustedError,
)
from .api import api_router
from .web import web_router
from .api.schemas import ErrorResponse
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware
from .middleware.request_id import RequestIDMiddleware

ERROR_STATUS_CODES = {
    EmptyInputError: status.HTTP_400_BAD_REQUEST,
    InvalidTargetError: status.HTTP_400_BAD_REQUEST,
    CodeNotFoundError: status.HTTP_404_NOT_FOUND,
    GenerationExhaustedError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_status_code(exc: ShortenerError) -> int:
    """Map a shortener error to its HTTP status code."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_app(
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="In-memory URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        body = ErrorResponse(error=exc.error_code, detail=str(exc))
        return JSONResponse(
            status_code=error_status_code(exc),
            content=body.model_dump(),
        )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: request ID and forwarded headers are set before logging
    request_logger = logger.getChild("web") if logger else None
    app.add_middleware(LoggingMiddleware, logger=request_logger)
    app.add_middleware(ForwardedHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
