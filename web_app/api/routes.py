"""API routes implementation."""

from fastapi import APIRouter, Request, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from shortener.common.urls import build_base_url, build_short_url

router = APIRouter()

# Handlers are plain functions so FastAPI runs them on its thread pool;
# the store is shared by every worker thread.


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or empty URL"},
        500: {"model": ErrorResponse, "description": "Unable to generate a unique code"},
    },
    summary="Create short URL",
    description="Create a shortened URL for a http or https target.",
)
def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    short_code = service.shorten_url(body.long_url)

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    short_url = build_short_url(
        short_code=short_code,
        base_url=base_url,
        path_prefix=config.path_prefix,
    )

    return ShortenResponse(
        short_code=short_code,
        short_url=short_url,
        original_url=body.long_url,
    )


@router.get(
    "/urls/{short_code}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL information",
    description="Get the original URL stored for a short code.",
)
def get_url_info(request: Request, short_code: str):
    """Get information about a shortened URL."""
    service = request.app.state.service

    entry = service.get_url_info(short_code)

    return URLInfoResponse(**entry.to_dict())


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    return StatisticsResponse(**service.get_statistics())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    return HealthResponse(
        status="healthy",
        total_urls=service.size(),
        timestamp=datetime.now(timezone.utc),
    )
