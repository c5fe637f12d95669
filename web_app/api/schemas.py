"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    long_url: str = Field(..., description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"long_url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., description="The generated short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_code": "k3pQ9z",
                    "short_url": "https://short.link/k3pQ9z",
                    "original_url": "https://example.com/very/long/path",
                }
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    short_code: str
    original_url: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    total_urls: int = Field(..., description="Number of stored short codes")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Machine-readable error code")
    detail: Optional[str] = Field(None, description="Detailed error information")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    code_length: int
    max_collision_retries: int
