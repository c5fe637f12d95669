"""Core business logic for URL shortener."""

from .errors import (
    ShortenerError,
    EmptyInputError,
    InvalidTargetError,
    CodeNotFoundError,
    GenerationExhaustedError,
)
from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .storage import CodeStore, InMemoryCodeStore, MappingEntry

__all__ = [
    "ShortenerError",
    "EmptyInputError",
    "InvalidTargetError",
    "CodeNotFoundError",
    "GenerationExhaustedError",
    "ShortCodeGenerator",
    "URLShortenerService",
    "CodeStore",
    "InMemoryCodeStore",
    "MappingEntry",
]
