"""Storage layer for URL shortener."""

from .base import CodeStore
from .memory import InMemoryCodeStore
from .models import MappingEntry

__all__ = ["CodeStore", "InMemoryCodeStore", "MappingEntry"]
