"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any, Iterable

from .errors import (
    CodeNotFoundError,
    EmptyInputError,
    GenerationExhaustedError,
    InvalidTargetError,
)
from .shortcode import ShortCodeGenerator
from .storage.base import CodeStore
from .storage.models import MappingEntry
from .common.validators import DEFAULT_BLOCKED_DOMAINS, MAX_URL_LENGTH, is_valid_url


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: CodeStore,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_url_length: int = MAX_URL_LENGTH,
        blocked_domains: Iterable[str] = DEFAULT_BLOCKED_DOMAINS,
    ):
        """Initialize URL shortener service.

        Args:
            store: Code store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_url_length: Longest URL accepted by shorten_url
            blocked_domains: Domains rejected by shorten_url
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_url_length = max_url_length
        self.blocked_domains = tuple(blocked_domains)

    def shorten_url(self, original_url: str) -> str:
        """Validate a URL and create a short code for it.

        Args:
            original_url: The original long URL

        Returns:
            The new short code

        Raises:
            EmptyInputError: If the URL is empty or whitespace-only
            InvalidTargetError: If the URL fails validation
            GenerationExhaustedError: If no unique code could be generated
        """
        if not original_url or not original_url.strip():
            raise EmptyInputError("URL must not be empty")

        is_valid, error = is_valid_url(
            original_url,
            max_length=self.max_url_length,
            blocked_domains=self.blocked_domains,
        )
        if not is_valid:
            raise InvalidTargetError(f"Invalid URL: {error}")

        return self.generate(original_url)

    def generate(self, target: str) -> str:
        """Generate a unique short code and record it for the target.

        The code is stored before this returns; callers must not insert it
        themselves.

        Args:
            target: The original target, stored verbatim

        Returns:
            The new short code

        Raises:
            EmptyInputError: If the target is empty or whitespace-only
            GenerationExhaustedError: If every candidate collided
        """
        if not target or not target.strip():
            raise EmptyInputError("Target must not be empty")

        short_code = self._generate_unique_short_code(target)
        self.logger.info(f"Created short URL: {short_code} -> {target}")
        return short_code

    def resolve(self, short_code: str) -> str:
        """Get the original target for a short code.

        Args:
            short_code: The short code to lookup (surrounding whitespace ignored)

        Returns:
            The stored target

        Raises:
            EmptyInputError: If the code is empty after trimming
            CodeNotFoundError: If the code is not stored
        """
        code = (short_code or "").strip()
        if not code:
            raise EmptyInputError("Short code must not be empty")

        target, found = self.store.get(code)
        if not found:
            self.logger.warning(f"Short code not found: {code}")
            raise CodeNotFoundError(code)

        self.logger.debug(f"Retrieved URL: {code} -> {target}")
        return target

    def get_url_info(self, short_code: str) -> MappingEntry:
        """Get the stored entry for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The mapping entry
        """
        code = (short_code or "").strip()
        return MappingEntry(short_code=code, original_url=self.resolve(code))

    def size(self) -> int:
        """Return the number of stored entries."""
        return self.store.size()

    def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics.

        Returns:
            Dictionary with statistics
        """
        return {
            "total_urls": self.store.size(),
            "code_length": self.generator.default_length,
            "max_collision_retries": self.generator.max_attempts,
        }

    def _generate_unique_short_code(self, target: str) -> str:
        """Generate a unique short code with collision handling.

        Args:
            target: The original target

        Returns:
            Unique short code, already recorded in the store

        Raises:
            GenerationExhaustedError: If unable to generate unique code after retries
        """
        attempts = 0
        for code in self.generator.candidates(target):
            attempts += 1

            if self.store.exists(code):
                self.logger.debug(f"Collision on attempt {attempts}: {code}")
                continue

            # Another thread may have claimed the code since the check above
            if self.store.put_if_absent(code, target):
                if attempts > 1:
                    self.logger.debug(f"Generated code after {attempts} attempts: {code}")
                return code

        self.logger.error(f"Short code generation exhausted after {attempts} attempts")
        raise GenerationExhaustedError(attempts)
