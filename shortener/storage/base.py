"""Abstract base class for short code stores."""

from abc import ABC, abstractmethod
from typing import Tuple


class CodeStore(ABC):
    """Mapping from short code to target, safe under concurrent access.

    Implementations let any number of readers (``get``, ``exists``,
    ``size``) proceed together while a writer (``put``, ``put_if_absent``)
    excludes every other call. A write is never observed half-applied.
    """

    @abstractmethod
    def put(self, short_code: str, target: str) -> None:
        """Insert or overwrite the entry for a short code.

        Args:
            short_code: The short code
            target: The original target, stored verbatim
        """
        pass

    @abstractmethod
    def put_if_absent(self, short_code: str, target: str) -> bool:
        """Insert an entry only if the short code is not already present.

        The existence check and the insert happen in one exclusive section.

        Args:
            short_code: The short code
            target: The original target, stored verbatim

        Returns:
            True if inserted, False if the short code already existed
        """
        pass

    @abstractmethod
    def get(self, short_code: str) -> Tuple[str, bool]:
        """Look up the target for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Tuple of (target, found); target is "" when not found
        """
        pass

    @abstractmethod
    def exists(self, short_code: str) -> bool:
        """Check if a short code is present.

        Args:
            short_code: The short code to check

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored entries."""
        pass
