"""In-memory implementation of the code store."""

import logging
from typing import Dict, Optional, Tuple

from .base import CodeStore
from .locks import ReadWriteLock


class InMemoryCodeStore(CodeStore):
    """Dictionary-backed code store guarded by a readers-writer lock."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize an empty store.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._entries: Dict[str, str] = {}
        self._lock = ReadWriteLock()

    def put(self, short_code: str, target: str) -> None:
        with self._lock.write_locked():
            self._entries[short_code] = target

    def put_if_absent(self, short_code: str, target: str) -> bool:
        with self._lock.write_locked():
            if short_code in self._entries:
                self.logger.debug(f"Short code claimed concurrently: {short_code}")
                return False
            self._entries[short_code] = target
            return True

    def get(self, short_code: str) -> Tuple[str, bool]:
        with self._lock.read_locked():
            target = self._entries.get(short_code)
        if target is None:
            return "", False
        return target, True

    def exists(self, short_code: str) -> bool:
        with self._lock.read_locked():
            return short_code in self._entries

    def size(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)
