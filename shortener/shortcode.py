"""Short code generation utilities."""

import hashlib
import random
import string
import threading
import time
from typing import Callable, Iterator, Optional


class ShortCodeGenerator:
    """Derive fixed-length short codes from a target.

    Each candidate hashes the target together with a timestamp, a random
    integer and the attempt number, then maps the first ``length`` digest
    bytes onto the alphabet with ``byte % len(alphabet)``. With 62 symbols
    the mapping is slightly biased toward the first 8 symbols (256 is not a
    multiple of 62); codes keep that bias.
    """

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits

    DEFAULT_LENGTH = 6
    DEFAULT_MAX_ATTEMPTS = 10

    # Attempts below these thresholds use the base and widened tiers
    BASE_TIER_END = 3
    WIDENED_TIER_END = 7

    # ASCII unit separator, not expected inside a URL
    FIELD_SEPARATOR = "\x1f"

    def __init__(
        self,
        default_length: int = DEFAULT_LENGTH,
        alphabet: str = BASE62_CHARS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        hash_name: str = "md5",
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """Initialize short code generator.

        Args:
            default_length: Length of generated codes
            alphabet: Symbols codes are drawn from
            max_attempts: Number of candidates yielded per target
            hash_name: hashlib algorithm name used to derive codes
            clock: Nanosecond timestamp source (defaults to time.time_ns)
            rng: Random source owned by this generator
            seed: Seed for a new random source when rng is not given

        Raises:
            ValueError: If the parameters cannot produce valid codes
        """
        if default_length < 1:
            raise ValueError("Code length must be at least 1")
        if not alphabet:
            raise ValueError("Alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("Alphabet must not contain duplicate symbols")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        digest_size = hashlib.new(hash_name).digest_size
        if digest_size < default_length:
            raise ValueError(
                f"Hash '{hash_name}' produces {digest_size} bytes, "
                f"fewer than code length {default_length}"
            )

        self.default_length = default_length
        self.alphabet = alphabet
        self.max_attempts = max_attempts
        self.hash_name = hash_name
        self._clock = clock or time.time_ns
        self._rng = rng or random.Random(seed)
        self._rng_lock = threading.Lock()

    def derive(self, target: str, attempt: int) -> str:
        """Derive one candidate code.

        Args:
            target: The original target (used verbatim)
            attempt: Attempt component mixed into the hash input

        Returns:
            Candidate short code
        """
        with self._rng_lock:
            random_value = self._rng.getrandbits(64)

        entry = self.FIELD_SEPARATOR.join(
            (target, str(self._clock()), str(random_value), str(attempt))
        )
        digest = hashlib.new(self.hash_name, entry.encode("utf-8")).digest()

        size = len(self.alphabet)
        return "".join(self.alphabet[b % size] for b in digest[: self.default_length])

    def candidates(self, target: str) -> Iterator[str]:
        """Yield candidate codes for a target with escalating entropy.

        The first attempts hash the target as-is, the middle ones double the
        attempt component, and the last ones append a fresh timestamp to the
        target itself.

        Args:
            target: The original target

        Yields:
            Up to max_attempts candidate codes
        """
        for attempt in range(self.max_attempts):
            if attempt < self.BASE_TIER_END:
                yield self.derive(target, attempt)
            elif attempt < self.WIDENED_TIER_END:
                yield self.derive(target, attempt * 2)
            else:
                yield self.derive(f"{target}_{self._clock()}", attempt)

    def is_valid_format(self, code: str) -> bool:
        """Check if code has the generated shape.

        Args:
            code: Code to validate

        Returns:
            True if code has default_length symbols from the alphabet
        """
        return len(code) == self.default_length and all(c in self.alphabet for c in code)
