"""
Short code generation.

Codes are random, not derived from row IDs, so they reveal nothing about
volume. Uniqueness is checked against the store before use, but that check
is only an early exit: the unique constraint on links.code is what actually
prevents duplicates.
"""

import logging
import random
import string
from abc import ABC, abstractmethod

from shortlink_app.storage.link_store import LinkStore

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_letters + string.digits


def generate_random_code(length: int = 6) -> str:
    """
    Random code drawn uniformly from the 62 letters and digits.

    Not cryptographically secure.
    """
    return ''.join(random.choice(CODE_ALPHABET) for _ in range(length))


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self, store: LinkStore) -> str:
        """
        Generate a short code.

        Args:
            store: Link store, for strategies that check existing codes

        Returns:
            A short code string
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random generation with a bounded number of existence checks.

    Tries `max_attempts` codes of `length` characters. If every one is
    taken, returns a longer code without checking it; an unlucky collision
    there surfaces as DuplicateCode from the store.
    """

    def __init__(
        self,
        length: int = 6,
        max_attempts: int = 10,
        fallback_length: int = 8
    ):
        self.length = length
        self.max_attempts = max_attempts
        self.fallback_length = fallback_length

    def generate(self, store: LinkStore) -> str:
        for _ in range(self.max_attempts):
            code = generate_random_code(self.length)
            if not store.exists(code):
                return code

        logger.warning(
            "No free %d-character code after %d attempts, using %d characters",
            self.length, self.max_attempts, self.fallback_length
        )
        return generate_random_code(self.fallback_length)
