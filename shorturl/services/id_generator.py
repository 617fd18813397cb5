"""
Short Id Generation

Short ids are fixed-length strings drawn uniformly at random from a
configured alphabet (by default 10 symbols out of 16, ~1.1e12 ids).

Ids are not checked against stored records here; a collision surfaces
as DuplicateShortIdError on insert and the link service retries.
"""

import secrets

DEFAULT_ALPHABET = "1234567890abcdef"
DEFAULT_LENGTH = 10


class IdGenerator:
    """Generate random short ids of a fixed length."""

    def __init__(self, alphabet: str = DEFAULT_ALPHABET, length: int = DEFAULT_LENGTH):
        """
        Args:
            alphabet: Distinct symbols ids are drawn from
            length: Number of symbols per id

        Raises:
            ValueError: If the alphabet is empty or repeats symbols,
                or the length is not positive
        """
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet must not repeat symbols")
        if length < 1:
            raise ValueError("length must be positive")

        self.alphabet = alphabet
        self.length = length

    def generate(self) -> str:
        """Return a new random id."""
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
