"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            rng: Random source to draw characters from. Pass a seeded
                ``random.Random`` for a reproducible sequence.
        """
        if default_length < 1:
            raise ValueError("default_length must be positive")
        self.default_length = default_length
        self.rng = rng or random.Random()

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Every character is an independent uniform draw from the base62
        alphabet. Codes are not meant to be secret.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(self.rng.choices(self.BASE62_CHARS, k=length))
