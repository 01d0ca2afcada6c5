"""Random one-time code adapter.

Implements CodeGeneratorPort with the random module. Codes are not
suitable for production authentication.
"""

import random

from storefront.core.models import OneTimeCode
from storefront.core.ports import CodeGeneratorPort


class RandomCodeGenerator(CodeGeneratorPort):
    """Generates numeric codes with up to digits digits."""

    def __init__(self, digits: int = 6, rng: random.Random | None = None):
        """Initialize the generator.

        Args:
            digits: Upper bound on code length; codes fall in [0, 10**digits).
            rng: Random source. A seeded instance gives repeatable codes.
        """
        if digits <= 0:
            raise ValueError(f"digits must be positive, got {digits}")
        self.digits = digits
        self.rng = rng if rng is not None else random.Random()

    def generate_code(self) -> OneTimeCode:
        return OneTimeCode(self.rng.randrange(10**self.digits))
