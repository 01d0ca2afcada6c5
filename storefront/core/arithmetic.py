"""Small arithmetic helpers."""

import math
from collections.abc import Sequence


def max_of(a: float, b: float) -> float:
    """Return the larger argument, preferring the first on ties."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(values: Sequence[float]) -> float:
    """Mean of values; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def factorial(n: int) -> int | None:
    """n! for non-negative n; None for negative input."""
    if n < 0:
        return None
    return math.factorial(n)
