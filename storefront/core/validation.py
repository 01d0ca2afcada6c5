"""Input validation rules for user-supplied values.

Each rule returns a plain result (bool or message) rather than raising,
so callers can report every problem at once.
"""

import re
from numbers import Real

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

LEGAL_DRIVING_AGE: dict[str, int] = {
    "US": 16,
    "UK": 17,
}


def validate_user_input(username: object, age: object) -> str:
    """Validate a registration form.

    Returns:
        "Validation successful", or the problems found joined by ", "
        (any of "Invalid username", "Invalid age").
    """
    errors: list[str] = []

    if not isinstance(username, str) or not 3 <= len(username) <= 255:
        errors.append("Invalid username")

    if (
        not isinstance(age, Real)
        or isinstance(age, bool)
        or not 18 <= age <= 100
    ):
        errors.append("Invalid age")

    return ", ".join(errors) if errors else "Validation successful"


def is_valid_username(username: object) -> bool:
    if not isinstance(username, str):
        return False
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def can_drive(age: int, country_code: str) -> bool | str:
    """Check whether someone of age may drive in country_code.

    Returns:
        True or False for a known country, "Invalid country code" otherwise.
    """
    if country_code not in LEGAL_DRIVING_AGE:
        return "Invalid country code"
    return age >= LEGAL_DRIVING_AGE[country_code]


def is_strong_password(password: str) -> bool:
    """At least 8 characters with an uppercase letter, a lowercase letter and a digit."""
    if len(password) < 8:
        return False
    if not re.search(r"[A-Z]", password):
        return False
    if not re.search(r"[a-z]", password):
        return False
    if not re.search(r"\d", password):
        return False
    return True
