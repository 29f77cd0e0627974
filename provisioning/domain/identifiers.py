"""Domain helpers for resource identifier numbers and mobile numbers."""
from __future__ import annotations

import random
import re

MOBILE_PATTERN = re.compile(r"^[6-9]\d{9}$")


def identifier_range(digits: int) -> tuple[int, int]:
    """Return the inclusive (low, high) bounds of a ``digits``-long number."""
    if digits < 1:
        raise ValueError("digits must be positive")
    return 10 ** (digits - 1), 10 ** digits - 1


def generate_identifier(digits: int, rng: random.Random | None = None) -> int:
    """Uniform draw over every number with exactly ``digits`` digits."""
    low, high = identifier_range(digits)
    return (rng or random).randint(low, high)


def identifier_in_range(value: int | str | None, digits: int) -> bool:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return False
    low, high = identifier_range(digits)
    return low <= number <= high


def is_valid_mobile_number(value: str | None) -> bool:
    """Return True for ten digits starting with 6-9."""
    if not value:
        return False
    return bool(MOBILE_PATTERN.fullmatch(value))
