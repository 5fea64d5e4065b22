"""Proste generatory wartości oparte na przekazanym silniku `random.Random`."""

from __future__ import annotations

import random

SINT32_MIN = -(1 << 31)
SINT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1

ASCII_MIN = 1
ASCII_MAX = 127
DEFAULT_MAX_STRING_LENGTH = 255


def random_integer(rng: random.Random) -> int:
    return rng.randint(SINT32_MIN, SINT32_MAX)


def random_positive_integer(rng: random.Random) -> int:
    return rng.randint(0, UINT32_MAX)


def random_integer_in_range(rng: random.Random, minimum: int, maximum: int) -> int:
    """Zwraca liczbę z przedziału [minimum, maximum]; granice mogą być zamienione."""

    for name, value in (("minimum", minimum), ("maximum", maximum)):
        if not SINT32_MIN <= value <= SINT32_MAX:
            raise ValueError(f"{name}={value} does not fit a signed 32-bit integer")
    if minimum > maximum:
        minimum, maximum = maximum, minimum
    if minimum == maximum:
        return minimum
    return rng.randint(minimum, maximum)


def random_ascii_string(rng: random.Random, max_length: int = DEFAULT_MAX_STRING_LENGTH) -> str:
    """Generuje napis o długości 1..max_length ze znaków ASCII 1-127."""

    if max_length < 1:
        raise ValueError(f"max_length must be at least 1, got {max_length}")
    length = random_integer_in_range(rng, 1, max_length)
    return "".join(chr(rng.randint(ASCII_MIN, ASCII_MAX)) for _ in range(length))
