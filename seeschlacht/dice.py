"""Random number source for ship placement and the opening coin toss."""

from __future__ import annotations

import random

_SYSTEM_RANDOM = random.SystemRandom()


def get_random(lower: int, upper: int, rng: random.Random | None = None) -> int:
    """Return a uniformly distributed integer in the closed range [lower, upper].

    Without an explicit generator the operating system's entropy source is used.
    Raises ValueError when the range is empty.
    """
    if lower > upper:
        raise ValueError(f"empty range: {lower} > {upper}")
    source = _SYSTEM_RANDOM if rng is None else rng
    return source.randint(lower, upper)