"""
Inclusive random integer helper shared by the engine.
"""

import random
from typing import Optional


def rand_int(min_value: int, max_value: int, rng: Optional[random.Random] = None) -> int:
    """
    Return a uniformly random integer in [min_value, max_value].

    The bounds may be passed in either order; rand_int(6, 1) behaves
    exactly like rand_int(1, 6).

    Args:
        min_value: One end of the range (inclusive)
        max_value: The other end of the range (inclusive)
        rng: Optional random.Random instance for reproducible draws

    Returns:
        An integer between the two bounds, inclusive.
    """
    if min_value > max_value:
        min_value, max_value = max_value, min_value

    source = rng if rng is not None else random
    return source.randint(min_value, max_value)
