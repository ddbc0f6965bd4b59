"""Random permutations and derangements.

All functions take an explicit ``random.Random`` so that callers can seed
generation and reproduce a board exactly.
"""

from __future__ import annotations

import random

from ghostleg.config import InvalidConfiguration


def random_permutation(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a uniformly random permutation of ``range(n)`` (Fisher-Yates).

    Args:
        n: Number of elements.
        rng: Random source (a fresh unseeded one if None).

    Returns:
        List where index i maps to the value at i.
    """
    rng = rng or random.Random()
    perm = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)
        perm[i], perm[j] = perm[j], perm[i]
    return perm


def random_derangement(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a permutation of ``range(n)`` with no fixed point.

    Same scan as random_permutation, but the swap partner for index i is
    drawn from [0, i), never i itself. The result is always a single
    n-cycle, so no index can keep its own value.

    Args:
        n: Number of elements, at least 2.
        rng: Random source (a fresh unseeded one if None).

    Returns:
        A derangement of ``range(n)``.

    Raises:
        InvalidConfiguration: If n < 2.
    """
    if n < 2:
        raise InvalidConfiguration(f"A derangement needs at least 2 elements, got {n}")
    rng = rng or random.Random()
    perm = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randrange(i)
        perm[i], perm[j] = perm[j], perm[i]
    return perm


def inverse_permutation(perm: list[int]) -> list[int]:
    """Return the positional inverse: ``inverse[perm[i]] == i``."""
    inverse = [0] * len(perm)
    for i, value in enumerate(perm):
        inverse[value] = i
    return inverse
