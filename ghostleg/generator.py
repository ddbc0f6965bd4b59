"""Ladder generation algorithm for ghostleg.

Two modes:
- Unconstrained: every row is filled with random non-adjacent rungs, and
  whatever permutation results is accepted (fixed points included).
- Exclude-self: a target derangement is drawn first. Leading "chaos" rows
  are random; trailing "correction" rows then steer the chaos permutation
  onto the target one adjacent swap per row.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from ghostleg.config import Config, LadderConfig
from ghostleg.ladder import Ladder, compute_row_count
from ghostleg.permutations import inverse_permutation, random_derangement
from ghostleg.tracer import compute_all_results
from ghostleg.validator import ValidationResult, validate_ladder


class GenerationError(Exception):
    """Error during ladder generation."""

    pass


# A free slot receives a rung when rng.random() exceeds this (60% chance)
RUNG_THRESHOLD = 0.4

# Share of an exclude-self board always kept for chaos rows
MIN_CHAOS_SHARE = 0.5


@dataclass
class GenerationResult:
    """Result of ladder generation.

    Attributes:
        ladder: The generated ladder.
        seed: The actual seed used for generation.
        results: Column reached from each starting column.
        validation: Validation result (with any warnings).
    """

    ladder: Ladder
    seed: int
    results: list[int]
    validation: ValidationResult


def _random_row(slot_count: int, rng: random.Random) -> list[bool]:
    """Fill one row left to right, never next to the rung just placed."""
    row: list[bool] = []
    for slot in range(slot_count):
        prev_has_rung = slot > 0 and row[slot - 1]
        row.append(not prev_has_rung and rng.random() > RUNG_THRESHOLD)
    return row


def correction_swaps(correction: list[int]) -> list[int]:
    """Reduce a permutation to adjacent transpositions, selection-sort style.

    Starting from the identity, the value that must end up at slot i is
    bubbled leftwards until it gets there, for i = 0, 1, ...

    Args:
        correction: Permutation to realize.

    Returns:
        Slot index of each swap, in order. Slot s exchanges columns s, s+1.
    """
    n = len(correction)
    wanted = inverse_permutation(correction)
    state = list(range(n))
    swaps: list[int] = []

    for i in range(n):
        pos = state.index(wanted[i])
        while pos > i:
            state[pos], state[pos - 1] = state[pos - 1], state[pos]
            swaps.append(pos - 1)
            pos -= 1

    return swaps


def permutation_to_rungs(
    target: list[int], row_count: int, rng: random.Random
) -> list[list[bool]]:
    """Build a rung grid whose traced permutation is exactly target.

    Args:
        target: Permutation the finished board must realize.
        row_count: Number of rows on the board.
        rng: Random source.

    Returns:
        Mutable grid of row_count rows by len(target) - 1 slots.
    """
    n = len(target)
    max_correction_swaps = n * (n - 1) // 2
    correction_reserve = max_correction_swaps + 2
    chaos_rows = max(int(row_count * MIN_CHAOS_SHARE), row_count - correction_reserve)

    rungs = [[False] * (n - 1) for _ in range(row_count)]
    for row in range(chaos_rows):
        rungs[row] = _random_row(n - 1, rng)

    # Permutation realized by the chaos rows alone
    current = compute_all_results(Ladder.from_rows(rungs[:chaos_rows]), n)
    current_inverse = inverse_permutation(current)
    correction = [target[current_inverse[i]] for i in range(n)]

    correction_row = chaos_rows
    for slot in correction_swaps(correction):
        if correction_row >= row_count:
            break
        rungs[correction_row][slot] = True
        correction_row += 1

    # Same-slot pairs cancel out, so the permutation is unchanged
    for row in range(correction_row, row_count - 1, 2):
        slot = rng.randrange(n - 1)
        prev_has_rung = slot > 0 and rungs[row][slot - 1]
        next_has_rung = slot < n - 2 and rungs[row][slot + 1]
        if not prev_has_rung and not next_has_rung:
            rungs[row][slot] = True
            rungs[row + 1][slot] = True

    return rungs


def generate_ladder(
    column_count: int, exclude_self: bool, rng: random.Random | None = None
) -> Ladder:
    """Generate a ladder.

    Args:
        column_count: Number of vertical lines, at least 2.
        exclude_self: If True, no column may end where it started.
        rng: Random source (a fresh unseeded one if None).

    Returns:
        The generated Ladder.

    Raises:
        InvalidConfiguration: If column_count < 2.
    """
    row_count = compute_row_count(column_count, exclude_self)
    rng = rng or random.Random()

    if exclude_self:
        target = random_derangement(column_count, rng)
        rows = permutation_to_rungs(target, row_count, rng)
    else:
        rows = [_random_row(column_count - 1, rng) for _ in range(row_count)]

    return Ladder.from_rows(rows)


def generate_from_config(
    config: LadderConfig, rng: random.Random | None = None
) -> Ladder:
    """Generate a ladder from a LadderConfig."""
    return generate_ladder(config.column_count, config.exclude_self, rng)


def generate_with_seed(config: Config) -> GenerationResult:
    """Generate and validate a ladder for a configured seed.

    If config.seed is 0, a random seed is picked and reported so the board
    can be reproduced later. Any other seed is used as is.

    Args:
        config: Configuration

    Returns:
        GenerationResult with ladder, seed, results and validation.

    Raises:
        GenerationError: If the generated ladder fails validation.
    """
    seed = config.seed
    if seed == 0:
        seed = random.Random().randint(1, 999999999)

    ladder = generate_from_config(config.ladder, random.Random(seed))
    validation = validate_ladder(ladder, config.ladder)
    if not validation.is_valid:
        errors = "; ".join(validation.errors)
        raise GenerationError(f"Validation failed for seed {seed}: {errors}")

    return GenerationResult(
        ladder=ladder,
        seed=seed,
        results=compute_all_results(ladder, config.ladder.column_count),
        validation=validation,
    )
