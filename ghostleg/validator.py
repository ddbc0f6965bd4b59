"""Ladder validation for ghostleg.

This module validates generated ladders against their configuration,
distinguishing between errors (blocking) and warnings (informational).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ghostleg.config import LadderConfig
from ghostleg.ladder import Ladder, compute_row_count, has_no_adjacent_rungs
from ghostleg.tracer import compute_all_results


@dataclass
class ValidationResult:
    """Result of ladder validation.

    Attributes:
        is_valid: True if the ladder passes all required checks (no errors).
        errors: List of blocking issues that make the ladder invalid.
        warnings: List of informational issues that don't block validation.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def is_derangement(results: Sequence[int]) -> bool:
    """Return True if no index maps to itself."""
    return all(value != index for index, value in enumerate(results))


def is_permutation(results: Sequence[int]) -> bool:
    """Return True if results is a bijection of ``range(len(results))``."""
    return sorted(results) == list(range(len(results)))


def validate_ladder(ladder: Ladder, config: LadderConfig) -> ValidationResult:
    """Validate a ladder against all constraints.

    Checks:
    - Grid shape (slots per row, row count policy)
    - No adjacent rungs on any row
    - Induced mapping is a permutation
    - No self-mapping when exclude_self is set
    - Degenerate boards (no rungs, identity mapping) = warnings

    Args:
        ladder: The ladder to validate.
        config: Ladder configuration it was generated from.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    shape_errors = _check_shape(ladder, config)
    if shape_errors:
        # Tracing a malformed grid is meaningless
        return ValidationResult(is_valid=False, errors=shape_errors)

    if not has_no_adjacent_rungs(ladder.rungs):
        rows = [
            str(row)
            for row, cells in enumerate(ladder.rungs)
            if not has_no_adjacent_rungs([cells])
        ]
        errors.append(f"Adjacent rungs on rows: {', '.join(rows)}")

    _check_results(ladder, config, errors, warnings)

    if ladder.rung_count() == 0:
        warnings.append("Ladder has no rungs")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _check_shape(ladder: Ladder, config: LadderConfig) -> list[str]:
    """Check row count and slots per row.

    Args:
        ladder: The ladder to check.
        config: Ladder configuration.

    Returns:
        List of error messages.
    """
    errors: list[str] = []
    expected_rows = compute_row_count(config.column_count, config.exclude_self)
    if ladder.row_count != expected_rows:
        errors.append(f"Row count {ladder.row_count} != expected {expected_rows}")
    if len(ladder.rungs) != ladder.row_count:
        errors.append(
            f"Ladder has {len(ladder.rungs)} rung rows but row_count "
            f"{ladder.row_count}"
        )

    expected_slots = config.column_count - 1
    for row, cells in enumerate(ladder.rungs):
        if len(cells) != expected_slots:
            errors.append(
                f"Row {row}: {len(cells)} slots, expected {expected_slots}"
            )
    return errors


def _check_results(
    ladder: Ladder, config: LadderConfig, errors: list[str], warnings: list[str]
) -> None:
    """Check the mapping induced by tracing every column.

    Args:
        ladder: The ladder to check.
        config: Ladder configuration.
        errors: List to append errors to.
        warnings: List to append warnings to.
    """
    results = compute_all_results(ladder, config.column_count)

    if not is_permutation(results):
        errors.append(f"Results {results} are not a permutation")
        return

    if config.exclude_self and not is_derangement(results):
        fixed = [str(i) for i, value in enumerate(results) if value == i]
        errors.append(f"Columns map to themselves: {', '.join(fixed)}")

    if results == list(range(config.column_count)):
        warnings.append("Every column maps to itself")
