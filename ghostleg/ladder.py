"""Ladder data structures for ghostleg.

This module contains the plain data produced by the generator and consumed
by the tracer and any presentation layer: the rung grid itself and the
waypoints of a traced path.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ghostleg.config import InvalidConfiguration

# Every board has at least this many rows, whatever the column count
MIN_ROW_COUNT = 12


def compute_row_count(column_count: int, exclude_self: bool) -> int:
    """Number of rows for a board of column_count lines.

    Exclude-self boards get a quadratic height so the tail can hold a
    worst-case run of correction swaps.

    Raises:
        InvalidConfiguration: If column_count < 2.
    """
    if column_count < 2:
        raise InvalidConfiguration(
            f"column_count must be at least 2, got {column_count}"
        )
    if exclude_self:
        return max(MIN_ROW_COUNT, column_count * column_count)
    return max(MIN_ROW_COUNT, column_count * 4)


def has_no_adjacent_rungs(rungs: Sequence[Sequence[bool]]) -> bool:
    """Return True if no row has two rungs sharing a vertical line."""
    return all(
        not (row[i] and row[i - 1]) for row in rungs for i in range(1, len(row))
    )


@dataclass(frozen=True)
class Ladder:
    """A generated ghost-leg board.

    ``rungs[row][slot]`` is True when a rung joins column ``slot`` and
    column ``slot + 1`` on that row. Rows are stored as tuples so a board
    cannot change once generated.
    """

    rungs: tuple[tuple[bool, ...], ...]
    row_count: int

    @classmethod
    def from_rows(cls, rows: list[list[bool]]) -> Ladder:
        """Build a Ladder from mutable rows (as assembled by the generator)."""
        return cls(
            rungs=tuple(tuple(bool(cell) for cell in row) for row in rows),
            row_count=len(rows),
        )

    @property
    def column_count(self) -> int:
        """Number of vertical lines (one more than the slots per row)."""
        if not self.rungs:
            return 0
        return len(self.rungs[0]) + 1

    def has_rung(self, row: int, slot: int) -> bool:
        """Return True if a rung sits at (row, slot); out-of-range is False."""
        if slot < 0 or slot >= self.column_count - 1:
            return False
        return self.rungs[row][slot]

    def rung_count(self) -> int:
        """Total number of rungs on the board."""
        return sum(sum(row) for row in self.rungs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary (rows of 0/1)."""
        return {
            "row_count": self.row_count,
            "rungs": [[int(cell) for cell in row] for row in self.rungs],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Ladder:
        """Create a Ladder from the output of to_dict().

        Raises:
            InvalidConfiguration: If rows differ in width, a row has adjacent
                rungs, or row_count disagrees with the rows.
        """
        ladder = cls.from_rows(data["rungs"])
        widths = {len(row) for row in ladder.rungs}
        if len(widths) > 1:
            raise InvalidConfiguration(
                f"Rung rows differ in width: {sorted(widths)}"
            )
        if not has_no_adjacent_rungs(ladder.rungs):
            raise InvalidConfiguration("Ladder has adjacent rungs on a row")
        if ladder.row_count != data.get("row_count", ladder.row_count):
            raise InvalidConfiguration(
                f"row_count {data['row_count']} does not match "
                f"{ladder.row_count} rung rows"
            )
        return ladder


@dataclass(frozen=True)
class PathPoint:
    """A waypoint of a traced path, in drawing coordinates."""

    x: float
    y: float


@dataclass
class TraceResult:
    """Result of tracing one column through a ladder.

    Attributes:
        path: Ordered waypoints, alternating vertical and horizontal moves.
        final_column: Column reached at the bottom of the board.
    """

    path: list[PathPoint] = field(default_factory=list)
    final_column: int = 0
