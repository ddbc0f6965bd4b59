"""Statistics about generated ladders.

Summarizes how busy a board is and how each column fares, in the form of a
small report printed by the CLI in verbose mode.
"""

from __future__ import annotations

from dataclasses import dataclass

from ghostleg.ladder import Ladder
from ghostleg.tracer import compute_all_results


@dataclass
class LadderStats:
    """Statistics about a ladder.

    Attributes:
        rung_count: Total number of rungs.
        slot_count: Number of rung slots on the board (rows * (columns - 1)).
        density: rung_count / slot_count (0.0 for an empty grid).
        crossings: Rungs crossed by the path starting at each column.
        results: Column reached from each starting column.
        fixed_points: Columns that end where they started.
    """

    rung_count: int
    slot_count: int
    density: float
    crossings: list[int]
    results: list[int]
    fixed_points: list[int]

    @classmethod
    def from_ladder(cls, ladder: Ladder) -> LadderStats:
        """Compute statistics from a ladder.

        Args:
            ladder: The ladder to analyze

        Returns:
            LadderStats with computed statistics
        """
        n = ladder.column_count
        slot_count = ladder.row_count * max(n - 1, 0)
        rung_count = ladder.rung_count()
        results = compute_all_results(ladder, n)

        return cls(
            rung_count=rung_count,
            slot_count=slot_count,
            density=rung_count / slot_count if slot_count else 0.0,
            crossings=[_count_crossings(ladder, start) for start in range(n)],
            results=results,
            fixed_points=[i for i, value in enumerate(results) if value == i],
        )


def _count_crossings(ladder: Ladder, start_column: int) -> int:
    """Number of rungs crossed walking down from start_column."""
    col = start_column
    crossings = 0
    for row in range(ladder.row_count):
        if ladder.has_rung(row, col - 1):
            col -= 1
            crossings += 1
        elif ladder.has_rung(row, col):
            col += 1
            crossings += 1
    return crossings


def report_ladder(ladder: Ladder, labels: list[str] | None = None) -> str:
    """Generate a human-readable ladder report.

    Args:
        ladder: The ladder to analyze
        labels: Optional column names (defaults to 1-based numbers)

    Returns:
        Multi-line string report
    """
    stats = LadderStats.from_ladder(ladder)
    labels = labels or [str(i + 1) for i in range(ladder.column_count)]
    lines: list[str] = []

    lines.append("=" * 50)
    lines.append("Ladder Analysis Report")
    lines.append("=" * 50)
    lines.append("")

    lines.append("Board:")
    lines.append(f"  Columns: {ladder.column_count}")
    lines.append(f"  Rows: {ladder.row_count}")
    lines.append(f"  Rungs: {stats.rung_count} / {stats.slot_count} slots")
    lines.append(f"  Density: {stats.density:.0%}")
    lines.append("")

    lines.append("Columns:")
    for start, (end, crossed) in enumerate(
        zip(stats.results, stats.crossings, strict=True)
    ):
        lines.append(
            f"  {labels[start]} -> {labels[end]} ({crossed} rungs crossed)"
        )
    lines.append("")

    if stats.fixed_points:
        names = ", ".join(labels[i] for i in stats.fixed_points)
        lines.append(f"Self-mapped columns ({len(stats.fixed_points)}): {names}")
    else:
        lines.append("Self-mapped columns: none")

    return "\n".join(lines)
