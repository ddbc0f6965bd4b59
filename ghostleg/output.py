"""Output module for ladder export to JSON and result sheets.

This module provides functions to export a generated ladder to:
- JSON format for consumption by a drawing/animation front end
- Human-readable result sheet with an ASCII drawing of the board
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from ghostleg.ladder import Ladder
from ghostleg.tracer import compute_all_results

FORMAT_VERSION = "1.0"

# Width of one column cell in the ASCII drawing ("|" plus three rung chars)
CELL_CHARS = 4


def ladder_to_dict(
    ladder: Ladder,
    seed: int,
    labels: list[str] | None = None,
    exclude_self: bool = False,
) -> dict[str, Any]:
    """Convert a ladder to a JSON-serializable dictionary.

    Args:
        ladder: The ladder to convert
        seed: Seed the ladder was generated with
        labels: Column names (defaults to 1-based numbers)
        exclude_self: Whether the ladder was generated in exclude-self mode

    Returns:
        Dictionary with the following structure:
        - version: format version
        - seed, column_count, row_count, exclude_self
        - labels: one name per column
        - rungs: rows of 0/1 slot flags
        - results: column reached from each starting column
    """
    n = ladder.column_count
    return {
        "version": FORMAT_VERSION,
        "seed": seed,
        "column_count": n,
        "exclude_self": exclude_self,
        "labels": labels or [str(i + 1) for i in range(n)],
        **ladder.to_dict(),
        "results": compute_all_results(ladder, n),
    }


def export_json(
    ladder: Ladder,
    output_path: Path,
    seed: int,
    labels: list[str] | None = None,
    exclude_self: bool = False,
) -> None:
    """Export a ladder to a JSON file.

    Args:
        ladder: The ladder to export
        output_path: Path to write the JSON file
        seed: Seed the ladder was generated with
        labels: Column names
        exclude_self: Whether the ladder was generated in exclude-self mode
    """
    data = ladder_to_dict(ladder, seed, labels, exclude_self)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_ladder_json(path: Path) -> Ladder:
    """Load a ladder previously written by export_json.

    Args:
        path: Path to the JSON file

    Returns:
        The Ladder stored in the file
    """
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return Ladder.from_dict(data)


def render_ascii(ladder: Ladder) -> str:
    """Draw the board with ``|`` for lines and ``---`` for rungs.

    Column numbers are printed above and below the board.
    """
    n = ladder.column_count
    numbers = "".join(f"{i + 1:<{CELL_CHARS}}" for i in range(n)).rstrip()
    blank = "   ".join("|" * n)

    lines = [numbers, blank]
    for row in ladder.rungs:
        line = "|"
        for cell in row:
            line += ("---" if cell else "   ") + "|"
        lines.append(line)
    lines.append(blank)
    lines.append(numbers)
    return "\n".join(lines)


def export_result_sheet(
    ladder: Ladder,
    output_path: Path,
    seed: int,
    labels: list[str] | None = None,
) -> None:
    """Export a human-readable result sheet.

    Args:
        ladder: The ladder to export
        output_path: Path to write the sheet
        seed: Seed the ladder was generated with
        labels: Column names (defaults to 1-based numbers)
    """
    n = ladder.column_count
    labels = labels or [str(i + 1) for i in range(n)]
    results = compute_all_results(ladder, n)
    lines: list[str] = []

    # Header
    lines.append("=" * 60)
    lines.append(f"GHOSTLEG RESULTS (seed: {seed})")
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("=" * 60)
    lines.append(f"Columns: {n}")
    lines.append(f"Rows: {ladder.row_count}")
    lines.append("")

    lines.append(render_ascii(ladder))
    lines.append("")

    lines.append("Results:")
    name_width = max(len(label) for label in labels)
    for start, end in enumerate(results):
        lines.append(f"  {labels[start]:<{name_width}} -> {labels[end]}")
    lines.append("")

    output_path.write_text("\n".join(lines), encoding="utf-8")
