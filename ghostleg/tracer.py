"""Path tracing through a ladder.

A token starts at the top of a column and walks down row by row. On each
row it crosses at most one rung: the one to its left if present, otherwise
the one to its right.
"""

from __future__ import annotations

from ghostleg.config import GeometryConfig, InvalidConfiguration
from ghostleg.ladder import Ladder, PathPoint, TraceResult

# Horizontal margin before the first column, in drawing units
DEFAULT_X_OFFSET = 50


def column_x(col: int, cell_width: float, x_offset: float = DEFAULT_X_OFFSET) -> float:
    """X coordinate of a vertical line."""
    return col * cell_width + cell_width / 2 + x_offset


def row_y(row: int, cell_height: float, start_y: float) -> float:
    """Y coordinate of a row's rungs (middle of the cell)."""
    return row * cell_height + start_y + cell_height / 2


def trace_path(
    ladder: Ladder,
    start_column: int,
    column_count: int,
    cell_width: float,
    cell_height: float,
    start_y: float,
    x_offset: float = DEFAULT_X_OFFSET,
) -> TraceResult:
    """Trace a column from top to bottom, recording every waypoint.

    Args:
        ladder: The board to walk.
        start_column: Column the token starts in.
        column_count: Number of vertical lines.
        cell_width: Horizontal distance between lines.
        cell_height: Vertical distance between rows.
        start_y: Y coordinate of the top of the board.
        x_offset: Margin added to every x coordinate.

    Returns:
        TraceResult with the waypoint path and the column reached.

    Raises:
        InvalidConfiguration: If column_count is not the ladder's width, or
            start_column is outside [0, column_count).
    """
    if column_count != ladder.column_count:
        raise InvalidConfiguration(
            f"column_count {column_count} does not match ladder width "
            f"{ladder.column_count}"
        )
    if not 0 <= start_column < column_count:
        raise InvalidConfiguration(
            f"start_column must be in [0, {column_count}), got {start_column}"
        )

    col = start_column
    path = [PathPoint(column_x(col, cell_width, x_offset), start_y)]

    for row in range(ladder.row_count):
        y = row_y(row, cell_height, start_y)
        path.append(PathPoint(column_x(col, cell_width, x_offset), y))

        # Left rung wins; the adjacency invariant means both never exist
        if col > 0 and ladder.rungs[row][col - 1]:
            col -= 1
            path.append(PathPoint(column_x(col, cell_width, x_offset), y))
        elif col < column_count - 1 and ladder.rungs[row][col]:
            col += 1
            path.append(PathPoint(column_x(col, cell_width, x_offset), y))

    final_y = ladder.row_count * cell_height + start_y
    path.append(PathPoint(column_x(col, cell_width, x_offset), final_y))

    return TraceResult(path=path, final_column=col)


def trace_with_geometry(
    ladder: Ladder, start_column: int, geometry: GeometryConfig
) -> TraceResult:
    """Trace a column using drawing geometry from the configuration."""
    return trace_path(
        ladder,
        start_column,
        ladder.column_count,
        geometry.cell_width,
        geometry.cell_height,
        geometry.start_y,
        geometry.x_offset,
    )


def compute_all_results(ladder: Ladder, column_count: int) -> list[int]:
    """Return the column reached from every starting column.

    Geometry is irrelevant to the result, so unit cells are used.
    """
    return [
        trace_path(ladder, start, column_count, 1, 1, 0).final_column
        for start in range(column_count)
    ]
