"""
Path parsing utilities.

Provides two formats for supplying a path:
1. Index format: the grid indices of the cells, in order
2. Step format: a start cell plus a string of compass steps
"""

from __future__ import annotations

from grid_path import GridPath
from grid_types import Grid

__all__ = ["parse_path", "parse_path_steps"]


# Column/row delta for each step character; row 0 is the bottom row.
STEP_DELTAS = {
    "N": (0, 1),
    "S": (0, -1),
    "E": (1, 0),
    "W": (-1, 0),
}


def parse_path(definition: str, grid: Grid) -> GridPath:
    """
    Parse a path from a list of grid indices.

    Format:
    - Indices separated by whitespace and/or commas
    - Optional prefix "path:" (open, the default) or "loop:" (closed)

    Example:
        parse_path("loop: 0 1 11 10", Grid(10, 10))
        Creates a closed 4-cell square in the bottom-left corner.

    Args:
        definition: The path definition string
        grid: Grid the indices refer to

    Returns:
        The parsed GridPath

    Raises:
        ValueError: If a token is not an integer, a cell is outside the grid,
            or the definition has no cells
    """
    body = definition.strip()
    is_closed = False
    if ":" in body:
        kind, body = body.split(":", 1)
        kind = kind.strip().lower()
        if kind not in ("path", "loop"):
            raise ValueError(
                f"Invalid path kind: '{kind}'\n"
                f"  Definition: \"{definition}\"\n"
                f"  Expected 'path:' or 'loop:'"
            )
        is_closed = kind == "loop"

    tokens = body.replace(",", " ").split()
    if not tokens:
        raise ValueError(f"Empty path definition: \"{definition}\"")

    cells: list[int] = []
    for token_idx, token in enumerate(tokens):
        try:
            cell = int(token)
        except ValueError:
            raise ValueError(
                f"Invalid cell index: '{token}'\n"
                f"  Definition: \"{definition}\"\n"
                f"  Position: token {token_idx}\n"
                f"  Cell indices must be integers"
            ) from None
        if not grid.contains(cell):
            raise ValueError(
                f"Cell index {cell} outside the grid\n"
                f"  Definition: \"{definition}\"\n"
                f"  Position: token {token_idx}\n"
                f"  Grid is {grid.width}x{grid.height} (indices 0-{grid.cell_count - 1})"
            )
        cells.append(cell)

    return GridPath(grid, cells, is_closed=is_closed)


def parse_path_steps(
    start: tuple[int, int],
    steps: str,
    grid: Grid,
    is_closed: bool = False,
) -> GridPath:
    """
    Parse a path from a start cell and a sequence of compass steps.

    Format:
    - start is a (column, row) pair
    - steps is a string over N, E, S, W (case-insensitive, whitespace ignored)
    - A closed path must step back onto its start; that final cell is not
      stored twice

    Example:
        parse_path_steps((0, 0), "ENWS", Grid(10, 10), is_closed=True)
        Creates the loop 0 1 11 10.

    Raises:
        ValueError: On an unknown step, a step off the grid, or a loop that
            does not return to its start
    """
    column, row = start
    if not (0 <= column < grid.width and 0 <= row < grid.height):
        raise ValueError(
            f"Start cell {start} outside the grid\n"
            f"  Grid is {grid.width}x{grid.height}"
        )

    cells = [grid.index_of(column, row)]
    for step_idx, char in enumerate(c for c in steps.upper() if not c.isspace()):
        if char not in STEP_DELTAS:
            raise ValueError(
                f"Invalid step '{char}' in \"{steps}\"\n"
                f"  Step {step_idx}\n"
                f"  Valid steps: N, E, S, W"
            )
        dc, dr = STEP_DELTAS[char]
        column += dc
        row += dr
        if not (0 <= column < grid.width and 0 <= row < grid.height):
            raise ValueError(
                f"Step {step_idx} ('{char}') leaves the grid\n"
                f"  Steps: \"{steps}\"\n"
                f"  Reached (column {column}, row {row}) on a {grid.width}x{grid.height} grid"
            )
        cells.append(grid.index_of(column, row))

    if is_closed:
        if len(cells) < 2 or cells[-1] != cells[0]:
            raise ValueError(
                f"Loop does not return to its start\n"
                f"  Start: {start}\n"
                f"  Steps: \"{steps}\"\n"
                f"  Ends at (column {column}, row {row})"
            )
        cells.pop()

    return GridPath(grid, cells, is_closed=is_closed)
