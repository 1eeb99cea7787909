"""
Shared grid definitions for turtle path analysis.

Cells are addressed by a single integer index: index = row * width + column.
Row 0 is the bottom row, so moving by +width is a step north.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag


class Direction(Flag):
    """Edge direction between two adjacent cells, combinable with |."""

    NONE = 0
    W = 1  # Left (decreasing col)
    N = 2  # Up (increasing row)
    E = 4  # Right (increasing col)
    S = 8  # Down (decreasing row)


HORIZONTAL = Direction.E | Direction.W
VERTICAL = Direction.N | Direction.S


def edge_direction(from_index: int, to_index: int, width: int) -> Direction:
    """
    Direction of travel from one cell to a 4-adjacent cell.

    Returns Direction.NONE when the cells are equal, not adjacent, or would
    only be adjacent by wrapping from one row into the next.
    """
    if from_index < 0 or to_index < 0:
        return Direction.NONE
    delta = to_index - from_index
    if delta == 1 and to_index % width != 0:
        return Direction.E
    if delta == -1 and from_index % width != 0:
        return Direction.W
    if delta == width:
        return Direction.N
    if delta == -width:
        return Direction.S
    return Direction.NONE


def is_straight(flags: Direction) -> bool:
    """True if the combined flags describe two collinear edges."""
    return flags == HORIZONTAL or flags == VERTICAL


def is_turn(flags: Direction) -> bool:
    """True if the combined flags hold exactly one horizontal and one vertical edge."""
    horizontal = flags & HORIZONTAL
    vertical = flags & VERTICAL
    return horizontal in (Direction.E, Direction.W) and vertical in (Direction.N, Direction.S)


@dataclass(frozen=True)
class Grid:
    """A rectangular grid of width x height cells."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Invalid grid dimensions: {self.width}x{self.height}\n"
                f"  Width and height must both be at least 1"
            )

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def contains(self, index: int) -> bool:
        return 0 <= index < self.cell_count

    def edge_direction(self, from_index: int, to_index: int) -> Direction:
        """Edge direction between two cells of this grid (NONE if either is outside)."""
        if not (self.contains(from_index) and self.contains(to_index)):
            return Direction.NONE
        return edge_direction(from_index, to_index, self.width)

    def column_row(self, index: int) -> tuple[int, int]:
        return (index % self.width, index // self.width)

    def index_of(self, column: int, row: int) -> int:
        return row * self.width + column
