"""
Immutable path or loop through the cells of a Grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from grid_types import Grid


@dataclass(frozen=True)
class GridPath:
    """
    An ordered sequence of grid cell indices.

    If is_closed is True the path is a loop: the last position connects back
    to the first one, and that closing edge is not stored.

    Args:
        grid: The grid the path is defined on
        positions: Cell indices the path passes through, in order
        path_length: A cost for the whole path; negative means "use the count"
        is_closed: Whether the path forms a loop
    """

    grid: Grid
    positions: tuple[int, ...]
    path_length: float = -1
    is_closed: bool = False

    def __init__(
        self,
        grid: Grid,
        positions: Iterable[int],
        path_length: float = -1,
        is_closed: bool = False,
    ) -> None:
        cells = tuple(positions)
        if not cells:
            raise ValueError("A path needs at least one position")
        object.__setattr__(self, "grid", grid)
        object.__setattr__(self, "positions", cells)
        object.__setattr__(self, "path_length", len(cells) if path_length < 0 else path_length)
        object.__setattr__(self, "is_closed", is_closed)

    @property
    def count(self) -> int:
        return len(self.positions)

    @property
    def position_count(self) -> int:
        """Logical positions, counting the implied closing edge of a loop."""
        return self.count + (1 if self.is_closed else 0)

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self.positions):
            raise IndexError(
                f"Path index {index} out of range for a path of {len(self.positions)} positions"
            )
        return self.positions[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)
