"""
Metrics computed from a GridPath: turtle string, endpoints and longest runs.

PathMetrics is a read-only snapshot. LoopMetrics adds re-anchoring of a
closed loop, which rebuilds the path from the original ordering and
recomputes everything.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

import path_query
from grid_path import GridPath
from grid_types import Grid
from turtle_string import DEFAULT_ALPHABET, TurtleAlphabet, build_turtle_string

logger = logging.getLogger(__name__)


class PathMetrics:
    """
    Derived data for a path on a grid.

    Attributes:
        path: The path these metrics are based on
        grid_width: Number of columns of the underlying grid
        path_length: Number of stored cells in the path
        turtle_path: Straight/left/right string for the path's vertices
        starting_cell: (column, row) of the first cell
        ending_cell: (column, row) of the last stored cell
        maximum_consecutive_straights: Longest run of straights
        maximum_consecutive_turns: Longest run of turns (left or right)
    """

    def __init__(self, path: GridPath, alphabet: TurtleAlphabet = DEFAULT_ALPHABET):
        self.alphabet = alphabet
        self._compute(path)

    def _compute(self, path: GridPath) -> None:
        self.path = path
        self.grid_width = path.grid.width
        self.path_length = path.count
        self.starting_cell = self.grid_column_row(0)
        self.ending_cell = self.grid_column_row(path.count - 1)
        self.turtle_path = build_turtle_string(path, self.alphabet)
        self.maximum_consecutive_straights = path_query.maximum_consecutive_straights(
            self.turtle_path, path.is_closed, self.alphabet
        )
        self.maximum_consecutive_turns = path_query.maximum_consecutive_turns(
            self.turtle_path, path.is_closed, self.alphabet
        )
        logger.info(
            "path metrics: cells=%d closed=%s turtle=%s max_straights=%d max_turns=%d",
            path.count,
            path.is_closed,
            self.turtle_path,
            self.maximum_consecutive_straights,
            self.maximum_consecutive_turns,
        )

    @property
    def is_closed(self) -> bool:
        return self.path.is_closed

    def grid_index(self, path_index: int) -> int:
        """Grid index of the cell at a position along the path."""
        return self.path[path_index]

    def grid_index_at(self, distance_fraction: float) -> int:
        """Grid index of the cell at a fraction (0 to 1) of the way along the path."""
        path_index = round(distance_fraction * self.path_length)
        path_index = min(max(path_index, 0), self.path_length - 1)
        return self.path[path_index]

    def grid_column_row(self, path_index: int) -> tuple[int, int]:
        """(column, row) of the cell at a position along the path."""
        index = self.path[path_index]
        return (index % self.grid_width, index // self.grid_width)

    def grid_indices_where(self, pattern: str | re.Pattern[str]) -> list[int]:
        """
        Grid index for each match of a regex in the turtle path.

        The match index is used as the path index, so for open paths this is
        the cell before the matched vertex: a left turn entering at i-1 and
        turning at i reports the cell at i-1.
        """
        return [
            self.path[string_index]
            for string_index in path_query.search(self.turtle_path, pattern, self.is_closed)
        ]

    def u_turns(self) -> list[int]:
        return path_query.u_turns(self.turtle_path, self.is_closed, self.alphabet)

    def straight_aways(self, min_length: int) -> list[int]:
        return path_query.straight_aways(self.turtle_path, min_length, self.is_closed, self.alphabet)

    def speed_agility_ratio(self, center_index: int, half_window: int = 2) -> float:
        return path_query.speed_agility_ratio(
            self.turtle_path, center_index, half_window, self.is_closed, alphabet=self.alphabet
        )


class LoopMetrics(PathMetrics):
    """
    Metrics for a closed loop whose starting point can be moved.

    rotate() always works from the original ordering, so rotating to k and
    then back to 0 restores the original metrics exactly.
    """

    def __init__(
        self,
        path: GridPath,
        anchor: int = 0,
        alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
    ):
        if not path.is_closed:
            raise ValueError(
                f"LoopMetrics needs a closed path\n"
                f"  Got an open path of {path.count} cells starting at {path[0]}"
            )
        self.original_path = path
        self.anchor = 0
        super().__init__(path, alphabet)
        if anchor != 0:
            self.rotate(anchor)

    @classmethod
    def from_indices(
        cls,
        indices: Iterable[int],
        width: int,
        anchor: int = 0,
        alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
    ) -> LoopMetrics:
        """Build loop metrics straight from a list of grid indices and a grid width."""
        cells = list(indices)
        rows = max(cells) // width + 1 if cells else 1
        path = GridPath(Grid(width, rows), cells, is_closed=True)
        return cls(path, anchor, alphabet)

    def rotate(self, anchor: int) -> None:
        """
        Re-anchor the loop to start at an index of the original path.

        Args:
            anchor: Index into the original path's positions
        """
        original = self.original_path
        if not 0 <= anchor < original.count:
            raise IndexError(
                f"Loop anchor {anchor} out of range for a loop of {original.count} positions"
            )
        cells = [original[(anchor + k) % original.count] for k in range(original.count)]
        rotated = GridPath(original.grid, cells, original.path_length, is_closed=True)
        self.anchor = anchor
        logger.info("rotating loop to anchor %d (cell %d)", anchor, original[anchor])
        self._compute(rotated)
