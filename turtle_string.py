"""
Turtle strings: encode the local geometry at each vertex of a grid path.

Each vertex is classified by the edges entering and leaving it:
straight on, a left turn, a right turn, or invalid (the neighbours are not
grid-adjacent). The symbols are joined into a string that can be searched
with ordinary string and regex tools (see path_query).

Does not support toroidal grids.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from grid_path import GridPath
from grid_types import is_straight, is_turn

logger = logging.getLogger(__name__)


class Turn(Enum):
    """Turtle action at a single path vertex."""

    STRAIGHT = "straight"
    LEFT = "left"
    RIGHT = "right"
    INVALID = "invalid"  # Disconnected or non-adjacent cells


@dataclass(frozen=True)
class TurtleAlphabet:
    """Characters used to write each Turn into a turtle string."""

    straight: str = "S"
    left: str = "L"
    right: str = "R"
    invalid: str = "X"

    def __post_init__(self) -> None:
        symbols = [self.straight, self.left, self.right, self.invalid]
        bad = [s for s in symbols if len(s) != 1]
        if bad:
            raise ValueError(
                f"Invalid turtle alphabet: {symbols}\n"
                f"  Every symbol must be a single character, got {bad}"
            )
        if len(set(symbols)) != len(symbols):
            raise ValueError(
                f"Invalid turtle alphabet: {symbols}\n"
                f"  Symbols must be distinct"
            )

    @property
    def turn_symbols(self) -> str:
        return self.left + self.right

    def symbol(self, turn: Turn) -> str:
        match turn:
            case Turn.STRAIGHT:
                return self.straight
            case Turn.LEFT:
                return self.left
            case Turn.RIGHT:
                return self.right
            case Turn.INVALID:
                return self.invalid
        raise ValueError(f"Unknown turn: {turn}")

    def turn_of(self, char: str) -> Turn:
        for turn in Turn:
            if self.symbol(turn) == char:
                return turn
        raise ValueError(
            f"Unknown turtle symbol: '{char}'\n"
            f"  Valid symbols: {self.straight}{self.left}{self.right}{self.invalid}"
        )


DEFAULT_ALPHABET = TurtleAlphabet()


def classify_at(path: GridPath, position_index: int, is_loop: bool = False) -> Turn:
    """
    Determine whether the path goes straight, turns left or turns right at a position.

    Open paths have no turn at their endpoints; asking for one raises the
    IndexError of the missing neighbour.

    Args:
        path: The path to query
        position_index: Index into the path's positions (not a grid index)
        is_loop: Wrap the neighbours of the first and last positions

    Returns:
        The Turn at that position
    """
    prior_index = position_index - 1
    next_index = position_index + 1
    if is_loop and prior_index < 0:
        prior_index = path.count - 1
    if is_loop and next_index >= path.count:
        next_index = 0

    prior_cell = path[prior_index]
    cell = path[position_index]
    next_cell = path[next_index]

    combined = path.grid.edge_direction(prior_cell, cell)
    combined |= path.grid.edge_direction(next_cell, cell)
    if is_straight(combined):
        return Turn.STRAIGHT
    if is_turn(combined):
        # Logic table of (i-1)->i versus i->i+1 collapsed into one sign test.
        # A column step has magnitude 1, a row step magnitude width (never 2).
        delta_in = cell - prior_cell
        delta_out = next_cell - cell
        test_value = (abs(delta_in) - 2) * delta_in * delta_out
        if test_value < 0:
            return Turn.LEFT
        return Turn.RIGHT

    logger.debug(
        "classify_at: invalid vertex at position %d (cells %d -> %d -> %d)",
        position_index,
        prior_cell,
        cell,
        next_cell,
    )
    return Turn.INVALID


def iter_turns(path: GridPath) -> Iterator[Turn]:
    """Yield the Turn at every vertex that has one, in path order."""
    if path.is_closed:
        for i in range(path.count):
            yield classify_at(path, i, is_loop=True)
    else:
        for i in range(1, path.count - 1):
            yield classify_at(path, i, is_loop=False)


def build_turtle_string(path: GridPath, alphabet: TurtleAlphabet = DEFAULT_ALPHABET) -> str:
    """
    Build the turtle string for a path.

    An open path of n cells gives n - 2 symbols (its endpoints have no turn);
    a closed loop gives one symbol per cell.
    """
    return "".join(alphabet.symbol(turn) for turn in iter_turns(path))
