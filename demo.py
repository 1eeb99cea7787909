"""
Demonstration of turtle string metrics on a few sample paths.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Grid
from path_metrics import LoopMetrics, PathMetrics
from path_parser import parse_path, parse_path_steps
from turtle_string import DEFAULT_ALPHABET, TurtleAlphabet


def format_turtle_string(
    turtle: str,
    alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
    color: bool = True,
) -> str:
    """Color each turtle symbol by its kind (plain text when color is False)."""
    if not color:
        return turtle
    colors: dict[str, Callable[[str], str]] = {
        alphabet.straight: chalk.green,
        alphabet.left: chalk.blue,
        alphabet.right: chalk.yellow,
        alphabet.invalid: chalk.red,
    }
    return "".join(colors.get(char, chalk.white)(char) for char in turtle)


def describe_metrics(metrics: PathMetrics, color: bool = True) -> str:
    """Multi-line summary of a PathMetrics (or LoopMetrics)."""
    kind = "loop" if metrics.is_closed else "path"
    lines = [
        f"{kind} of {metrics.path_length} cells: {metrics.starting_cell} -> {metrics.ending_cell}",
        f"  turtle:         {format_turtle_string(metrics.turtle_path, metrics.alphabet, color)}",
        f"  max straights:  {metrics.maximum_consecutive_straights}",
        f"  max turns:      {metrics.maximum_consecutive_turns}",
        f"  u-turns at:     {metrics.u_turns()}",
    ]
    if isinstance(metrics, LoopMetrics):
        lines.append(f"  anchor:         {metrics.anchor}")
    return "\n".join(lines)


def demo() -> None:
    """Print metrics for an open path, a loop, and the loop re-anchored."""
    grid = Grid(10, 10)

    print("=" * 60)
    print("Open paths")
    print("=" * 60)
    print()
    straight = parse_path("20 21 22 23 24", grid)
    print(describe_metrics(PathMetrics(straight)))
    print()
    zigzag = parse_path_steps((0, 0), "EENNWWNNEEEE", grid)
    zigzag_metrics = PathMetrics(zigzag)
    print(describe_metrics(zigzag_metrics))
    print(f"  straight-aways (>=2): {zigzag_metrics.straight_aways(2)}")
    print()

    print("=" * 60)
    print("Loops")
    print("=" * 60)
    print()
    loop = parse_path_steps((2, 2), "EEENNWWWSS", grid, is_closed=True)
    loop_metrics = LoopMetrics(loop)
    print(describe_metrics(loop_metrics))
    print()
    loop_metrics.rotate(3)
    print(describe_metrics(loop_metrics))
    print()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "verbose":
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    demo()
