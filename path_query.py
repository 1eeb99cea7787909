"""
Pattern queries over turtle strings.

All queries work on the string alone, so they can be reused on strings that
were stored or edited. Pass is_closed=True for loops: matches and runs may
then wrap from the end of the string back to its start.

Note that a match index is a vertex index in the turtle string. For open
paths the vertex at string index i is path position i + 1.
"""

from __future__ import annotations

import re

from turtle_string import DEFAULT_ALPHABET, TurtleAlphabet


def search(turtle: str, pattern: str | re.Pattern[str], is_closed: bool = False) -> list[int]:
    """
    Search a turtle string for a regular expression.

    Args:
        turtle: The turtle string of straight, left and right symbols
        pattern: Regex source or compiled pattern
        is_closed: True if the string describes a loop

    Returns:
        Start index of each non-overlapping match, left to right
    """
    if not turtle:
        return []
    regex = re.compile(pattern)
    # Loops get their first symbol appended so a match may end on the wrap.
    search_string = turtle + turtle[0] if is_closed else turtle
    return [m.start() for m in regex.finditer(search_string) if m.start() < len(turtle)]


def u_turns(
    turtle: str,
    is_closed: bool = False,
    alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
) -> list[int]:
    """Start indices of all U-turns (two consecutive lefts or two consecutive rights)."""
    left = re.escape(alphabet.left)
    right = re.escape(alphabet.right)
    return search(turtle, f"({right}{right}|{left}{left})", is_closed)


def _runs(turtle: str, symbols: str, is_closed: bool) -> list[tuple[int, int]]:
    """
    (start, length) of every maximal run of characters drawn from symbols.

    On a loop the scan starts just after the last non-matching character, so
    a run crossing the wrap point is seen once with its true start.
    """
    n = len(turtle)
    if n == 0:
        return []

    offset = 0
    if is_closed:
        last_break = next((i for i in range(n - 1, -1, -1) if turtle[i] not in symbols), None)
        if last_break is None:
            return [(0, n)]
        offset = last_break + 1

    runs: list[tuple[int, int]] = []
    run_start: int | None = None
    run_length = 0
    for k in range(n):
        i = (offset + k) % n
        if turtle[i] in symbols:
            if run_start is None:
                run_start = i
                run_length = 0
            run_length += 1
        elif run_start is not None:
            runs.append((run_start, run_length))
            run_start = None

    if run_start is not None:
        runs.append((run_start, run_length))
    return runs


def straight_aways(
    turtle: str,
    min_length: int,
    is_closed: bool = False,
    alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
) -> list[int]:
    """
    Start indices of straight runs at least min_length long.

    Each maximal run is reported once, however long it is.
    """
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")
    runs = _runs(turtle, alphabet.straight, is_closed)
    return sorted(start for start, length in runs if length >= min_length)


def speed_agility_ratio(
    turtle: str,
    center_index: int,
    half_window: int = 2,
    is_closed: bool = False,
    include_last: bool = False,
    alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
) -> float:
    """
    Fraction of straights within a window centred on a turtle string index.

    The window is cropped to the valid region. For open strings the valid
    region stops one short of the last symbol unless include_last is set;
    loops always reach their last symbol.

    Returns:
        A value from 0 to 1, or -1 if the cropped window is empty
    """
    if is_closed or include_last:
        upper = len(turtle) - 1
    else:
        upper = len(turtle) - 2
    start_index = max(0, center_index - half_window)
    end_index = min(center_index + half_window, upper)
    window_size = end_index - start_index + 1

    if window_size == 1:
        return 1.0 if turtle[start_index] == alphabet.straight else 0.0
    if window_size <= 0:
        return -1.0

    straights = turtle.count(alphabet.straight, start_index, end_index + 1)
    return straights / window_size


def maximum_consecutive_straights(
    turtle: str,
    is_closed: bool = False,
    alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
) -> int:
    """Length of the longest run of straights."""
    return max((length for _, length in _runs(turtle, alphabet.straight, is_closed)), default=0)


def maximum_consecutive_turns(
    turtle: str,
    is_closed: bool = False,
    alphabet: TurtleAlphabet = DEFAULT_ALPHABET,
) -> int:
    """Length of the longest run of turns, left and right mixed."""
    return max((length for _, length in _runs(turtle, alphabet.turn_symbols, is_closed)), default=0)
