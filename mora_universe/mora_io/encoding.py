"""
Compact one-line puzzle format.

A puzzle line holds 13 color codes: 4 goals (NW, NE, SW, SE) followed by
the 9 grid cells read left to right, top row first. Whitespace is ignored,
so "kkkk k-k --- k-k" and "kkkkk-k---k-k" are the same puzzle.

Codes: - gray, w white, k black, r red, o orange, g green, y yellow,
v violet, p pink, b blue.
"""

from typing import List, Sequence, Tuple

from mora_core.grid import Grid
from mora_core.puzzle import Puzzle
from mora_core.types import CODE_TO_COLOR, GRID_SIZE, NUM_TILES, Color, Corner, CornerColors

LINE_LENGTH = len(Corner) + NUM_TILES


class PuzzleDecodeError(ValueError):
    """A puzzle line has the wrong length or an unknown color code."""


def decode_line(line: str) -> Tuple[CornerColors, Grid]:
    """
    Decode a puzzle line into goals and grid.

    Raises:
        PuzzleDecodeError: If the line is not exactly 13 known codes
    """
    codes = "".join(line.split())
    if len(codes) != LINE_LENGTH:
        raise PuzzleDecodeError(
            f"Expected {LINE_LENGTH} color codes, got {len(codes)}: {line.strip()!r}"
        )

    colors: List[Color] = []
    for position, code in enumerate(codes):
        color = CODE_TO_COLOR.get(code)
        if color is None:
            raise PuzzleDecodeError(f"Unknown color code {code!r} at position {position}")
        colors.append(color)

    goals = tuple(colors[: len(Corner)])
    cells = colors[len(Corner):]
    top, middle, bottom = (cells[i:i + GRID_SIZE] for i in range(0, NUM_TILES, GRID_SIZE))

    return goals, Grid.from_rows(top, middle, bottom)


def decode_puzzle(line: str) -> Puzzle:
    goals, grid = decode_line(line)
    return Puzzle(goals, grid)


def encode_puzzle(goals: Sequence[Color], grid: Grid) -> str:
    """Inverse of decode_line(), without whitespace."""
    goal_codes = "".join(Color(goal).code for goal in goals)
    cell_codes = "".join(color.code for row in grid.rows() for color in row)
    return goal_codes + cell_codes
