"""
Plain-text rendering and keypad mapping.

Tiles are numbered like a numeric keypad, 1 at the bottom left:

    q | 7 8 9 | w
      | 4 5 6 |
    a | 1 2 3 | s

q, w, a, s are the NW, NE, SW, SE corner locks.
"""

from typing import Sequence, Tuple, Union

from mora_core.puzzle import Puzzle
from mora_core.types import GRID_SIZE, Coord, Corner, check_coord

CORNER_KEYS = {
    "q": Corner.NW,
    "w": Corner.NE,
    "a": Corner.SW,
    "s": Corner.SE,
}

KEY_FOR_CORNER = {corner: key for key, corner in CORNER_KEYS.items()}


def tile_number(row: int, col: int) -> int:
    check_coord(row, col)
    return 1 + GRID_SIZE * row + col


def tile_coord(number: int) -> Coord:
    row, col = divmod(number - 1, GRID_SIZE)
    check_coord(row, col)
    return row, col


def parse_key(token: str) -> Tuple[str, Union[Coord, Corner]]:
    """
    Translate one input token.

    Returns:
        ("tile", (row, col)) for "1".."9", ("corner", Corner) for q/w/a/s

    Raises:
        ValueError: For any other token
    """
    token = token.strip().lower()
    if token in CORNER_KEYS:
        return "corner", CORNER_KEYS[token]
    if len(token) == 1 and token in "123456789":
        return "tile", tile_coord(int(token))
    raise ValueError(f"Unknown key {token!r}")


def format_puzzle(puzzle: Puzzle) -> str:
    """
    Board with color codes, corner locks outside the frame.

    Example (goals white, SW corner locked):

        Goals: NW=white NE=white SW=white SE=white
        - | w w w | -
          | w - w |
        w | w - w | -
    """
    goals = " ".join(f"{corner.name}={puzzle.goal(corner).label}" for corner in Corner)
    lines = [f"Goals: {goals}"]

    rows = puzzle.current_state.rows()
    left = [puzzle.get_corner(Corner.NW).code, " ", puzzle.get_corner(Corner.SW).code]
    right = [puzzle.get_corner(Corner.NE).code, "", puzzle.get_corner(Corner.SE).code]

    for i, row in enumerate(rows):
        cells = " ".join(color.code for color in row)
        lines.append(f"{left[i]} | {cells} | {right[i]}".rstrip())

    return "\n".join(lines)


def format_solution(presses: Sequence[Coord]) -> str:
    """Solution as keypad numbers, e.g. "Solution: 3 2"."""
    numbers = " ".join(str(tile_number(row, col)) for row, col in presses)
    return f"Solution: {numbers}".rstrip()


def format_keys() -> str:
    """Keypad legend shown by the interactive mode."""
    return "\n".join([
        "q | 7 8 9 | w",
        "  | 4 5 6 |",
        "a | 1 2 3 | s",
    ])
