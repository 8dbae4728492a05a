"""
Core type definitions for the Mora Jai puzzle.

Tile layout (row, col), row 0 is the bottom row:

    | 2,0 | 2,1 | 2,2 |
    | 1,0 | 1,1 | 1,2 |
    | 0,0 | 0,1 | 0,2 |

Corner tiles: NW=(2,0), NE=(2,2), SW=(0,0), SE=(0,2).
"""

from enum import IntEnum
from typing import Dict, Tuple

GRID_SIZE = 3
NUM_TILES = GRID_SIZE * GRID_SIZE

# Tile coordinates (row, col)
Coord = Tuple[int, int]


class Color(IntEnum):
    """
    Tile colors.

    The integer value is the global order used whenever colors have to be
    compared deterministically (histograms, sorting, receipts).
    """

    GRAY = 0
    WHITE = 1
    BLACK = 2
    RED = 3
    ORANGE = 4
    GREEN = 5
    YELLOW = 6
    VIOLET = 7
    PINK = 8
    BLUE = 9

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "violet"."""
        return self.name.lower()

    @property
    def code(self) -> str:
        """One-character code used by the puzzle line format."""
        return COLOR_CODES[self]


NUM_COLORS = len(Color)

COLOR_CODES: Dict[Color, str] = {
    Color.GRAY: "-",
    Color.WHITE: "w",
    Color.BLACK: "k",
    Color.RED: "r",
    Color.ORANGE: "o",
    Color.GREEN: "g",
    Color.YELLOW: "y",
    Color.VIOLET: "v",
    Color.PINK: "p",
    Color.BLUE: "b",
}

CODE_TO_COLOR: Dict[str, Color] = {code: color for color, code in COLOR_CODES.items()}


class Corner(IntEnum):
    """Corner lock slots. The value is the index into goals/locks."""

    NW = 0
    NE = 1
    SW = 2
    SE = 3


# Fixed corner → tile binding (never configurable)
CORNER_TILES: Dict[Corner, Coord] = {
    Corner.NW: (2, 0),
    Corner.NE: (2, 2),
    Corner.SW: (0, 0),
    Corner.SE: (0, 2),
}

# Goals and locks are always 4 colors in Corner order
CornerColors = Tuple[Color, Color, Color, Color]


def valid_coord(row: int, col: int) -> bool:
    """True if (row, col) addresses a tile on the 3×3 board."""
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


def check_coord(row: int, col: int) -> None:
    """
    Raise ValueError for coordinates outside the board.

    Out-of-range coordinates are a caller bug, never user input: the
    keypad layer translates keys to valid coordinates before calling in.
    """
    if not valid_coord(row, col):
        raise ValueError(f"invalid row or column: ({row}, {col})")


def tile_index(row: int, col: int) -> int:
    """Row-major index of (row, col), counting from the bottom row."""
    check_coord(row, col)
    return row * GRID_SIZE + col
