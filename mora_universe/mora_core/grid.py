"""
Immutable 3×3 puzzle grid.

A Grid is a value: equality and hashing are structural, and every press
returns a new Grid. The solver's seen-set and the puzzle's reset snapshot
both rely on this.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from mora_core.types import (
    CORNER_TILES,
    GRID_SIZE,
    NUM_TILES,
    Color,
    Corner,
    CornerColors,
    tile_index,
)
from mora_laws.tile_rules import apply_press


@dataclass(frozen=True)
class Grid:
    """
    9 colors in row-major order, bottom row first (index = row * 3 + col).

    Use Grid.from_rows() to build a grid in print layout (top row first).
    """

    cells: Tuple[Color, ...]

    def __post_init__(self):
        cells = tuple(Color(c) for c in self.cells)
        if len(cells) != NUM_TILES:
            raise ValueError(f"Grid needs exactly {NUM_TILES} cells, got {len(cells)}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_rows(cls, top: Sequence[Color], middle: Sequence[Color], bottom: Sequence[Color]) -> "Grid":
        """Build a grid from rows in print order (row 2, row 1, row 0)."""
        rows = [list(top), list(middle), list(bottom)]
        for row in rows:
            if len(row) != GRID_SIZE:
                raise ValueError(f"Each row needs {GRID_SIZE} colors, got {len(row)}")
        return cls(tuple(rows[2] + rows[1] + rows[0]))

    @classmethod
    def filled(cls, color: Color) -> "Grid":
        return cls((color,) * NUM_TILES)

    def get(self, row: int, col: int) -> Color:
        """Color at (row, col). Raises ValueError off the board."""
        return self.cells[tile_index(row, col)]

    def press(self, row: int, col: int) -> "Grid":
        """Press the tile at (row, col) and return the resulting grid."""
        return Grid(apply_press(self.cells, row, col))

    def rows(self) -> List[List[Color]]:
        """Rows in print order, top row first."""
        return [
            [self.get(row, col) for col in range(GRID_SIZE)]
            for row in reversed(range(GRID_SIZE))
        ]

    def corner(self, corner: Corner) -> Color:
        return self.get(*CORNER_TILES[Corner(corner)])

    def corner_colors(self) -> CornerColors:
        """Colors of the 4 corner tiles in Corner order (NW, NE, SW, SE)."""
        return tuple(self.corner(corner) for corner in Corner)

    def matches_goals(self, goals: Iterable[Color]) -> bool:
        """True if every corner tile shows its goal color."""
        return self.corner_colors() == tuple(goals)

    def to_list(self) -> List[List[int]]:
        """JSON-friendly rows (top row first) of color values."""
        return [[int(color) for color in row] for row in self.rows()]

    def __str__(self) -> str:
        return "/".join("".join(color.code for color in row) for row in self.rows())
