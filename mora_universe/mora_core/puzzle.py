"""
Puzzle state: live grid plus the 4 corner locks.

A corner is locked by pressing it while its tile shows the goal color.
A lock only survives while the tile keeps showing that color; pressing a
corner whose tile is wrong resets the whole puzzle to its original grid.
"""

from typing import List, Sequence

from mora_core.grid import Grid
from mora_core.types import CORNER_TILES, Color, Corner, CornerColors


class Puzzle:
    """
    A playable Mora Jai puzzle.

    Attributes:
        goals: Goal color per corner, in Corner order (NW, NE, SW, SE)
        corners: Locked color per corner, GRAY when unlocked
        original: Grid at construction time, used for resets (never changes)
        state: Live grid
    """

    def __init__(self, goals: Sequence[Color], grid: Grid):
        goals = tuple(Color(goal) for goal in goals)
        if len(goals) != len(Corner):
            raise ValueError(f"Expected {len(Corner)} goals, got {len(goals)}")

        self.goals: CornerColors = goals
        self.corners: List[Color] = [Color.GRAY] * len(Corner)
        self.original: Grid = grid
        self.state: Grid = grid

    def __repr__(self) -> str:
        goals = "".join(goal.code for goal in self.goals)
        return f"Puzzle(goals={goals!r}, state={str(self.state)!r}, corners={self.corners})"

    @property
    def current_state(self) -> Grid:
        return self.state

    def goal(self, corner: Corner) -> Color:
        return self.goals[Corner(corner)]

    def get_tile(self, row: int, col: int) -> Color:
        return self.state.get(row, col)

    def get_corner(self, corner: Corner) -> Color:
        """Locked color of a corner (GRAY if not locked)."""
        return self.corners[Corner(corner)]

    def press_tile(self, row: int, col: int) -> None:
        """Press a grid tile, then drop every lock its tile no longer shows."""
        self.state = self.state.press(row, col)

        for corner in Corner:
            if self.state.corner(corner) != self.corners[corner]:
                self.corners[corner] = Color.GRAY

    def press_corner(self, corner: Corner) -> None:
        """
        Try to lock a corner.

        Locks the corner if its tile shows the goal color. Otherwise the
        whole puzzle resets (grid back to original, all locks cleared).
        """
        corner = Corner(corner)
        row, col = CORNER_TILES[corner]

        if self.state.get(row, col) == self.goals[corner]:
            self.corners[corner] = self.goals[corner]
        else:
            self.reset()

    def reset(self) -> None:
        """Restore the original grid and clear all locks."""
        self.state = self.original
        self.corners = [Color.GRAY] * len(Corner)

    def is_solved(self) -> bool:
        return tuple(self.corners) == self.goals
