"""
Unit tests for mora_core/puzzle.py

Focus: the corner lock state machine.
- A correct corner press locks; a wrong one resets the whole puzzle
- A tile press drops every lock whose tile no longer shows the locked color
- original is never modified
- Invariant: each lock is GRAY or its goal
"""

import numpy as np
import pytest

from mora_core.grid import Grid
from mora_core.puzzle import Puzzle
from mora_core.types import Color, Corner

_ = Color.GRAY
W = Color.WHITE

GOALS = [W, W, W, W]


def make_grid() -> Grid:
    """Needs presses (0,2), (0,1) to get WHITE on all four corners."""
    return Grid.from_rows(
        [W, W, W],
        [W, _, W],
        [_, _, W],
    )


class TestConstruction:
    def test_initial_state(self):
        grid = make_grid()
        puzzle = Puzzle(GOALS, grid)

        assert puzzle.corners == [_, _, _, _]
        assert puzzle.original == grid
        assert puzzle.current_state == grid
        assert not puzzle.is_solved()

    def test_accessors(self):
        puzzle = Puzzle([W, Color.RED, Color.BLUE, Color.PINK], make_grid())
        assert puzzle.goal(Corner.NE) == Color.RED
        assert puzzle.goal(Corner.SE) == Color.PINK
        assert puzzle.get_tile(0, 0) == _
        assert puzzle.get_corner(Corner.NW) == _

    def test_wrong_goal_count(self):
        with pytest.raises(ValueError, match="Expected 4 goals"):
            Puzzle([W, W, W], make_grid())


class TestCornerPress:
    def test_correct_corner_locks(self):
        puzzle = Puzzle(GOALS, make_grid())
        puzzle.press_corner(Corner.NW)

        assert puzzle.get_corner(Corner.NW) == W
        assert puzzle.get_corner(Corner.NE) == _

    def test_wrong_corner_resets_everything(self):
        puzzle = Puzzle(GOALS, make_grid())
        puzzle.press_corner(Corner.NW)
        puzzle.press_tile(0, 2)
        assert puzzle.current_state != puzzle.original

        # SW tile is GRAY, goal is WHITE
        puzzle.press_corner(Corner.SW)

        assert puzzle.current_state == make_grid()
        assert puzzle.corners == [_, _, _, _]

    def test_invalid_corner(self):
        puzzle = Puzzle(GOALS, make_grid())
        with pytest.raises(ValueError):
            puzzle.press_corner(7)


class TestTilePress:
    def test_lock_dropped_when_tile_changes(self):
        puzzle = Puzzle(GOALS, make_grid())
        puzzle.press_corner(Corner.NW)

        # WHITE at (1,0) toggles (2,0) to GRAY
        puzzle.press_tile(1, 0)

        assert puzzle.get_tile(2, 0) == _
        assert puzzle.get_corner(Corner.NW) == _

    def test_lock_kept_when_tile_unchanged(self):
        puzzle = Puzzle(GOALS, make_grid())
        puzzle.press_corner(Corner.NE)

        # WHITE at (0,2) toggles (0,2), (1,2), (0,1); (2,2) untouched
        puzzle.press_tile(0, 2)

        assert puzzle.get_corner(Corner.NE) == W

    def test_press_tile_out_of_range(self):
        puzzle = Puzzle(GOALS, make_grid())
        with pytest.raises(ValueError, match="invalid row or column"):
            puzzle.press_tile(0, 3)

    def test_original_never_changes(self):
        grid = make_grid()
        puzzle = Puzzle(GOALS, grid)
        for row, col in [(0, 2), (0, 1), (1, 0), (2, 1)]:
            puzzle.press_tile(row, col)
        assert puzzle.original == grid
        assert puzzle.original == make_grid()


class TestSolving:
    def test_full_solution(self):
        puzzle = Puzzle(GOALS, make_grid())
        puzzle.press_tile(0, 2)
        puzzle.press_tile(0, 1)

        for corner in [Corner.SE, Corner.NW, Corner.SW, Corner.NE]:
            puzzle.press_corner(corner)
            assert not puzzle.is_solved() or corner == Corner.NE

        assert puzzle.is_solved()

    def test_reset(self):
        puzzle = Puzzle(GOALS, make_grid())
        puzzle.press_tile(0, 2)
        puzzle.press_corner(Corner.NW)
        puzzle.reset()

        assert puzzle.current_state == puzzle.original
        assert puzzle.corners == [_, _, _, _]

    def test_lock_invariant_under_random_play(self):
        """Each lock is always GRAY or the goal, whatever the input."""
        rng = np.random.default_rng(7)
        puzzle = Puzzle(GOALS, make_grid())

        for _step in range(300):
            if rng.random() < 0.3:
                puzzle.press_corner(Corner(int(rng.integers(0, 4))))
            else:
                puzzle.press_tile(int(rng.integers(0, 3)), int(rng.integers(0, 3)))

            for corner in Corner:
                assert puzzle.get_corner(corner) in (_, puzzle.goal(corner))
                if puzzle.get_corner(corner) != _:
                    assert puzzle.current_state.corner(corner) == puzzle.goal(corner)

        assert puzzle.original == make_grid()
