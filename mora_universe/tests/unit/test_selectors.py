"""
Unit tests for mora_laws/selectors.py

unique_argmax() must return a color only when it is the single most
frequent one; ties return None (never an arbitrary winner).
"""

from mora_core.grid import Grid
from mora_core.types import Color
from mora_laws.selectors import compute_histogram, unique_argmax


class TestHistogram:
    def test_counts_only_given_coords(self):
        grid = Grid.from_rows(
            [Color.RED, Color.RED, Color.BLUE],
            [Color.GRAY, Color.GRAY, Color.GRAY],
            [Color.GRAY, Color.GRAY, Color.GRAY],
        )
        hist = compute_histogram(grid.cells, [(2, 0), (2, 1), (2, 2)])
        assert hist == {Color.RED: 2, Color.BLUE: 1}

    def test_empty_coords(self):
        assert compute_histogram(Grid.filled(Color.GRAY).cells, []) == {}


class TestUniqueArgmax:
    def test_unique_maximum(self):
        assert unique_argmax({Color.RED: 2, Color.GREEN: 1, Color.BLUE: 1}) == Color.RED

    def test_single_color(self):
        assert unique_argmax({Color.PINK: 4}) == Color.PINK

    def test_two_way_tie(self):
        assert unique_argmax({Color.RED: 2, Color.GREEN: 2}) is None

    def test_all_ones_tie(self):
        hist = {Color.RED: 1, Color.GREEN: 1, Color.BLUE: 1, Color.GRAY: 1}
        assert unique_argmax(hist) is None

    def test_empty(self):
        assert unique_argmax({}) is None

    def test_independent_of_insertion_order(self):
        a = {Color.GRAY: 1, Color.RED: 3, Color.BLUE: 1}
        b = {Color.BLUE: 1, Color.GRAY: 1, Color.RED: 3}
        assert unique_argmax(a) == unique_argmax(b) == Color.RED
