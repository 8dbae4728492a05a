"""
Unit tests for mora_io/encoding.py

Line format: 4 goals (NW, NE, SW, SE) + 9 cells, top row first.
"""

import pytest

from mora_core.grid import Grid
from mora_core.types import Color
from mora_io.encoding import PuzzleDecodeError, decode_line, decode_puzzle, encode_puzzle

_ = Color.GRAY
W = Color.WHITE

FIXTURE_LINE = "wwww" "www" "w-w" "--w"


class TestDecode:
    def test_decode_fixture(self):
        goals, grid = decode_line(FIXTURE_LINE)
        assert goals == (W, W, W, W)
        assert grid == Grid.from_rows([W, W, W], [W, _, W], [_, _, W])

    def test_goal_order(self):
        goals, _grid = decode_line("rkyb" + "-" * 9)
        assert goals == (Color.RED, Color.BLACK, Color.YELLOW, Color.BLUE)

    def test_every_code(self):
        goals, grid = decode_line("wkro" "gyv" "pb-" "---")
        assert grid.rows()[0] == [Color.GREEN, Color.YELLOW, Color.VIOLET]
        assert grid.rows()[1] == [Color.PINK, Color.BLUE, _]

    def test_whitespace_ignored(self):
        assert decode_line("wwww www w-w --w\n") == decode_line(FIXTURE_LINE)

    def test_decode_puzzle(self):
        puzzle = decode_puzzle(FIXTURE_LINE)
        assert puzzle.goals == (W, W, W, W)
        assert puzzle.original == puzzle.current_state


class TestDecodeErrors:
    def test_too_short(self):
        with pytest.raises(PuzzleDecodeError, match="Expected 13"):
            decode_line("wwww")

    def test_too_long(self):
        with pytest.raises(PuzzleDecodeError, match="got 14"):
            decode_line(FIXTURE_LINE + "w")

    def test_unknown_code(self):
        with pytest.raises(PuzzleDecodeError, match="position 5"):
            decode_line("wwwww?w-w--w-")

    def test_uppercase_is_unknown(self):
        with pytest.raises(PuzzleDecodeError):
            decode_line("WWWW" "www" "w-w" "--w")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode_line("")


class TestEncode:
    def test_encode_fixture(self):
        grid = Grid.from_rows([W, W, W], [W, _, W], [_, _, W])
        assert encode_puzzle([W, W, W, W], grid) == FIXTURE_LINE

    def test_decode_encode_line(self):
        line = "rgbp" "kwo" "yv-" "bpr"
        assert encode_puzzle(*decode_line(line)) == line
