"""
Random solvable puzzles by rejection sampling.

Each attempt draws 4 goals uniformly from the non-GRAY colors (a GRAY goal
is already satisfied by an unlocked corner) and 9 grid colors uniformly
from all colors, then runs the BFS solver. Unsolvable draws are discarded.

There is no retry limit: a solvable draw has a small but non-zero
probability, so the expected number of attempts is small.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Set, Tuple

import numpy as np

from mora_core.grid import Grid
from mora_core.order_hash import Hash64, puzzle_hash
from mora_core.puzzle import Puzzle
from mora_core.types import NUM_COLORS, NUM_TILES, Color, Corner
from mora_search.bfs import solve

logger = logging.getLogger(__name__)


@dataclass
class GeneratorReceipt:
    """
    Sampling record for one generated puzzle.

    attempts: Draws made, including the accepted one
    rejected: Unsolvable draws discarded
    seed: Seed of the RNG (None if unseeded or caller-supplied)
    solution_length: Length of the shortest solution of the accepted draw
    puzzle_hash: hash64 of the accepted goals + grid
    """
    attempts: int
    rejected: int
    seed: Optional[int]
    solution_length: int
    puzzle_hash: Hash64


def draw_goals(rng: np.random.Generator) -> Tuple[Color, ...]:
    """4 independent goals, uniform over the non-GRAY colors."""
    values = rng.integers(int(Color.GRAY) + 1, NUM_COLORS, size=len(Corner))
    return tuple(Color(int(v)) for v in values)


def draw_grid(rng: np.random.Generator) -> Grid:
    """9 independent cells, uniform over all colors."""
    values = rng.integers(0, NUM_COLORS, size=NUM_TILES)
    return Grid(tuple(Color(int(v)) for v in values))


def reachable_palette(grid: Grid) -> Set[Color]:
    """
    Superset of the colors any grid reachable from `grid` can show.

    Only two rules introduce colors: WHITE toggles WHITE <-> GRAY and RED
    turns WHITE into BLACK (and BLACK into RED, which RED already covers).
    Every other rule moves or copies colors already on the board.
    """
    palette = set(grid.cells)
    if Color.WHITE in palette:
        palette.add(Color.GRAY)
        if Color.RED in palette:
            palette.add(Color.BLACK)
    return palette


# Colors whose tile counts only RED/WHITE presses change
_RECOLORABLE = {Color.GRAY, Color.WHITE, Color.BLACK, Color.RED}


def counts_feasible(goals: Sequence[Color], grid: Grid) -> bool:
    """
    False if some goal color can never cover the corners that need it.

    Without an ORANGE tile nothing copies colors, so every color outside
    GRAY/WHITE/BLACK/RED keeps its tile count forever.
    """
    if Color.ORANGE in grid.cells:
        return True
    for color in set(goals) - _RECOLORABLE:
        if list(goals).count(color) > grid.cells.count(color):
            return False
    return True


def _sample(rng: np.random.Generator, seed: Optional[int]) -> Tuple[Puzzle, GeneratorReceipt]:
    attempts = 0

    while True:
        attempts += 1
        goals = draw_goals(rng)
        grid = draw_grid(rng)

        # Draws these checks reject would fail the BFS too
        if not set(goals) <= reachable_palette(grid) or not counts_feasible(goals, grid):
            logger.debug(f"Attempt {attempts}: goal colors unreachable on {grid}, retrying")
            continue

        presses = solve(goals, grid)
        if presses is None:
            logger.debug(f"Attempt {attempts}: unsolvable draw {grid}, retrying")
            continue

        receipt = GeneratorReceipt(
            attempts=attempts,
            rejected=attempts - 1,
            seed=seed,
            solution_length=len(presses),
            puzzle_hash=puzzle_hash(goals, grid),
        )
        logger.info(
            f"Generated puzzle after {attempts} attempts "
            f"(solution length {len(presses)})"
        )
        return Puzzle(goals, grid), receipt


def generate_puzzle(seed: Optional[int] = None) -> Tuple[Puzzle, GeneratorReceipt]:
    """
    Generate a solvable puzzle from a fresh RNG.

    The same seed always yields the same puzzle and receipt.
    """
    return _sample(np.random.default_rng(seed), seed)


def new_random_puzzle(rng: Optional[np.random.Generator] = None) -> Puzzle:
    """
    Generate a solvable puzzle.

    Args:
        rng: RNG to draw from (a fresh unseeded one if None). Passing the
            same Generator to successive calls yields a reproducible stream.
    """
    if rng is None:
        rng = np.random.default_rng()
    puzzle, _ = _sample(rng, None)
    return puzzle
