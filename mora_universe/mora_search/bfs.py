"""
Breadth-first solver for Mora Jai grids.

Nodes are grids, edges are the 9 presses (self-loops included, e.g.
pressing GRAY). All edges cost 1, so the first goal grid dequeued in level
order is reached by a shortest press sequence.

Ties between shortest sequences are broken by press enumeration order:
row 0 → 2, then col 0 → 2, at every level. The result is therefore the
lexicographically smallest shortest sequence in that order.

Goal predicate: the 4 corner tiles show the goal colors (positional, in
Corner order NW, NE, SW, SE). Corner locking is not modelled: pressing a
corner never changes the grid, so once the tiles match, the 4 corners can
be locked in any order. play_solution() replays a result through Puzzle
to check exactly that.

The state space is finite (at most NUM_COLORS^9 grids), so the search
always terminates.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Sequence, Set, Tuple

from mora_core.grid import Grid
from mora_core.puzzle import Puzzle
from mora_core.types import CORNER_TILES, GRID_SIZE, Color, Coord, Corner, tile_index
from mora_laws.tile_rules import Cells, apply_press

logger = logging.getLogger(__name__)

# Press enumeration order (fixed, determines tie-breaks)
PRESS_ORDER: Tuple[Coord, ...] = tuple(
    (row, col) for row in range(GRID_SIZE) for col in range(GRID_SIZE)
)

_CORNER_INDICES: Tuple[int, ...] = tuple(tile_index(*CORNER_TILES[corner]) for corner in Corner)


# =============================================================================
# Types
# =============================================================================


@dataclass
class SolveReceipt:
    """
    Search statistics for one solve() call.

    found: True if a goal grid was reached
    expanded: Distinct grids dequeued (goal checked, successors generated)
    duplicates: Dequeued grids skipped because they were already seen
    max_frontier: Largest frontier size observed
    solution_length: Number of presses in the solution (None if unsolvable)
    """
    found: bool
    expanded: int
    duplicates: int
    max_frontier: int
    solution_length: Optional[int]


# =============================================================================
# Main Entry Point
# =============================================================================


def _is_goal(cells: Cells, goals: Tuple[Color, ...]) -> bool:
    return tuple(cells[idx] for idx in _CORNER_INDICES) == goals


def solve_with_receipt(
    goals: Sequence[Color],
    grid: Grid
) -> Tuple[Optional[List[Coord]], SolveReceipt]:
    """
    Find a shortest press sequence that makes the corner tiles show `goals`.

    Args:
        goals: 4 goal colors in Corner order (NW, NE, SW, SE)
        grid: Starting grid (not modified)

    Returns:
        (presses, receipt) where presses is a list of (row, col), [] if the
        grid already matches, or None if no reachable grid matches.

    Algorithm:
        1. Frontier = [(grid, [])], seen = {}
        2. Pop front; skip if seen, else mark seen
        3. Goal grid → return its path
        4. Otherwise push the 9 successors in PRESS_ORDER
        5. Frontier empty → None
    """
    goals = tuple(Color(goal) for goal in goals)
    if len(goals) != len(Corner):
        raise ValueError(f"Expected {len(Corner)} goals, got {len(goals)}")

    frontier: Deque[Tuple[Cells, Tuple[Coord, ...]]] = deque([(grid.cells, ())])
    seen: Set[Cells] = set()

    expanded = 0
    duplicates = 0
    max_frontier = 1

    while frontier:
        cells, path = frontier.popleft()

        if cells in seen:
            duplicates += 1
            continue
        seen.add(cells)
        expanded += 1

        if _is_goal(cells, goals):
            receipt = SolveReceipt(
                found=True,
                expanded=expanded,
                duplicates=duplicates,
                max_frontier=max_frontier,
                solution_length=len(path),
            )
            logger.debug(
                f"Solved in {len(path)} presses "
                f"(expanded={expanded}, duplicates={duplicates}, max_frontier={max_frontier})"
            )
            return list(path), receipt

        for row, col in PRESS_ORDER:
            successor = apply_press(cells, row, col)
            # Already-seen grids would be skipped on dequeue anyway
            if successor not in seen:
                frontier.append((successor, path + ((row, col),)))

        max_frontier = max(max_frontier, len(frontier))

    receipt = SolveReceipt(
        found=False,
        expanded=expanded,
        duplicates=duplicates,
        max_frontier=max_frontier,
        solution_length=None,
    )
    logger.debug(f"No solution (expanded={expanded}, duplicates={duplicates})")
    return None, receipt


def solve(goals: Sequence[Color], grid: Grid) -> Optional[List[Coord]]:
    """Shortest press sequence reaching `goals`, or None if unreachable."""
    presses, _ = solve_with_receipt(goals, grid)
    return presses


def solve_puzzle(puzzle: Puzzle) -> Optional[List[Coord]]:
    """Solve a puzzle from its original grid (ignores the live state)."""
    return solve(puzzle.goals, puzzle.original)


# =============================================================================
# Verification
# =============================================================================


def replay(grid: Grid, presses: Sequence[Coord]) -> Grid:
    """Apply presses in order and return the final grid."""
    for row, col in presses:
        grid = grid.press(row, col)
    return grid


def verify_solution(goals: Sequence[Color], grid: Grid, presses: Sequence[Coord]) -> bool:
    """True if replaying `presses` on `grid` makes every corner tile match."""
    return replay(grid, presses).matches_goals(Color(goal) for goal in goals)


def play_solution(puzzle: Puzzle, presses: Sequence[Coord]) -> bool:
    """
    Drive a Puzzle with a solver result: press the tiles, then lock the
    corners NW, NE, SW, SE. Returns puzzle.is_solved().
    """
    for row, col in presses:
        puzzle.press_tile(row, col)
    for corner in Corner:
        puzzle.press_corner(corner)
    return puzzle.is_solved()
