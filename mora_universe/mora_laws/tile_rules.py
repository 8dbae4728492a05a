"""
Tile press rules.

Pressing a tile rewrites the board according to the color of the pressed
tile. Every rule is a pure function

    rule(cells, row, col) -> new cells

over the 9 cells in row-major order (bottom row first). Rules read only
the pre-press snapshot `cells` and write into a fresh list, so no rule can
observe its own partial output.

Rules:
- GRAY:   no change
- WHITE:  toggle self + orthogonal neighbors (WHITE <-> GRAY, others untouched)
- BLACK:  rotate the row one step right, wrapping
- RED:    globally BLACK -> RED and WHITE -> BLACK
- ORANGE: adopt the unique majority color of orthogonal neighbors
- GREEN:  swap with the point-symmetric tile
- YELLOW: swap with the tile above (no-op on the top row)
- VIOLET: swap with the tile below (no-op on the bottom row)
- PINK:   rotate the ring of surrounding tiles one step clockwise
- BLUE:   behave like the center tile's color (no-op if the center is BLUE)
"""

from typing import Callable, Dict, List, Sequence, Tuple

from mora_core.types import GRID_SIZE, NUM_TILES, Color, Coord, check_coord, tile_index, valid_coord
from mora_laws.selectors import compute_histogram, unique_argmax

Cells = Tuple[Color, ...]
TileRule = Callable[[Sequence[Color], int, int], List[Color]]

CENTER: Coord = (1, 1)

# Orthogonal neighbor offsets (dr, dc)
E4_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Ring order for PINK: clockwise on the board (row 0 is the bottom row),
# starting directly below. Off-board offsets are skipped.
RING_OFFSETS: Tuple[Coord, ...] = (
    (-1, 0),   # below
    (-1, -1),  # below left
    (0, -1),   # left
    (1, -1),   # above left
    (1, 0),    # above
    (1, 1),    # above right
    (0, 1),    # right
    (-1, 1),   # below right
)


# =============================================================================
# Neighborhoods
# =============================================================================


def orthogonal_neighbors(row: int, col: int) -> List[Coord]:
    """In-bounds 4-connected neighbors of (row, col)."""
    check_coord(row, col)
    neighbors = []
    for dr, dc in E4_OFFSETS:
        r, c = row + dr, col + dc
        if valid_coord(r, c):
            neighbors.append((r, c))
    return neighbors


def ring_neighbors(row: int, col: int) -> List[Coord]:
    """
    In-bounds 8-connected neighbors of (row, col) in ring order.

    The center has a ring of 8, edge tiles 5, corner tiles 3.
    """
    check_coord(row, col)
    ring = []
    for dr, dc in RING_OFFSETS:
        r, c = row + dr, col + dc
        if valid_coord(r, c):
            ring.append((r, c))
    return ring


def _swap(cells: Sequence[Color], a: Coord, b: Coord) -> List[Color]:
    new = list(cells)
    ia, ib = tile_index(*a), tile_index(*b)
    new[ia], new[ib] = cells[ib], cells[ia]
    return new


# =============================================================================
# Rules
# =============================================================================


def press_gray(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    return list(cells)


def press_white(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    new = list(cells)
    for r, c in [(row, col)] + orthogonal_neighbors(row, col):
        idx = tile_index(r, c)
        if cells[idx] == Color.WHITE:
            new[idx] = Color.GRAY
        elif cells[idx] == Color.GRAY:
            new[idx] = Color.WHITE
    return new


def press_black(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    new = list(cells)
    for c in range(GRID_SIZE):
        right = (c + 1) % GRID_SIZE
        new[tile_index(row, right)] = cells[tile_index(row, c)]
    return new


def press_red(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    new = list(cells)
    for idx, color in enumerate(cells):
        if color == Color.BLACK:
            new[idx] = Color.RED
        elif color == Color.WHITE:
            new[idx] = Color.BLACK
    return new


def press_orange(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    new = list(cells)
    histogram = compute_histogram(cells, orthogonal_neighbors(row, col))
    majority = unique_argmax(histogram)
    # Ties leave the tile unchanged
    if majority is not None:
        new[tile_index(row, col)] = majority
    return new


def press_green(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    return _swap(cells, (row, col), (GRID_SIZE - 1 - row, GRID_SIZE - 1 - col))


def press_yellow(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    if row == GRID_SIZE - 1:
        return list(cells)
    return _swap(cells, (row, col), (row + 1, col))


def press_violet(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    if row == 0:
        return list(cells)
    return _swap(cells, (row, col), (row - 1, col))


def press_pink(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    new = list(cells)
    ring = [tile_index(r, c) for r, c in ring_neighbors(row, col)]
    # Each ring slot takes the previous slot's color; ring[-1] wraps to ring[0]
    for i, idx in enumerate(ring):
        new[idx] = cells[ring[i - 1]]
    return new


def press_blue(cells: Sequence[Color], row: int, col: int) -> List[Color]:
    center = cells[tile_index(*CENTER)]
    if center == Color.BLUE:
        return list(cells)
    # center is not BLUE here, so this resolves in exactly one step
    return TILE_RULES[center](cells, row, col)


TILE_RULES: Dict[Color, TileRule] = {
    Color.GRAY: press_gray,
    Color.WHITE: press_white,
    Color.BLACK: press_black,
    Color.RED: press_red,
    Color.ORANGE: press_orange,
    Color.GREEN: press_green,
    Color.YELLOW: press_yellow,
    Color.VIOLET: press_violet,
    Color.PINK: press_pink,
    Color.BLUE: press_blue,
}


def _check_rule_table() -> None:
    missing = [color.label for color in Color if color not in TILE_RULES]
    if missing:
        raise RuntimeError(f"No tile rule for colors: {missing}")


_check_rule_table()


# =============================================================================
# Main Entry Point
# =============================================================================


def apply_press(cells: Sequence[Color], row: int, col: int) -> Cells:
    """
    Apply one press to a 9-cell board.

    Args:
        cells: 9 cells in row-major order (bottom row first)
        row, col: Pressed tile, each in {0, 1, 2}

    Returns:
        New 9-cell tuple. `cells` is not modified.

    Raises:
        ValueError: If (row, col) is off the board or cells is not 9 long
    """
    check_coord(row, col)
    if len(cells) != NUM_TILES:
        raise ValueError(f"Expected {NUM_TILES} cells, got {len(cells)}")

    color = cells[tile_index(row, col)]
    return tuple(TILE_RULES[color](cells, row, col))
