"""
Histogram selectors over tile neighborhoods.

Used by the Orange rule: the pressed tile adopts the color of its
orthogonal neighbors only when that color is the single most frequent one.
Ties select nothing (no arbitrary winner).
"""

from typing import Dict, Iterable, Optional, Sequence

from mora_core.types import Color, Coord, tile_index


def compute_histogram(cells: Sequence[Color], coords: Iterable[Coord]) -> Dict[Color, int]:
    """
    Count colors at the given coordinates.

    Args:
        cells: 9 cells in row-major order (bottom row first)
        coords: In-bounds tile coordinates to sample

    Returns:
        Dictionary mapping color -> count (empty if coords is empty)
    """
    histogram: Dict[Color, int] = {}

    for row, col in coords:
        color = cells[tile_index(row, col)]
        histogram[color] = histogram.get(color, 0) + 1

    return histogram


def unique_argmax(histogram: Dict[Color, int]) -> Optional[Color]:
    """
    Color with the strictly highest count.

    Returns:
        The color if exactly one color attains the maximum count,
        None if the histogram is empty or two or more colors tie.

    Examples:
        >>> unique_argmax({Color.RED: 2, Color.GREEN: 1})
        <Color.RED: 3>
        >>> unique_argmax({Color.RED: 2, Color.GREEN: 2}) is None
        True
    """
    if not histogram:
        return None

    max_count = max(histogram.values())
    max_colors = sorted(color for color, count in histogram.items() if count == max_count)

    if len(max_colors) != 1:
        return None

    return max_colors[0]
