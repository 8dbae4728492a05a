"""
Deterministic fingerprints for grids and puzzles.

Python's built-in hash() is salted per process for str and is not meant
to be stored, so receipts and the determinism gate use hash64 instead:
SHA-256 over canonical JSON, truncated to 64 bits.
"""

import hashlib
import json
from typing import Any, NewType, Sequence

from mora_core.grid import Grid
from mora_core.types import Color

Hash64 = NewType("Hash64", int)


def hash64(obj: Any) -> Hash64:
    """
    Stable 64-bit hash of a JSON-serializable object.

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha256(canonical_json.encode("utf-8")).digest()
    return Hash64(int.from_bytes(digest[:8], byteorder="big", signed=False))


def grid_hash(grid: Grid) -> Hash64:
    """Fingerprint of a grid (top row first, color values)."""
    return hash64(grid.to_list())


def puzzle_hash(goals: Sequence[Color], grid: Grid) -> Hash64:
    """Fingerprint of a goals + grid pair."""
    return hash64({"goals": [int(goal) for goal in goals], "grid": grid.to_list()})
