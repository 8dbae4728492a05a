"""
JSON receipts for solved and generated puzzles.
"""

import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from mora_core.grid import Grid
from mora_core.order_hash import puzzle_hash
from mora_core.types import Color, Coord
from mora_io.encoding import encode_puzzle
from mora_search.bfs import SolveReceipt
from mora_search.generator import GeneratorReceipt


def build_receipt(
    goals: List[Color],
    grid: Grid,
    presses: Optional[List[Coord]],
    solve_receipt: Optional[SolveReceipt] = None,
    generator_receipt: Optional[GeneratorReceipt] = None,
) -> Dict[str, Any]:
    """
    Receipt dictionary for one puzzle.

    Keys: puzzle (line format), hash, timestamp, status, solution, and the
    optional "search" / "generator" statistics.
    """
    receipt: Dict[str, Any] = {
        "puzzle": encode_puzzle(goals, grid),
        "hash": puzzle_hash(goals, grid),
        "timestamp": datetime.now().isoformat(),
        "status": "SOLVED" if presses is not None else "UNSOLVABLE",
        "solution": [list(p) for p in presses] if presses is not None else None,
    }

    if solve_receipt is not None:
        receipt["search"] = asdict(solve_receipt)

    if generator_receipt is not None:
        receipt["generator"] = asdict(generator_receipt)

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """Write receipt to <output_dir>/<hash>.json and return the path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['hash']:016x}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file
