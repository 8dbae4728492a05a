#!/usr/bin/env python3
"""
Generator gate: generated puzzles are solvable, playable and deterministic.

For each seed in [seed, seed + limit):
- generate_puzzle(seed) twice → identical puzzle hash (determinism)
- no GRAY goal
- solve() finds a solution and verify_solution() confirms it
- play_solution() solves the interactive Puzzle (tiles, then corner locks)

Optionally also solves every line of --puzzles FILE and checks the result
with verify_solution().

Usage:
    python run_gate_generator.py --limit 20 --seed 0
    python run_gate_generator.py --limit 5 --puzzles puzzles.txt
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mora_core.puzzle import Puzzle
from mora_core.types import Color
from mora_io.encoding import PuzzleDecodeError, decode_line
from mora_io.receipts import build_receipt, save_receipt
from mora_search.bfs import play_solution, solve_with_receipt, verify_solution
from mora_search.generator import generate_puzzle

from utils import compute_summary_stats, load_puzzle_lines, setup_logger

import logging
from typing import Any, Dict


def check_seed(seed: int, logger: logging.Logger) -> Dict[str, Any]:
    """Generate twice from one seed and validate the result."""
    puzzle1, gen1 = generate_puzzle(seed)
    puzzle2, gen2 = generate_puzzle(seed)

    presses, search = solve_with_receipt(puzzle1.goals, puzzle1.original)
    receipt = build_receipt(list(puzzle1.goals), puzzle1.original, presses, search, gen1)

    errors = []
    if gen1.puzzle_hash != gen2.puzzle_hash:
        errors.append("non-deterministic generation")
    if Color.GRAY in puzzle1.goals:
        errors.append("gray goal")
    if presses is None:
        errors.append("generated puzzle has no solution")
    else:
        if not verify_solution(puzzle1.goals, puzzle1.original, presses):
            errors.append("solution does not reach goals")
        if not play_solution(Puzzle(puzzle1.goals, puzzle1.original), presses):
            errors.append("solution does not solve interactive puzzle")

    receipt["seed"] = seed
    receipt["status"] = "FAIL" if errors else "PASS"
    if errors:
        receipt["error"] = "; ".join(errors)
        logger.error(f"Seed {seed}: {receipt['error']}")
    else:
        logger.info(
            f"Seed {seed}: {receipt['puzzle']} solved in {len(presses)} presses "
            f"after {gen1.attempts} attempts"
        )

    return receipt


def check_line(line: str, logger: logging.Logger) -> Dict[str, Any]:
    """Solve one puzzle line and verify any solution found."""
    try:
        goals, grid = decode_line(line)
    except PuzzleDecodeError as e:
        logger.error(f"{line!r}: {e}")
        return {
            "puzzle": line,
            "timestamp": datetime.now().isoformat(),
            "status": "FAIL",
            "error": str(e),
        }

    presses, search = solve_with_receipt(goals, grid)
    receipt = build_receipt(list(goals), grid, presses, search)

    if presses is not None and not verify_solution(goals, grid, presses):
        receipt["status"] = "FAIL"
        receipt["error"] = "solution does not reach goals"
        logger.error(f"{line}: {receipt['error']}")
    else:
        receipt["status"] = "PASS"
        logger.info(f"{line}: {'no solution' if presses is None else presses}")

    return receipt


def main():
    parser = argparse.ArgumentParser(description="Generator Gate")
    parser.add_argument("--limit", type=int, default=20, help="Number of seeds to check")
    parser.add_argument("--seed", type=int, default=0, help="First seed")
    parser.add_argument("--puzzles", type=str, default=None, help="Optional puzzle line file")
    args = parser.parse_args()

    log_dir = Path(__file__).parent / "logs"
    logger = setup_logger("gate_generator", log_dir / "gate_generator.log")

    receipts_dir = Path(__file__).parent / "receipts" / "gate_generator"
    receipts_dir.mkdir(parents=True, exist_ok=True)

    logger.info("=" * 80)
    logger.info("Generator Gate")
    logger.info(f"Seeds: {args.seed}..{args.seed + args.limit - 1}")
    logger.info("=" * 80)

    receipts = []
    for seed in range(args.seed, args.seed + args.limit):
        receipt = check_seed(seed, logger)
        save_receipt(receipt, receipts_dir)
        receipts.append(receipt)

    if args.puzzles:
        for line in load_puzzle_lines(Path(args.puzzles)):
            receipts.append(check_line(line, logger))

    stats = compute_summary_stats(receipts)
    logger.info("=" * 80)
    logger.info(f"Summary: {json.dumps(stats, indent=2)}")

    with open(receipts_dir / "summary.json", "w") as f:
        json.dump(stats, f, indent=2)

    sys.exit(0 if stats["failed"] == 0 else 1)


if __name__ == "__main__":
    main()
