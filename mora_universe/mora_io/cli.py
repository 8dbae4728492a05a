"""
Command line front end.

Usage:
    mora-jai play [--puzzle LINE] [--show-solution]
    mora-jai batch [FILE]
    mora-jai generate [--count N] [--receipts-dir DIR]

Global flags: --seed, --log-level.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import numpy as np

from mora_core.puzzle import Puzzle
from mora_io.encoding import PuzzleDecodeError, decode_line, decode_puzzle, encode_puzzle
from mora_io.receipts import build_receipt, save_receipt
from mora_io.render import format_keys, format_puzzle, format_solution, parse_key
from mora_search.bfs import solve_puzzle, solve_with_receipt
from mora_search.generator import generate_puzzle, new_random_puzzle

logger = logging.getLogger("mora_jai")

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _solution_for_generated(puzzle: Puzzle) -> List:
    presses = solve_puzzle(puzzle)
    if presses is None:
        raise AssertionError("generated puzzle should always have a solution")
    return presses


# =============================================================================
# Subcommands
# =============================================================================


def run_play(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    if args.puzzle:
        try:
            puzzle = decode_puzzle(args.puzzle)
        except PuzzleDecodeError as e:
            logger.error(str(e))
            print(f"error: {e}", file=stdout)
            return 2
        presses = solve_puzzle(puzzle)
    else:
        puzzle = new_random_puzzle(np.random.default_rng(args.seed))
        presses = _solution_for_generated(puzzle)

    if args.show_solution:
        print(format_solution(presses) if presses is not None else "No solution", file=stdout)

    print(format_keys(), file=stdout)
    print("r resets, x quits", file=stdout)
    print(format_puzzle(puzzle), file=stdout)

    while not puzzle.is_solved():
        print("Input: ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            return 1
        token = line.strip().lower()

        if token == "x":
            return 1
        if token == "r":
            puzzle.reset()
        else:
            try:
                kind, target = parse_key(token)
            except ValueError as e:
                print(e, file=stdout)
                continue

            if kind == "tile":
                puzzle.press_tile(*target)
            else:
                puzzle.press_corner(target)

        print(format_puzzle(puzzle), file=stdout)

    print("Solved!", file=stdout)
    return 0


def run_batch(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """One puzzle per line; bad lines are reported and skipped."""
    source = open(args.file) if args.file else stdin
    failures = 0

    try:
        for lineno, line in enumerate(source, start=1):
            if not line.strip():
                continue

            try:
                goals, grid = decode_line(line)
            except PuzzleDecodeError as e:
                failures += 1
                logger.error(f"Line {lineno}: {e}")
                print(f"{line.strip()}: error: {e}", file=stdout)
                continue

            presses, receipt = solve_with_receipt(goals, grid)
            logger.info(f"Line {lineno}: expanded {receipt.expanded} grids")

            result = format_solution(presses) if presses is not None else "no solution"
            print(f"{encode_puzzle(goals, grid)}: {result}", file=stdout)
    finally:
        if source is not stdin:
            source.close()

    return 1 if failures else 0


def run_generate(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    for i in range(args.count):
        seed = args.seed + i if args.seed is not None else None
        puzzle, gen_receipt = generate_puzzle(seed)
        presses, solve_receipt = solve_with_receipt(puzzle.goals, puzzle.original)
        if presses is None:
            raise AssertionError("generated puzzle should always have a solution")

        print(f"{encode_puzzle(puzzle.goals, puzzle.original)}: {format_solution(presses)}", file=stdout)

        if args.receipts_dir:
            receipt = build_receipt(
                list(puzzle.goals), puzzle.original, presses, solve_receipt, gen_receipt
            )
            path = save_receipt(receipt, Path(args.receipts_dir))
            logger.info(f"Saved receipt {path}")

    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mora-jai", description="Mora Jai puzzle solver")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="Play interactively")
    play.add_argument("--puzzle", help="Puzzle line (random puzzle if omitted)")
    play.add_argument("--show-solution", action="store_true", help="Print a shortest solution first")
    play.set_defaults(handler=run_play)

    batch = subparsers.add_parser("batch", help="Solve one puzzle line per input line")
    batch.add_argument("file", nargs="?", help="Input file (stdin if omitted)")
    batch.set_defaults(handler=run_batch)

    generate = subparsers.add_parser("generate", help="Generate solvable puzzles")
    generate.add_argument("--count", type=int, default=1, help="Number of puzzles")
    generate.add_argument("--receipts-dir", help="Directory for JSON receipts")
    generate.set_defaults(handler=run_generate)

    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    return args.handler(args, stdin or sys.stdin, stdout or sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
