"""
Text interfaces for the Mora Jai puzzle.

Modules:
- encoding.py: 13-character puzzle line format (decode/encode)
- render.py: Plain-text board, solution formatting, keypad mapping
- receipts.py: JSON receipts for solved/generated puzzles
- cli.py: argparse front end (play, batch, generate)
"""

from .encoding import PuzzleDecodeError, decode_line, decode_puzzle, encode_puzzle

__all__ = [
    "PuzzleDecodeError",
    "decode_line",
    "decode_puzzle",
    "encode_puzzle",
]
