"""
Search over Mora Jai grids.

Modules:
- bfs.py: Shortest press sequence (breadth-first), receipts, replay checks
- generator.py: Rejection sampling of solvable random puzzles
"""

from .bfs import SolveReceipt, play_solution, solve, solve_puzzle, solve_with_receipt, verify_solution
from .generator import GeneratorReceipt, generate_puzzle, new_random_puzzle

__all__ = [
    "SolveReceipt",
    "solve",
    "solve_with_receipt",
    "solve_puzzle",
    "verify_solution",
    "play_solution",
    "GeneratorReceipt",
    "generate_puzzle",
    "new_random_puzzle",
]
