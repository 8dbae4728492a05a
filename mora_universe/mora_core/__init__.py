"""
mora_core: Core primitives for the Mora Jai puzzle.

Provides:
- types: Color, Corner, coordinates and the fixed corner → tile binding
- grid: Immutable 3×3 Grid with press()
- puzzle: Puzzle with corner locks and resets
- order_hash: Deterministic 64-bit fingerprints (SHA-256)
"""

__all__ = [
    "grid",
    "order_hash",
    "puzzle",
    "types",
]
