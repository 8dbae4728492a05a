"""
Utility functions for Mora Jai integration gates.

Provides:
- Puzzle file loading (one puzzle line per line, '#' comments)
- Logging setup
- Summary statistics over receipts
"""

import logging
from pathlib import Path
from typing import Any, Dict, List


def load_puzzle_lines(path: Path) -> List[str]:
    """
    Read puzzle lines from a file, skipping blanks and '#' comments.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {path}")

    with open(path, "r") as f:
        lines = [line.strip() for line in f]

    return [line for line in lines if line and not line.startswith("#")]


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger writing to both a file and the console.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Summary statistics from a list of gate receipts.

    Each receipt has "status" ("PASS"/"FAIL") and optionally "generator"
    and "search" statistics.
    """
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")

    stats: Dict[str, Any] = {
        "total_puzzles": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    attempts = [r["generator"]["attempts"] for r in receipts if "generator" in r]
    if attempts:
        stats["mean_attempts"] = sum(attempts) / len(attempts)
        stats["max_attempts"] = max(attempts)

    lengths = [len(r["solution"]) for r in receipts if r.get("solution") is not None]
    if lengths:
        stats["mean_solution_length"] = sum(lengths) / len(lengths)
        stats["max_solution_length"] = max(lengths)

    expanded = [r["search"]["expanded"] for r in receipts if "search" in r]
    if expanded:
        stats["max_expanded"] = max(expanded)

    return stats
