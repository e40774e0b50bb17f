"""opfinder: place + and - operators between integers to reach a target.

Primary API:
    Puzzle - Operand sequence plus target
    solve() - Pre-check and exhaustively search one puzzle
    check_feasibility() - Cheap pruning checks only
    load_puzzles() - Read a text or YAML batch

Example:
    from opfinder import Puzzle, solve

    result = solve(Puzzle(operands=(1, 2, 3), target=0))
    result.matches  # ['1 + 2 - 3 = 0']
"""

from __future__ import annotations

from opfinder import cli, logging
from opfinder.config import SOLVER_CONFIG, SolverConfig
from opfinder.io import load_puzzles, parse_line, parse_lines
from opfinder.precheck import check_feasibility, reachable_bounds
from opfinder.puzzle import Puzzle
from opfinder.results import BatchResults, PuzzleResult
from opfinder.solver import evaluate, format_expression, iter_matches, solve
from opfinder.types import AssignmentError, Operator, SkipReason

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Puzzle",
    "Operator",
    "SkipReason",
    "AssignmentError",
    # Search
    "solve",
    "iter_matches",
    "evaluate",
    "format_expression",
    "check_feasibility",
    "reachable_bounds",
    # Results
    "PuzzleResult",
    "BatchResults",
    # Input
    "load_puzzles",
    "parse_line",
    "parse_lines",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Utilities
    "cli",
    "logging",
]
