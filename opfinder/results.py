"""Serializable result containers for solved puzzles.

`PuzzleResult` captures the outcome of one puzzle and `BatchResults` the
outcome of a whole input file. Both expose `to_dict()` returning JSON-safe
primitives, which the CLI writes when a results file is requested.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from opfinder.logging import get_logger
from opfinder.puzzle import Puzzle
from opfinder.types import SkipReason

logger = get_logger(__name__)


@dataclass
class PuzzleResult:
    """Outcome of processing one puzzle.

    Attributes:
        puzzle: The puzzle that was processed.
        skip_reason: Pre-check failure, or None when the search ran.
        matches: Rendered matching expressions in enumeration order.
        examined: Number of operator assignments evaluated.
    """

    puzzle: Puzzle
    skip_reason: Optional[SkipReason] = None
    matches: List[str] = field(default_factory=list)
    examined: int = 0

    def __post_init__(self) -> None:
        if self.skip_reason is not None and (self.matches or self.examined):
            logger.error(
                "Skipped puzzle cannot carry search output: matches=%d examined=%d",
                len(self.matches),
                self.examined,
            )
            raise ValueError("A skipped puzzle must have no matches and examined=0")

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None

    @property
    def solved(self) -> bool:
        return bool(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "operands": list(self.puzzle.operands),
            "target": self.puzzle.target,
            "skipped": self.skip_reason.value if self.skip_reason else None,
            "examined": self.examined,
            "matches": list(self.matches),
        }


@dataclass
class BatchResults:
    """Results for every puzzle of one input, in input order."""

    source: Optional[str] = None
    results: List[PuzzleResult] = field(default_factory=list)

    def add(self, result: PuzzleResult) -> None:
        self.results.append(result)

    def summary(self) -> Dict[str, int]:
        """Return counts of solved, skipped and unsolved puzzles."""
        skipped = sum(1 for r in self.results if r.skipped)
        solved = sum(1 for r in self.results if r.solved)
        return {
            "puzzles": len(self.results),
            "solved": solved,
            "skipped": skipped,
            "unsolved": len(self.results) - solved - skipped,
            "matches": sum(len(r.matches) for r in self.results),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary.

        Returns:
            Dictionary with ``source``, ``summary`` and ``puzzles`` keys.
        """
        return {
            "source": self.source,
            "summary": self.summary(),
            "puzzles": [r.to_dict() for r in self.results],
        }
