"""Puzzle model: an operand sequence and the target it should reach."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Puzzle:
    """One operand sequence and its target.

    A puzzle with fewer than two operands can still be built; the feasibility
    pre-check reports it and the search never runs for it.

    Attributes:
        operands: Integers between which operators are inserted, in order.
        target: Value the expression should evaluate to.
    """

    operands: Tuple[int, ...]
    target: int

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store an immutable tuple
        object.__setattr__(self, "operands", tuple(self.operands))
        for value in (*self.operands, self.target):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Puzzle values must be integers, got {value!r}")

    @classmethod
    def from_numbers(cls, numbers: Sequence[int]) -> "Puzzle":
        """Build a puzzle from a parsed line: the last number is the target.

        Args:
            numbers: All integers of one input line.

        Returns:
            Puzzle whose operands are every number but the last.

        Raises:
            ValueError: If ``numbers`` is empty, so there is no target.
        """
        if not numbers:
            raise ValueError("Cannot extract a target from an empty list of numbers")
        return cls(operands=tuple(numbers[:-1]), target=numbers[-1])

    @property
    def operator_count(self) -> int:
        """Number of operator slots (zero for a degenerate puzzle)."""
        return max(len(self.operands) - 1, 0)

    @property
    def search_size(self) -> int:
        """Number of operator assignments the exhaustive search examines."""
        if len(self.operands) < 2:
            return 0
        return 2**self.operator_count

    def describe(self) -> str:
        """Header line printed before the puzzle is processed."""
        numbers = ", ".join(str(n) for n in self.operands)
        return f"Processing list of numbers: {numbers} | Target: {self.target}"
