"""Base enums and aliases for operator search."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple


class AssignmentError(ValueError):
    """Raised when an operator assignment does not fit its operands.

    Correct enumeration never produces such an assignment, so this signals a
    defect in the search itself rather than bad user input.
    """


class Operator(IntEnum):
    """Binary operator placed between two consecutive operands.

    Member values double as the binary digit used during enumeration.
    """

    #: Subtract the next operand. Encoded as bit ``"0"``.
    SUB = 0
    #: Add the next operand. Encoded as bit ``"1"``.
    ADD = 1

    @property
    def symbol(self) -> str:
        """Printable symbol for this operator."""
        return "+" if self is Operator.ADD else "-"

    @classmethod
    def from_bit(cls, digit: str) -> "Operator":
        """Map a binary digit character to an operator.

        Args:
            digit: ``"0"`` or ``"1"``.

        Returns:
            ``Operator.SUB`` for ``"0"``, ``Operator.ADD`` for ``"1"``.

        Raises:
            AssignmentError: If ``digit`` is any other value.
        """
        if digit == "1":
            return cls.ADD
        if digit == "0":
            return cls.SUB
        raise AssignmentError(f"Unrecognised binary digit '{digit}'")


#: One operator per gap between consecutive operands.
Assignment = Tuple[Operator, ...]


class SkipReason(Enum):
    """Why a puzzle was skipped before the exhaustive search."""

    NOT_ENOUGH_NUMBERS = "not_enough_numbers"
    PARITY_MISMATCH = "parity_mismatch"
    OUT_OF_BOUNDS = "out_of_bounds"

    @property
    def message(self) -> str:
        """Warning line reported for a puzzle skipped for this reason."""
        return _SKIP_MESSAGES[self]


_SKIP_MESSAGES = {
    SkipReason.NOT_ENOUGH_NUMBERS: (
        "WARNING! Not enough numbers provided "
        "(at least 2 needed to create an expression)! Skipping..."
    ),
    SkipReason.PARITY_MISMATCH: (
        "WARNING! The parity of the given list of numbers does not match the "
        "target's parity, so the target can never be reached! Skipping..."
    ),
    SkipReason.OUT_OF_BOUNDS: (
        "WARNING! The target is outside of the reachable bounds of the given "
        "list of numbers! Skipping..."
    ),
}
