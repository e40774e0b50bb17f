"""Cheap feasibility checks run before the exhaustive search.

Each check is at most linear in the number of operands, while the search is
exponential. A puzzle that fails any check cannot reach its target, so it is
skipped. Passing every check does not guarantee a solution exists.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from opfinder.logging import get_logger
from opfinder.types import SkipReason

logger = get_logger(__name__)


def has_enough_operands(operands: Sequence[int]) -> bool:
    """Return True if at least one operator can be placed."""
    return len(operands) >= 2


def parity_matches(operands: Sequence[int], target: int) -> bool:
    """Return True if the operand sum and the target share parity.

    Flipping the sign of an operand changes the total by twice its value, so
    every reachable result has the parity of the plain sum.
    """
    return sum(operands) % 2 == target % 2


def reachable_bounds(operands: Sequence[int]) -> Tuple[int, int]:
    """Return the lowest and highest results reachable from ``operands``.

    The first operand is never negated. For non-negative operands the bounds
    are the all-minus and all-plus folds.

    Args:
        operands: At least one integer.

    Returns:
        ``(lower, upper)`` inclusive bounds.
    """
    if not operands:
        raise ValueError("reachable_bounds requires at least one operand")
    first = operands[0]
    spread = sum(abs(value) for value in operands[1:])
    return first - spread, first + spread


def check_feasibility(operands: Sequence[int], target: int) -> Optional[SkipReason]:
    """Run the pre-checks in order and return the first failure.

    Args:
        operands: Operand sequence of the puzzle.
        target: Value the expression should evaluate to.

    Returns:
        The reason the puzzle should be skipped, or None if the search should run.
    """
    if not has_enough_operands(operands):
        logger.debug("Pre-check failed: %d operand(s)", len(operands))
        return SkipReason.NOT_ENOUGH_NUMBERS

    if not parity_matches(operands, target):
        logger.debug(
            "Pre-check failed: sum %d and target %d differ in parity",
            sum(operands),
            target,
        )
        return SkipReason.PARITY_MISMATCH

    lower, upper = reachable_bounds(operands)
    if not lower <= target <= upper:
        logger.debug(
            "Pre-check failed: target %d outside [%d, %d]", target, lower, upper
        )
        return SkipReason.OUT_OF_BOUNDS

    return None
