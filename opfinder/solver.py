"""Exhaustive search for +/- operator placements.

For ``n`` operands there are ``n - 1`` operator slots and ``2**(n - 1)``
assignments. Assignment ``k`` is the binary form of ``k`` padded to the slot
count, most significant bit first, with ``"0"`` meaning subtract and ``"1"``
meaning add. Counters are visited in ascending order, so matches always come
out in the same order for the same puzzle.

Example:
    >>> from opfinder.puzzle import Puzzle
    >>> solve(Puzzle(operands=(1, 2, 3), target=0)).matches
    ['1 + 2 - 3 = 0']
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence

from opfinder.logging import get_logger
from opfinder.precheck import check_feasibility
from opfinder.puzzle import Puzzle
from opfinder.results import PuzzleResult
from opfinder.types import Assignment, AssignmentError, Operator

logger = get_logger(__name__)


def assignment_from_counter(counter: int, width: int) -> Assignment:
    """Decode one enumeration counter into an operator assignment.

    Args:
        counter: Value in ``[0, 2**width - 1]``.
        width: Number of operator slots.

    Returns:
        Tuple of ``width`` operators, most significant bit first.
        An empty tuple when ``width`` is zero.
    """
    if width < 0 or not 0 <= counter < 2**width:
        raise AssignmentError(f"Counter {counter} does not fit in {width} bit(s)")
    if width == 0:
        # format() would still emit one digit
        return ()
    return tuple(Operator.from_bit(digit) for digit in format(counter, f"0{width}b"))


def iter_assignments(width: int) -> Iterator[Assignment]:
    """Yield every assignment for ``width`` slots in ascending counter order."""
    if width < 1:
        raise ValueError(f"At least one operator slot is required, got {width}")
    for counter in range(2**width):
        yield assignment_from_counter(counter, width)


def _check_assignment(operands: Sequence[int], assignment: Assignment) -> None:
    if len(operands) - 1 != len(assignment):
        raise AssignmentError(
            f"There should be 1 more number than operators: "
            f"{len(operands)} number(s), {len(assignment)} operator(s)"
        )
    for op in assignment:
        if not isinstance(op, Operator):
            raise AssignmentError(f"Unexpected operator found: {op!r}")


def evaluate(operands: Sequence[int], assignment: Assignment) -> int:
    """Fold ``operands`` left to right using ``assignment``.

    Raises:
        AssignmentError: If the assignment length does not match the operands
            or holds something other than an ``Operator``.
    """
    _check_assignment(operands, assignment)
    result = operands[0]
    for op, value in zip(assignment, operands[1:]):
        if op is Operator.ADD:
            result += value
        else:
            result -= value
    return result


def format_expression(
    operands: Sequence[int], assignment: Assignment, target: int
) -> str:
    """Render ``operands`` and ``assignment`` as ``"a + b - c = target"``.

    The rendering follows the same order as `evaluate`, so a reported match
    always reads as true left-to-right arithmetic.
    """
    _check_assignment(operands, assignment)
    parts = [str(operands[0])]
    for op, value in zip(assignment, operands[1:]):
        parts.append(f" {op.symbol} {value}")
    parts.append(f" = {target}")
    return "".join(parts)


def iter_matches(operands: Sequence[int], target: int) -> Iterator[str]:
    """Yield every matching expression in enumeration order.

    No pre-check is applied; callers that want pruning should use `solve`.
    """
    for assignment in iter_assignments(len(operands) - 1):
        if evaluate(operands, assignment) == target:
            yield format_expression(operands, assignment, target)


def solve(
    puzzle: Puzzle, on_match: Optional[Callable[[str], None]] = None
) -> PuzzleResult:
    """Solve one puzzle.

    Runs the feasibility pre-check first. If it fails, the returned result
    carries the skip reason and no search is done. Otherwise every
    assignment is evaluated exactly once.

    Args:
        puzzle: Puzzle to solve.
        on_match: Optional callback invoked with each match as it is found.

    Returns:
        PuzzleResult with matches in ascending counter order.
    """
    reason = check_feasibility(puzzle.operands, puzzle.target)
    if reason is not None:
        return PuzzleResult(puzzle=puzzle, skip_reason=reason)

    operands = puzzle.operands
    target = puzzle.target
    result = PuzzleResult(puzzle=puzzle)
    logger.debug(
        "Searching %d assignment(s) for %d operand(s)",
        puzzle.search_size,
        len(operands),
    )

    for assignment in iter_assignments(puzzle.operator_count):
        result.examined += 1
        if evaluate(operands, assignment) != target:
            continue
        expression = format_expression(operands, assignment, target)
        result.matches.append(expression)
        if on_match is not None:
            on_match(expression)

    logger.debug(
        "Examined %d assignment(s), %d match(es)", result.examined, len(result.matches)
    )
    return result
