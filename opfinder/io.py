"""Input loaders: plain-text and YAML puzzle batches.

Text input holds one puzzle per line. Integers are separated by any mix of
the configured separator characters and the last integer is the target.
Blank lines are ignored.

YAML input is a mapping with a ``puzzles`` list. Each entry is either a
string in the text-line format or a mapping with ``operands`` and ``target``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import yaml

from opfinder.config import SOLVER_CONFIG, SolverConfig
from opfinder.logging import get_logger
from opfinder.puzzle import Puzzle

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

_INTEGER = re.compile(r"-?[0-9]+")


def parse_line(line: str, config: Optional[SolverConfig] = None) -> List[int]:
    """Split one input line into integers.

    Args:
        line: Raw text line.
        config: Separator configuration; defaults to ``SOLVER_CONFIG``.

    Returns:
        Integers in line order. Empty when the line holds only separators.

    Raises:
        ValueError: If a token is not an integer.
    """
    cfg = config or SOLVER_CONFIG
    tokens = [t for t in re.split(cfg.separator_pattern, line.strip()) if t.strip()]
    numbers = []
    for token in tokens:
        # Digits with an optional leading minus; no "+5" or "1_0"
        if not _INTEGER.fullmatch(token):
            raise ValueError(f"'{token}' is not an integer")
        numbers.append(int(token))
    return numbers


def parse_lines(
    lines: Iterable[str], config: Optional[SolverConfig] = None
) -> List[Puzzle]:
    """Parse text lines into puzzles, skipping blank lines.

    Raises:
        ValueError: If a line holds a token that is not an integer. The
            message names the 1-based line number.
    """
    puzzles: List[Puzzle] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            numbers = parse_line(line, config)
        except ValueError as exc:
            raise ValueError(f"Line {lineno}: {exc}") from None
        if not numbers:
            logger.warning(f"Line {lineno} holds no numbers, ignoring it")
            continue
        puzzles.append(Puzzle.from_numbers(numbers))
    return puzzles


def _puzzle_from_entry(entry: Any, index: int, config: SolverConfig) -> Puzzle:
    if isinstance(entry, str):
        try:
            numbers = parse_line(entry, config)
        except ValueError as exc:
            raise ValueError(f"Puzzle {index}: {exc}") from None
        if not numbers:
            raise ValueError(f"Puzzle {index}: no numbers in '{entry}'")
        return Puzzle.from_numbers(numbers)

    if isinstance(entry, dict):
        missing = [key for key in ("operands", "target") if key not in entry]
        if missing:
            raise ValueError(f"Puzzle {index}: missing key(s) {', '.join(missing)}")
        unknown = set(entry) - {"operands", "target"}
        if unknown:
            raise ValueError(
                f"Puzzle {index}: unrecognized key(s) {', '.join(sorted(map(str, unknown)))}"
            )
        operands = entry["operands"]
        if not isinstance(operands, list):
            raise ValueError(f"Puzzle {index}: 'operands' must be a list")
        try:
            return Puzzle(operands=tuple(operands), target=entry["target"])
        except TypeError as exc:
            raise ValueError(f"Puzzle {index}: {exc}") from None

    raise ValueError(
        f"Puzzle {index}: expected a string or a mapping, got {type(entry).__name__}"
    )


def load_yaml_puzzles(
    yaml_str: str, config: Optional[SolverConfig] = None
) -> List[Puzzle]:
    """Parse a YAML puzzle batch.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    cfg = config or SOLVER_CONFIG
    data = yaml.safe_load(yaml_str)
    if data is None:
        return []
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    unknown = set(data) - {"puzzles"}
    if unknown:
        raise ValueError(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, unknown)))}"
        )
    entries = data.get("puzzles") or []
    if not isinstance(entries, list):
        raise ValueError("'puzzles' must be a list")
    return [
        _puzzle_from_entry(entry, index, cfg)
        for index, entry in enumerate(entries, start=1)
    ]


def load_puzzles(
    path: Union[str, Path], config: Optional[SolverConfig] = None
) -> List[Puzzle]:
    """Read every puzzle from ``path``.

    Files ending in ``.yaml`` or ``.yml`` are parsed as YAML; anything else
    as text lines.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the content is malformed.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        puzzles = load_yaml_puzzles(text, config)
    else:
        puzzles = parse_lines(text.splitlines(), config)
    logger.debug(f"Loaded {len(puzzles)} puzzle(s) from {path}")
    return puzzles
