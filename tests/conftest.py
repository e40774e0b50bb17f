"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_INPUT = """\
1, 2, 3 = 0

1 5 7 4
1, 2 = 11
5 = 5
10, 2, 3, 4, 1 = 10
2, 6 = 0
"""


@pytest.fixture
def sample_input(tmp_path: Path) -> Path:
    """Text batch covering a match, each skip reason and a dead end."""
    path = tmp_path / "puzzles.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path


@pytest.fixture
def sample_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "puzzles.yaml"
    path.write_text(
        """
puzzles:
  - "1, 2, 3 = 0"
  - operands: [1, 5, 7]
    target: 4
""",
        encoding="utf-8",
    )
    return path
