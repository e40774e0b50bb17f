"""Utilities for building CLI artifact output paths.

Paths are built from an optional output directory, a prefix derived from the
input file, and the configured results suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from opfinder.config import SOLVER_CONFIG


def input_prefix_from_path(input_path: Path) -> str:
    """Return the input filename stem, used as the artifact prefix."""
    return input_path.stem


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def build_artifact_path(output_dir: Optional[Path], prefix: str, suffix: str) -> Path:
    """Compose an artifact path as output_dir / (prefix + suffix).

    If ``output_dir`` is None, the path is relative to the current working
    directory.
    """
    base = output_dir if output_dir is not None else Path.cwd()
    return base / f"{prefix}{suffix}"


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve an override path with respect to an optional output directory.

    - Absolute override paths are returned as-is.
    - Relative override paths are interpreted as relative to ``output_dir``
      when provided; otherwise relative to the current working directory.
    """
    if override is None:
        return None
    if override.is_absolute():
        return override
    if output_dir is not None:
        return (output_dir / override).resolve()
    return override


def results_path_for_run(
    input_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
) -> Optional[Path]:
    """Determine where the results JSON for a run should be written.

    Results are written only on request: an explicit ``--results`` path, or
    an ``--output`` directory (which implies the default file name).

    Args:
        input_path: The puzzle input file.
        output_dir: Optional base output directory.
        results_override: Optional explicit results path.

    Returns:
        The results path, or None when no results file was requested.
    """
    if results_override is not None:
        return resolve_override_path(results_override, output_dir)
    if output_dir is None:
        return None
    prefix = input_prefix_from_path(input_path)
    return build_artifact_path(output_dir, prefix, SOLVER_CONFIG.results_suffix)
