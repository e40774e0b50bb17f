"""Command-line interface for opfinder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from opfinder.config import SOLVER_CONFIG
from opfinder.io import load_puzzles
from opfinder.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from opfinder.output_paths import ensure_parent_dir, results_path_for_run
from opfinder.precheck import check_feasibility, reachable_bounds
from opfinder.results import BatchResults
from opfinder.solver import solve

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = []
    lines.append(format_row(headers))
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _inspect_puzzles(path: Path) -> None:
    """Print every puzzle with its pre-check verdict, without searching."""
    try:
        puzzles = load_puzzles(path)
    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"ERROR: Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect input: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to inspect input: {type(e).__name__}: {e}")
        sys.exit(1)

    print(f"Input: {path}")
    print(f"Puzzles: {len(puzzles)}")
    if not puzzles:
        return

    rows = []
    for index, puzzle in enumerate(puzzles, start=1):
        reason = check_feasibility(puzzle.operands, puzzle.target)
        if puzzle.operands:
            lower, upper = reachable_bounds(puzzle.operands)
            bounds = f"[{lower}, {upper}]"
        else:
            bounds = "-"
        rows.append(
            [
                index,
                len(puzzle.operands),
                puzzle.target,
                bounds,
                reason.value if reason else "search",
                puzzle.search_size if reason is None else 0,
            ]
        )
    print(
        _format_table(
            ["#", "Operands", "Target", "Bounds", "Verdict", "Assignments"], rows
        )
    )


def _run_puzzles(
    path: Path,
    results_override: Optional[Path] = None,
    stdout: bool = False,
    output_dir: Optional[Path] = None,
) -> None:
    """Solve every puzzle in ``path`` and print the report.

    Args:
        path: Puzzle input file.
        results_override: Optional explicit path for the results JSON.
        stdout: Whether to also print the results JSON.
        output_dir: Optional directory for generated artifacts.
    """
    logger.info(f"Loading puzzles from: {path}")
    _start_time = perf_counter()

    try:
        puzzles = load_puzzles(path)
        logger.info(f"Loaded {len(puzzles)} {_plural(len(puzzles), 'puzzle')}")

        batch = BatchResults(source=str(path))
        for puzzle in puzzles:
            print(puzzle.describe())
            result = solve(
                puzzle, on_match=lambda expr: print(f"Found a match: {expr}")
            )
            if result.skip_reason is not None:
                print(result.skip_reason.message)
            elif not result.matches:
                print("No results found!")
            batch.add(result)
        print("Finished!")

        results_path = results_path_for_run(path, output_dir, results_override)
        if results_path is not None or stdout:
            json_str = json.dumps(batch.to_dict(), indent=2)
            if results_path is not None:
                ensure_parent_dir(results_path)
                results_path.write_text(json_str, encoding="utf-8")
                logger.info(f"Results written to: {results_path}")
            if stdout:
                print(json_str)

        summary = batch.summary()
        _elapsed = perf_counter() - _start_time
        logger.info(
            f"Processed {summary['puzzles']} {_plural(summary['puzzles'], 'puzzle')}"
            f" ({summary['solved']} solved, {summary['skipped']} skipped,"
            f" {summary['unsolved']} unsolved) in {_format_duration(_elapsed)}"
        )

    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"ERROR: Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve puzzles: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to solve puzzles: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``opfinder`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="opfinder",
        description="Find every +/- operator placement that reaches a target.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    # Run command
    run_parser = subparsers.add_parser("run", help="Solve every puzzle in a file")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help=(
            "Export results to JSON file (placed under --output when provided"
            " and relative)"
        ),
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results JSON to stdout after the report",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=(
            "Output directory for the results file"
            f" (default name: <input_name>{SOLVER_CONFIG.results_suffix})"
        ),
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Show parsed puzzles and pre-check verdicts"
    )

    for p in (run_parser, inspect_parser):
        p.add_argument(
            "input",
            type=Path,
            nargs="?",
            default=Path(SOLVER_CONFIG.default_input),
            help=f"Puzzle file (default: {SOLVER_CONFIG.default_input})",
        )

    # Determine effective arguments (support both direct calls and module entrypoint)
    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    # Configure logging based on arguments
    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "run":
        _run_puzzles(
            path=args.input,
            results_override=args.results,
            stdout=args.stdout,
            output_dir=args.output,
        )
    elif args.command == "inspect":
        _inspect_puzzles(args.input)


if __name__ == "__main__":
    main()
