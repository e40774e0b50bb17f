import json
from pathlib import Path

import pytest

from opfinder import cli, solver
from opfinder.types import AssignmentError

EXPECTED_REPORT = [
    "Processing list of numbers: 1, 2, 3 | Target: 0",
    "Found a match: 1 + 2 - 3 = 0",
    "Processing list of numbers: 1, 5, 7 | Target: 4",
    "WARNING! The parity of the given list of numbers does not match the "
    "target's parity, so the target can never be reached! Skipping...",
    "Processing list of numbers: 1, 2 | Target: 11",
    "WARNING! The target is outside of the reachable bounds of the given "
    "list of numbers! Skipping...",
    "Processing list of numbers: 5 | Target: 5",
    "WARNING! Not enough numbers provided "
    "(at least 2 needed to create an expression)! Skipping...",
    "Processing list of numbers: 10, 2, 3, 4, 1 | Target: 10",
    "Found a match: 10 - 2 - 3 + 4 + 1 = 10",
    "Found a match: 10 + 2 + 3 - 4 - 1 = 10",
    "Processing list of numbers: 2, 6 | Target: 0",
    "No results found!",
    "Finished!",
]


def test_cli_run_report(sample_input: Path, capsys) -> None:
    cli.main(["run", str(sample_input)])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == EXPECTED_REPORT


def test_cli_run_is_reproducible(sample_input: Path, capsys) -> None:
    cli.main(["run", str(sample_input)])
    first = capsys.readouterr().out
    cli.main(["run", str(sample_input)])
    assert capsys.readouterr().out == first


def test_cli_run_default_input(sample_input: Path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(sample_input.parent)
    (sample_input.parent / "input.txt").write_text("1 2 3 0\n", encoding="utf-8")
    cli.main(["run"])
    out = capsys.readouterr().out
    assert "Found a match: 1 + 2 - 3 = 0" in out


def test_cli_run_yaml(sample_yaml: Path, capsys) -> None:
    cli.main(["run", str(sample_yaml)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == [
        "Processing list of numbers: 1, 2, 3 | Target: 0",
        "Found a match: 1 + 2 - 3 = 0",
    ]
    assert lines[-1] == "Finished!"


def test_cli_results_file(sample_input: Path, tmp_path: Path) -> None:
    out_file = tmp_path / "nested" / "res.json"
    cli.main(["run", str(sample_input), "--results", str(out_file)])
    data = json.loads(out_file.read_text())
    assert data["summary"] == {
        "puzzles": 6,
        "solved": 2,
        "skipped": 3,
        "unsolved": 1,
        "matches": 3,
    }
    assert data["puzzles"][4]["examined"] == 16


def test_cli_output_dir_default_name(sample_input: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    cli.main(["run", str(sample_input), "--output", str(out_dir)])
    assert (out_dir / "puzzles.results.json").is_file()


def test_cli_no_results_file_by_default(
    sample_input: Path, tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.chdir(tmp_path)
    cli.main(["run", str(sample_input)])
    assert not list(tmp_path.glob("*.results.json"))


def test_cli_stdout_json(sample_input: Path, capsys) -> None:
    cli.main(["run", str(sample_input), "--stdout"])
    out = capsys.readouterr().out
    json_part = out[out.index("Finished!") + len("Finished!") :]
    data = json.loads(json_part)
    assert data["summary"]["puzzles"] == 6


def test_cli_missing_file(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(missing)])
    assert exc_info.value.code == 1
    assert f"ERROR: Input file not found: {missing}" in capsys.readouterr().out


def test_cli_malformed_input(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("1 2 3\n1 two 3\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(bad)])
    assert exc_info.value.code == 1
    assert "Line 2" in capsys.readouterr().out


def test_cli_inspect(sample_input: Path, capsys) -> None:
    cli.main(["inspect", str(sample_input)])
    out = capsys.readouterr().out
    assert "Puzzles: 6" in out
    assert "parity_mismatch" in out
    assert "out_of_bounds" in out
    assert "not_enough_numbers" in out
    assert "[0, 20]" in out
    # Inspect never searches
    assert "Found a match" not in out


def test_cli_inspect_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: opfinder" in capsys.readouterr().out


def test_format_helpers() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"
    assert cli._plural(1, "puzzle") == "puzzle"
    assert cli._plural(2, "puzzle") == "puzzles"
    assert cli._format_table(["a"], []) == ""
    table = cli._format_table(["#", "Target"], [[1, 10]])
    assert table.splitlines()[0].strip().startswith("#")


def test_cli_invariant_violation_aborts_run(
    sample_input: Path, capsys, monkeypatch
) -> None:
    def broken_evaluate(operands, assignment):
        raise AssignmentError("operator count mismatch")

    monkeypatch.setattr(solver, "evaluate", broken_evaluate)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(sample_input)])
    assert exc_info.value.code == 1

    lines = capsys.readouterr().out.splitlines()
    # The first puzzle passes the pre-checks, so the search aborts on it
    assert lines == [
        "Processing list of numbers: 1, 2, 3 | Target: 0",
        "ERROR: Failed to solve puzzles: AssignmentError: operator count mismatch",
    ]
    assert "Finished!" not in lines
