from pathlib import Path

from opfinder.output_paths import (
    build_artifact_path,
    ensure_parent_dir,
    input_prefix_from_path,
    resolve_override_path,
    results_path_for_run,
)


def test_prefix_and_artifact_path(tmp_path: Path) -> None:
    assert input_prefix_from_path(Path("data/puzzles.txt")) == "puzzles"
    assert build_artifact_path(tmp_path, "p", ".results.json") == tmp_path / "p.results.json"
    assert build_artifact_path(None, "p", ".x") == Path.cwd() / "p.x"


def test_resolve_override(tmp_path: Path) -> None:
    absolute = tmp_path / "a.json"
    assert resolve_override_path(None, tmp_path) is None
    assert resolve_override_path(absolute, Path("elsewhere")) == absolute
    assert resolve_override_path(Path("r.json"), tmp_path) == (tmp_path / "r.json").resolve()
    assert resolve_override_path(Path("r.json"), None) == Path("r.json")


def test_results_written_only_on_request(tmp_path: Path) -> None:
    src = Path("puzzles.txt")
    assert results_path_for_run(src, None, None) is None
    assert results_path_for_run(src, tmp_path, None) == tmp_path / "puzzles.results.json"
    assert results_path_for_run(src, None, Path("out.json")) == Path("out.json")


def test_ensure_parent_dir(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c.json"
    ensure_parent_dir(target)
    assert target.parent.is_dir()
