"""Command-line tests through typer's runner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


def _level(tmp_path: Path, text: str) -> str:
    path = tmp_path / "level.txt"
    path.write_text(text)
    return str(path)


@pytest.mark.parametrize("mode", ["bfs", "dfs"])
def test_solves_and_prints_text_format(tmp_path: Path, mode: str) -> None:
    result = runner.invoke(app, [_level(tmp_path, "3,1,\n2,0,-1,\n"), "-m", mode])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[:2] == ["3,1,", "2,0,-1,"]
    assert lines.count("(2,right)") == 2
    assert "0,0,2," in lines
    assert "Nodes visited: 2" in lines
    assert "Solution length: 2" in lines
    assert any(line.startswith("Search time: ") for line in lines)


def test_default_level_from_assets() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert "Solution length: 5" in result.output


def test_level_resolved_by_name() -> None:
    result = runner.invoke(app, ["SBP-level1.txt", "-m", "bfs"])
    assert result.exit_code == 0, result.output
    assert "Solution length:" in result.output


def test_show_path_prints_every_board(tmp_path: Path) -> None:
    level = _level(tmp_path, "4,1,\n2,2,0,-1,\n")
    result = runner.invoke(app, [level, "--show-path"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "0,2,2,-1," in lines
    assert "0,0,2,2," in lines
    assert lines.count("(2,right)") == 2


def test_unsolvable_exits_with_one(tmp_path: Path) -> None:
    level = _level(tmp_path, "4,1,\n2,0,3,-1,\n")
    result = runner.invoke(app, [level])
    assert result.exit_code == 1
    assert "No solution found." in result.output


def test_strict_reports_stuck_board(tmp_path: Path) -> None:
    level = _level(tmp_path, "4,1,\n1,2,1,-1,\n")
    assert runner.invoke(app, [level]).exit_code == 1
    result = runner.invoke(app, [level, "--strict"])
    assert result.exit_code == 1
    assert "No legal moves" in result.output


def test_max_nodes_reports_limit() -> None:
    result = runner.invoke(app, ["SBP-level0.txt", "--max-nodes", "1"])
    assert result.exit_code == 1
    assert "Search aborted" in result.output


def test_missing_level_exits_with_two(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope.txt")])
    assert result.exit_code == 2
    assert "not found" in result.output


def test_malformed_level_exits_with_two(tmp_path: Path) -> None:
    result = runner.invoke(app, [_level(tmp_path, "3,1,\n2,0,\n")])
    assert result.exit_code == 2
    assert "Error" in result.output


def test_random_walk_with_seed(tmp_path: Path) -> None:
    level = _level(tmp_path, "5,1,\n-1,0,2,0,-1,\n")
    first = runner.invoke(app, [level, "-m", "walk", "-n", "4", "--seed", "3"])
    second = runner.invoke(app, [level, "-m", "walk", "-n", "4", "--seed", "3"])
    assert first.exit_code == 0, first.output
    assert first.output == second.output
    assert first.output.startswith("5,1,\n-1,0,2,0,-1,\n")


@pytest.mark.parametrize("mode", ["bfs", "walk"])
def test_rich_frontend(tmp_path: Path, mode: str) -> None:
    level = _level(tmp_path, "3,1,\n2,0,-1,\n")
    result = runner.invoke(app, [level, "-m", mode, "-f", "rich"])
    assert result.exit_code == 0, result.output
    if mode == "bfs":
        assert "Solved!" in result.output


def test_rich_frontend_show_path(tmp_path: Path) -> None:
    level = _level(tmp_path, "4,1,\n2,2,0,-1,\n")
    result = runner.invoke(app, [level, "-f", "rich", "--show-path", "-v"])
    assert result.exit_code == 0, result.output
    assert "(2,right)" in result.output


def test_bundled_boxed_level_has_no_solution() -> None:
    result = runner.invoke(app, ["SBP-boxed.txt", "-m", "dfs"])
    assert result.exit_code == 1
    assert "Nodes visited: 0" in result.output


def test_dfs_on_large_open_level(tmp_path: Path) -> None:
    rows = [[0] * 40 for _ in range(30)]
    rows[0][0], rows[-1][-1] = 2, -1
    text = "40,30,\n" + "".join("".join(f"{v}," for v in r) + "\n" for r in rows)
    result = runner.invoke(app, [_level(tmp_path, text), "-m", "dfs"])
    assert result.exit_code == 0, result.output
    assert "Solution length: 1170" in result.output
