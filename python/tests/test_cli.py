from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from main import EXIT_INVALID, EXIT_UNSOLVABLE, app

runner = CliRunner()

SOLVED = [str(v) for v in range(1, 17)]
SWAPPED = ["2", "1"] + SOLVED[2:]
ONE_SLIDE = SOLVED[:14] + ["16", "15"]


def test_check_solvable() -> None:
    result = runner.invoke(app, ["check", *SOLVED])
    assert result.exit_code == 0
    assert "Solvable" in result.output


def test_check_unsolvable() -> None:
    result = runner.invoke(app, ["check", *SWAPPED])
    assert result.exit_code == EXIT_UNSOLVABLE
    assert "Unsolvable" in result.output


def test_check_malformed_board() -> None:
    result = runner.invoke(app, ["check", *SOLVED[:-1]])
    assert result.exit_code == EXIT_INVALID
    assert "Invalid board" in result.output


def test_solve_json() -> None:
    result = runner.invoke(app, ["solve", "--json", *ONE_SLIDE])
    assert result.exit_code == 0
    assert json.loads(result.output) == [{"value": 15, "index": 14}]


def test_solve_table() -> None:
    result = runner.invoke(app, ["solve", *ONE_SLIDE])
    assert result.exit_code == 0
    assert "Solved in 1 moves" in result.output


def test_solve_refuses_unsolvable_board() -> None:
    result = runner.invoke(app, ["solve", *SWAPPED])
    assert result.exit_code == EXIT_UNSOLVABLE


def test_hint() -> None:
    result = runner.invoke(app, ["hint", *ONE_SLIDE])
    assert result.exit_code == 0
    assert "move 15 into slot 14" in result.output


def test_hint_on_solved_board() -> None:
    result = runner.invoke(app, ["hint", *SOLVED])
    assert result.exit_code == 0
    assert "Already solved" in result.output


def test_shuffle_scrambled_board_is_solvable() -> None:
    result = runner.invoke(app, ["shuffle", "--steps", "20", "--seed", "4"])
    assert result.exit_code == 0
    assert "Solvable" in result.output


def test_shuffle_unsolvable_board() -> None:
    result = runner.invoke(app, ["shuffle", "--unsolvable", "--seed", "4", "--size", "3"])
    assert result.exit_code == 0
    assert "Unsolvable" in result.output


def test_malformed_environment_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIFTEEN_EXECUTOR", "gpu")

    result = runner.invoke(app, ["check", *SOLVED])

    assert result.exit_code == EXIT_INVALID
    assert "Invalid configuration" in result.output
    assert "FIFTEEN_EXECUTOR" in result.output
    assert not isinstance(result.exception, ValueError)
