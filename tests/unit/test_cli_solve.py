"""Tests for the kabufuda-solve command."""

import pytest
from click.testing import CliRunner
from kabufuda.cli.solve import (
    EXIT_INVALID,
    EXIT_NO_SOLUTION,
    EXIT_SOLVED,
    EXIT_UNREADABLE,
    main,
)

LAYERED_DEAL = """\
# Runs of four over a single 8 or 9
easy
8 8 8 8 9 9 9 9
0 1 2 3 4 5 6 7
0 1 2 3 4 5 6 7
0 1 2 3 4 5 6 7
0 1 2 3 4 5 6 7
"""

SAMPLE_DEAL = """\
expert
8 4 0 5 5 9 6 0
5 3 2 7 5 8 8 6
1 0 0 7 3 4 8 2
4 9 3 1 1 6 3 9
9 2 2 1 7 4 6 7
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_puzzle(tmp_path, text: str) -> str:
    path = tmp_path / "puzzle.txt"
    path.write_text(text)
    return str(path)


def test_solves_puzzle(runner, tmp_path) -> None:
    result = runner.invoke(main, [write_puzzle(tmp_path, LAYERED_DEAL)])

    assert result.exit_code == EXIT_SOLVED
    assert "Difficulty: easy" in result.output
    assert "*** Winning Moves: ***" in result.output
    assert " 1. 4 cards from 0 -> -4" in result.output
    assert "Board:" not in result.output


def test_replay_prints_boards(runner, tmp_path) -> None:
    result = runner.invoke(main, [write_puzzle(tmp_path, LAYERED_DEAL), "--replay"])

    assert result.exit_code == EXIT_SOLVED
    assert "Board:" in result.output
    assert "Move 1: 4 cards from 0 -> -4" in result.output


def test_difficulty_override(runner, tmp_path) -> None:
    result = runner.invoke(
        main, [write_puzzle(tmp_path, LAYERED_DEAL), "--difficulty", "HARD"]
    )

    assert "Difficulty: hard" in result.output
    assert "Swaps: < > < > <X> <X> " in result.output


def test_invalid_puzzle(runner, tmp_path) -> None:
    text = SAMPLE_DEAL.replace("9 2 2 1 7 4 6 7", "9 2 2 1 7 4 6 3")
    result = runner.invoke(main, [write_puzzle(tmp_path, text)])

    assert result.exit_code == EXIT_INVALID
    assert "Invalid puzzle:" in result.output
    assert "suit 3 appears 5 times (expected 4)" in result.output


def test_missing_file_is_unreadable(runner, tmp_path) -> None:
    result = runner.invoke(main, [str(tmp_path / "missing.txt")])

    assert result.exit_code == EXIT_UNREADABLE
    assert "Unreadable input" in result.output


def test_garbled_file_is_unreadable(runner, tmp_path) -> None:
    result = runner.invoke(main, [write_puzzle(tmp_path, "not a puzzle\n")])

    assert result.exit_code == EXIT_UNREADABLE
    assert "Unreadable input" in result.output


def test_state_limit_reports_no_solution(runner, tmp_path) -> None:
    result = runner.invoke(main, [write_puzzle(tmp_path, SAMPLE_DEAL), "--max-states", "1"])

    assert result.exit_code == EXIT_NO_SOLUTION
    assert "No solution found within the search limits." in result.output


def test_time_limit_from_environment(runner, tmp_path) -> None:
    result = runner.invoke(
        main,
        [write_puzzle(tmp_path, SAMPLE_DEAL)],
        env={"KABUFUDA_MAX_SECONDS": "0.000000001"},
    )

    assert result.exit_code == EXIT_NO_SOLUTION
    assert "within the search limits" in result.output


def test_rejects_non_positive_time_limit(runner, tmp_path) -> None:
    result = runner.invoke(main, [write_puzzle(tmp_path, SAMPLE_DEAL), "--max-seconds", "0"])

    assert result.exit_code == 2
    assert "--max-seconds" in result.output
