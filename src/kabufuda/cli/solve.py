# src/kabufuda/cli/solve.py
"""CLI command for solving a Kabufuda deal."""

from __future__ import annotations

import logging
import sys

import click

from kabufuda.console.display import BoardRenderer, SolutionPresenter
from kabufuda.puzzle.parser import load_board
from kabufuda.simulation.engine import Solver, SolverConfig, SolveStatus
from kabufuda.simulation.errors import PuzzleParseError
from kabufuda.simulation.state import Difficulty
from kabufuda.simulation.validation import PuzzleValidator

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_UNREADABLE = 2
EXIT_INVALID = 3


@click.command()
@click.argument("puzzle_path", type=click.Path(dir_okay=False))
@click.option(
    "-d", "--difficulty",
    type=click.Choice([d.value for d in Difficulty], case_sensitive=False),
    default=None,
    help="Override the difficulty given in the puzzle file",
)
@click.option(
    "--max-seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    envvar="KABUFUDA_MAX_SECONDS",
    help="Give up after this many seconds of searching",
)
@click.option(
    "--max-states",
    type=click.IntRange(min=1),
    default=None,
    help="Give up after visiting this many boards",
)
@click.option("--replay/--no-replay", default=False, help="Print the board after every move")
@click.option("--color/--no-color", default=False, help="Colorize board output")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    puzzle_path: str,
    difficulty: str | None,
    max_seconds: float | None,
    max_states: int | None,
    replay: bool,
    color: bool,
    verbose: bool,
):
    """Find a winning sequence of moves for a Kabufuda deal.

    PUZZLE_PATH is a text file with five rows of eight suit digits.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    click.echo("*** KABUFUDA SOLITAIRE ***")

    # Load puzzle
    override = Difficulty(difficulty.lower()) if difficulty else None
    try:
        board = load_board(puzzle_path, difficulty=override)
    except (OSError, UnicodeDecodeError, PuzzleParseError) as e:
        click.echo(f"Unreadable input: {e}", err=True)
        sys.exit(EXIT_UNREADABLE)

    renderer = BoardRenderer(color=color)
    click.echo(f"Difficulty: {board.difficulty.value}")
    click.echo(renderer.render(board))

    # Reject bad deals before searching
    problems = PuzzleValidator().find_problems(board)
    if problems:
        click.echo("Invalid puzzle:", err=True)
        for problem in problems:
            click.echo(f"  - {problem}", err=True)
        sys.exit(EXIT_INVALID)

    config = SolverConfig(max_seconds=max_seconds, max_states=max_states)
    result = Solver(config).solve(board)
    click.echo(
        f"\nSearched {result.states_visited} boards "
        f"({result.states_skipped} repeats skipped) in {result.elapsed:.3f}s"
    )

    if result.status == SolveStatus.ALREADY_WON:
        click.echo("Board is already solved.")
        sys.exit(EXIT_SOLVED)

    if not result.solved:
        if result.status == SolveStatus.LIMIT_REACHED:
            click.echo("No solution found within the search limits.")
        else:
            click.echo("No solution found.")
        sys.exit(EXIT_NO_SOLUTION)

    presenter = SolutionPresenter(renderer)
    click.echo(presenter.present(result.moves))
    if replay:
        click.echo("")
        click.echo(presenter.replay(board, result.moves))
    sys.exit(EXIT_SOLVED)


if __name__ == "__main__":
    main()
