#!/usr/bin/env python3
"""Demonstration of solving a Kabufuda deal from code.

This example builds a deal, checks it, runs the solver and prints the
winning moves with the board after each one.

Usage:
    poetry run python examples/solve_demo.py
"""

import logging

from kabufuda.console.display import BoardRenderer, SolutionPresenter
from kabufuda.puzzle.examples import create_layered_deal, create_sample_deal
from kabufuda.simulation.engine import Solver, SolverConfig, SolveStatus
from kabufuda.simulation.movegen import get_all_valid_moves
from kabufuda.simulation.validation import PuzzleValidator


def demonstrate_moves():
    """Show the moves available on the opening board."""
    print("=== Opening Moves ===\n")
    board = create_sample_deal()
    print(BoardRenderer().render(board))
    print()

    moves = get_all_valid_moves(board)
    print(f"{len(moves)} legal moves, largest first:")
    for move in moves:
        print(f"  {move}")
    print()


def demonstrate_solve():
    """Solve a small deal and replay the answer."""
    print("=== Solving the Layered Deal ===\n")
    board = create_layered_deal()
    PuzzleValidator().validate(board)

    result = Solver().solve(board)
    print(f"Status: {result.status.value}")
    print(f"Visited {result.states_visited} boards in {result.elapsed:.3f}s\n")

    presenter = SolutionPresenter()
    print(presenter.present(result.moves))
    print()
    print(presenter.replay(board, result.moves))
    print()


def demonstrate_limits():
    """Bound a harder search by time."""
    print("=== Bounded Search on the Sample Deal ===\n")
    result = Solver(SolverConfig(max_seconds=5)).solve(create_sample_deal())

    if result.status == SolveStatus.SOLVED:
        print(f"Solved in {len(result.moves)} moves")
    else:
        print(f"Stopped: {result.status.value} after {result.states_visited} boards")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demonstrate_moves()
    demonstrate_solve()
    demonstrate_limits()
