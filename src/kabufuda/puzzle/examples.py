"""Reference deals used by the CLI, the tests and the benchmarks."""

from kabufuda.simulation.state import Board, Difficulty


def create_sample_deal() -> Board:
    """Expert deal with a single free swap field.

    Columns (bottom card first):
        8 5 1 4 9 | 4 3 0 9 2 | 0 2 0 3 2 | 5 7 7 1 1
        5 5 3 1 7 | 9 8 4 6 4 | 6 8 8 3 6 | 0 6 2 9 7
    """
    return Board.from_columns(
        [
            [8, 5, 1, 4, 9],
            [4, 3, 0, 9, 2],
            [0, 2, 0, 3, 2],
            [5, 7, 7, 1, 1],
            [5, 5, 3, 1, 7],
            [9, 8, 4, 6, 4],
            [6, 8, 8, 3, 6],
            [0, 6, 2, 9, 7],
        ],
        Difficulty.EXPERT,
    )


def create_stacked_deal() -> Board:
    """Easy deal where most suits already sit in runs of three."""
    return Board.from_grid(
        [
            [1, 2, 3, 4, 7, 8, 7, 8],
            [1, 2, 3, 4, 9, 0, 7, 8],
            [1, 2, 3, 4, 9, 0, 7, 8],
            [9, 0, 5, 6, 3, 1, 6, 5],
            [9, 0, 5, 6, 4, 2, 6, 5],
        ],
        Difficulty.EASY,
    )


def create_layered_deal() -> Board:
    """Easy deal whose columns are full runs over a single 8 or 9.

    Small enough for the solver to finish instantly; handy for demos and
    end-to-end tests.
    """
    return Board.from_columns(
        [
            [8, 0, 0, 0, 0],
            [8, 1, 1, 1, 1],
            [8, 2, 2, 2, 2],
            [8, 3, 3, 3, 3],
            [9, 4, 4, 4, 4],
            [9, 5, 5, 5, 5],
            [9, 6, 6, 6, 6],
            [9, 7, 7, 7, 7],
        ],
        Difficulty.EASY,
    )
