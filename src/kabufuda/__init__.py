"""Kabufuda solitaire board model and solver."""

from kabufuda.simulation.state import (
    Board,
    Card,
    CardStack,
    Difficulty,
    SwapField,
    SwapState,
)
from kabufuda.simulation.movegen import (
    Move,
    apply_move,
    execute_move,
    get_all_valid_moves,
    move_is_valid,
    move_is_valid_for_board,
)
from kabufuda.simulation.engine import Solver, SolverConfig, SolveResult, SolveStatus, solve
from kabufuda.simulation.errors import (
    IllegalMoveError,
    InvalidPuzzleError,
    KabufudaError,
    PuzzleParseError,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Card",
    "CardStack",
    "Difficulty",
    "SwapField",
    "SwapState",
    "Move",
    "apply_move",
    "execute_move",
    "get_all_valid_moves",
    "move_is_valid",
    "move_is_valid_for_board",
    "Solver",
    "SolverConfig",
    "SolveResult",
    "SolveStatus",
    "solve",
    "IllegalMoveError",
    "InvalidPuzzleError",
    "KabufudaError",
    "PuzzleParseError",
]
