"""
Error types raised by the board model, the move executor and the puzzle reader.
"""

from __future__ import annotations

from typing import Optional


class KabufudaError(Exception):
    """Base class for all Kabufuda errors."""


class IllegalMoveError(KabufudaError, ValueError):
    """
    Raised when a move that fails validation is executed.

    The solver only executes generated moves, so seeing this from a search
    means the move generator and the validity checks disagree.
    """


class InvalidPuzzleError(KabufudaError):
    """
    Raised when a board does not hold exactly four cards of each suit.
    """

    def __init__(self, problems: list[str]) -> None:
        message = "Invalid puzzle: " + "; ".join(problems) if problems else "Invalid puzzle"
        super().__init__(message)
        self.problems = list(problems)


class PuzzleParseError(KabufudaError, ValueError):
    """
    Raised when puzzle text cannot be read into a board.
    """

    def __init__(self, message: str, *, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
