"""Puzzle validation ahead of a search."""

from typing import List

from kabufuda.simulation.errors import InvalidPuzzleError
from kabufuda.simulation.state import CARDS_PER_SUIT, SUIT_COUNT, TOTAL_CARDS, Board


class PuzzleValidator:
    """Explains why a board is not a playable deal.

    ``Board.is_valid`` answers yes or no; this lists every problem found so
    a bad puzzle file can be reported in one go.
    """

    def find_problems(self, board: Board) -> List[str]:
        """Return a readable description of every card-count problem.

        Args:
            board: Board to inspect

        Returns:
            Empty list when the board holds four cards of each suit
        """
        problems: List[str] = []

        total = board.card_count()
        if total != TOTAL_CARDS:
            problems.append(f"board holds {total} cards (expected {TOTAL_CARDS})")

        counts = board.suit_counts()
        for suit in range(SUIT_COUNT):
            if counts[suit] != CARDS_PER_SUIT:
                problems.append(
                    f"suit {suit} appears {counts[suit]} times (expected {CARDS_PER_SUIT})"
                )

        return problems

    def validate(self, board: Board) -> None:
        """Raise InvalidPuzzleError if the board is not a playable deal."""
        problems = self.find_problems(board)
        if problems:
            raise InvalidPuzzleError(problems)
