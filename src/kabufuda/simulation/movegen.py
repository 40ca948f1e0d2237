"""Move validation, generation and application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from kabufuda.simulation.errors import IllegalMoveError
from kabufuda.simulation.state import (
    CARDS_PER_SUIT,
    FIELD_COUNT,
    SWAP_COUNT,
    Board,
    is_field_index,
    is_swap_index,
)

# Every slot in scan order: swaps -4..-1, then field stacks 0..7
SLOTS = range(-SWAP_COUNT, FIELD_COUNT)


@dataclass(frozen=True)
class Move:
    """Transfer of ``size`` equal cards from one slot to another."""

    source: int
    target: int
    size: int = 1

    def __str__(self) -> str:
        plural = "" if self.size == 1 else "s"
        return f"{self.size} card{plural} from {self.source} -> {self.target}"


def move_is_valid(move: Move) -> bool:
    """Check the move's shape without looking at any board."""
    # Both slots must exist
    if move.source not in SLOTS or move.target not in SLOTS:
        return False
    if not 1 <= move.size <= CARDS_PER_SUIT:
        return False
    if move.source == move.target:
        return False
    # A swap only ever gives up a single card
    if is_swap_index(move.source) and move.size != 1:
        return False
    # A swap takes one card, or a full run which collapses it
    if is_swap_index(move.target) and move.size not in (1, CARDS_PER_SUIT):
        return False
    return True


def move_is_valid_for_board(board: Board, move: Move) -> bool:
    """Check whether ``move`` can be played on ``board``."""
    if not move_is_valid(move):
        return False

    if is_swap_index(move.source):
        swap = board.get_swap(move.source)
        if not swap.is_occupied or move.size != 1:
            return False
        card = swap.card
    else:
        stack = board.get_field(move.source)
        if stack.collapsed or len(stack) < move.size:
            return False
        # Only a run of equal cards moves together
        if move.size > 1 and stack.top_size() < move.size:
            return False
        card = stack.top

    if is_field_index(move.target):
        target = board.get_field(move.target)
        if target.collapsed:
            return False
        if not target.is_empty and target.top != card:
            return False
    elif not board.get_swap(move.target).is_free:
        return False

    return True


def get_all_valid_moves(board: Board) -> List[Move]:
    """Generate every legal move, larger transfers first.

    Moving whole runs collapses stacks sooner, which keeps the search
    small. Moves of equal size keep their scan order (source ascending,
    then target ascending) so the search is reproducible.
    """
    moves: List[Move] = []

    for source in SLOTS:
        if source < 0:
            swap = board.get_swap(source)
            if not swap.is_occupied:
                continue
            card = swap.card
            max_count = 1
        else:
            stack = board.get_field(source)
            if stack.is_empty or stack.collapsed:
                continue
            card = stack.top
            max_count = stack.top_size()

        for target in SLOTS:
            if target == source:
                continue
            if target < 0:
                if board.get_swap(target).is_free:
                    moves.append(Move(source, target, 1))
                    if max_count == CARDS_PER_SUIT:
                        moves.append(Move(source, target, CARDS_PER_SUIT))
            else:
                dest = board.get_field(target)
                if dest.collapsed:
                    continue
                if dest.is_empty or dest.top == card:
                    for size in range(1, max_count + 1):
                        moves.append(Move(source, target, size))

    # list.sort is stable, also with reverse=True
    moves.sort(key=lambda m: m.size, reverse=True)
    return moves


def execute_move(board: Board, move: Move) -> Board:
    """Apply a move, returning the new board.

    Raises:
        IllegalMoveError: if the move is not legal on ``board``.
    """
    if not move_is_valid_for_board(board, move):
        raise IllegalMoveError(f"Illegal move on this board: {move}")
    return apply_move(board, move)


def apply_move(board: Board, move: Move) -> Board:
    """Apply a move already known to be legal, such as one from get_all_valid_moves.

    Skips the legality check that execute_move performs. Card conservation is
    still asserted, so debug runs catch a generator bug.
    """
    if __debug__:
        before = board.suit_counts()

    # Lift the cards off the source
    if is_swap_index(move.source):
        swap = board.get_swap(move.source)
        card = swap.card
        board = board.with_swap(move.source, swap.pop_card())
    else:
        stack = board.get_field(move.source)
        card = stack.top
        board = board.with_field(move.source, stack.pop_cards(move.size))

    # Drop them on the target
    if is_swap_index(move.target):
        swap = board.get_swap(move.target)
        board = board.with_swap(move.target, swap.push_stack(card, move.size))
    else:
        stack = board.get_field(move.target).push_cards(card, move.size).try_collapse()
        board = board.with_field(move.target, stack)
        if stack.collapsed:
            board = board.unlock_swap()

    assert board.suit_counts() == before, f"Move {move} broke card conservation"
    return board
