"""Terminal display for boards and moves."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import click

from kabufuda.simulation.movegen import Move, execute_move
from kabufuda.simulation.state import Board, Card, CardStack, SwapField

EMPTY_CELL = "   "


def format_card(card: Card) -> str:
    return str(card.suit)


def format_swap(swap: SwapField, color: bool = False) -> str:
    """Format a swap field: ``<X>`` locked, ``< >`` free, ``<3>`` occupied, ``-3-`` collapsed."""
    if swap.is_locked:
        text = "<X>"
        return click.style(text, fg="red") if color else text
    if swap.is_free:
        return "< >"
    if swap.is_occupied:
        text = f"<{format_card(swap.card)}>"
        return click.style(text, bold=True) if color else text
    text = f"-{format_card(swap.card)}-"
    return click.style(text, dim=True) if color else text


def format_move(move: Move) -> str:
    """Format a move, e.g. ``2 cards from 3 -> -1``."""
    return str(move)


class BoardRenderer:
    """Renders a board the way the game lays it out on screen."""

    def __init__(self, color: bool = False) -> None:
        self.color = color

    def render(self, board: Board) -> str:
        """Render swaps on the first line, then one row per depth, bottom cards first."""
        lines: list[str] = []

        lines.append("Swaps: " + "".join(f"{format_swap(s, self.color)} " for s in board.swaps))

        for depth in range(board.max_size):
            row = "".join(" " + self._cell(stack, depth) for stack in board.stacks)
            lines.append(row)

        return "\n".join(lines)

    def _cell(self, stack: CardStack, depth: int) -> str:
        """Render the card at ``depth`` (0 is the bottom card) of a stack."""
        if depth >= len(stack):
            return EMPTY_CELL
        card = format_card(stack.cards[depth])
        if stack.collapsed:
            text = f"-{card}-"
            return click.style(text, dim=True) if self.color else text
        text = f" {card} "
        if self.color and depth == len(stack) - 1:
            return click.style(text, bold=True)
        return text


class SolutionPresenter:
    """Presents a winning move sequence."""

    def __init__(self, renderer: Optional[BoardRenderer] = None) -> None:
        self.renderer = renderer or BoardRenderer()

    def present(self, moves: Sequence[Move]) -> str:
        """Numbered list of moves."""
        if not moves:
            return "No moves needed."

        lines = ["*** Winning Moves: ***"]
        width = len(str(len(moves)))
        for i, move in enumerate(moves, start=1):
            lines.append(f" {i:>{width}}. {format_move(move)}")
        return "\n".join(lines)

    def replay(self, board: Board, moves: Iterable[Move]) -> str:
        """Render the starting board and the board after every move."""
        sections = ["Board:\n" + self.renderer.render(board)]
        for i, move in enumerate(moves, start=1):
            board = execute_move(board, move)
            sections.append(f"Move {i}: {format_move(move)}\n" + self.renderer.render(board))
        return "\n\n".join(sections)
