"""Text rendering of boards and solutions."""

from kabufuda.console.display import (
    BoardRenderer,
    SolutionPresenter,
    format_card,
    format_move,
    format_swap,
)

__all__ = [
    "BoardRenderer",
    "SolutionPresenter",
    "format_card",
    "format_move",
    "format_swap",
]
