"""Depth-first solver for Kabufuda boards."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set

from kabufuda.simulation.movegen import Move, apply_move, get_all_valid_moves
from kabufuda.simulation.state import Board
from kabufuda.simulation.validation import PuzzleValidator

logger = logging.getLogger(__name__)


class SolveStatus(Enum):
    """How a search ended."""

    ALREADY_WON = "already_won"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"  # Every reachable board was explored
    LIMIT_REACHED = "limit_reached"  # Deadline or state cap hit first


@dataclass
class SolverConfig:
    """Search limits.

    Limits only decide when to give up; they never change the order in
    which boards are explored.
    """

    max_seconds: Optional[float] = None
    max_states: Optional[int] = None
    progress_interval: int = 1 << 20  # Pruned transitions between progress logs

    def __post_init__(self) -> None:
        if self.max_seconds is not None and self.max_seconds <= 0:
            raise ValueError("max_seconds must be positive")
        if self.max_states is not None and self.max_states <= 0:
            raise ValueError("max_states must be positive")
        if self.progress_interval <= 0:
            raise ValueError("progress_interval must be positive")


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a search."""

    status: SolveStatus
    moves: tuple[Move, ...]
    states_visited: int
    states_skipped: int
    max_depth: int
    elapsed: float  # Seconds

    @property
    def solved(self) -> bool:
        return self.status in (SolveStatus.ALREADY_WON, SolveStatus.SOLVED)


@dataclass
class _SearchFrame:
    """A board on the search path with its ordered moves and a cursor."""

    board: Board
    moves: List[Move]
    cursor: int = 0

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.moves)


class Solver:
    """Finds a winning move sequence by depth-first search.

    The search keeps its own stack of frames instead of recursing, so the
    path length is not bounded by the interpreter's call stack. Every board
    reached is remembered; reaching one again through a different move
    order prunes that branch.
    """

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()
        self.validator = PuzzleValidator()

    def solve(self, board: Board) -> SolveResult:
        """Search for a sequence of moves that wins ``board``.

        Raises:
            InvalidPuzzleError: if the board is not a valid 40 card deal.
        """
        self.validator.validate(board)
        start = time.perf_counter()

        if board.has_won():
            logger.info("Board is already won")
            return SolveResult(
                status=SolveStatus.ALREADY_WON,
                moves=(),
                states_visited=0,
                states_skipped=0,
                max_depth=0,
                elapsed=time.perf_counter() - start,
            )

        deadline = None
        if self.config.max_seconds is not None:
            deadline = start + self.config.max_seconds

        visited: Set[Board] = {board}
        frames: List[_SearchFrame] = [_SearchFrame(board, get_all_valid_moves(board))]
        path: List[Move] = []
        skipped = 0
        max_depth = 0
        status = SolveStatus.UNSOLVABLE

        while frames:
            if deadline is not None and time.perf_counter() >= deadline:
                logger.info(f"Search deadline of {self.config.max_seconds}s reached")
                status = SolveStatus.LIMIT_REACHED
                break

            frame = frames[-1]
            if frame.exhausted:
                # Backtrack; the root frame has no move on the path
                frames.pop()
                if path:
                    path.pop()
                continue

            move = frame.moves[frame.cursor]
            frame.cursor += 1
            new_board = apply_move(frame.board, move)

            if new_board in visited:
                skipped += 1
                if skipped % self.config.progress_interval == 0:
                    logger.info(
                        f"Processed: {len(visited)}, Skipped: {skipped}, Depth: {len(path)}"
                    )
                continue

            if self.config.max_states is not None and len(visited) >= self.config.max_states:
                logger.info(f"State limit of {self.config.max_states} reached")
                status = SolveStatus.LIMIT_REACHED
                break

            visited.add(new_board)
            path.append(move)
            max_depth = max(max_depth, len(path))

            if new_board.has_won():
                logger.info(f"Found a winning sequence of {len(path)} moves")
                status = SolveStatus.SOLVED
                break

            frames.append(_SearchFrame(new_board, get_all_valid_moves(new_board)))

        if status == SolveStatus.UNSOLVABLE:
            logger.info(f"No solution after exploring {len(visited)} boards")

        return SolveResult(
            status=status,
            moves=tuple(path) if status == SolveStatus.SOLVED else (),
            states_visited=len(visited),
            states_skipped=skipped,
            max_depth=max_depth,
            elapsed=time.perf_counter() - start,
        )


def solve(board: Board) -> List[Move]:
    """Return the winning moves for ``board``.

    An empty list means the board is already won or has no solution; check
    ``board.has_won()`` beforehand to tell the two apart.
    """
    return list(Solver().solve(board).moves)
