"""Read puzzle text into a Board.

A puzzle file lists the dealt grid as five rows of eight suit digits, the
first row being the bottom card of every column::

    # Expert deal
    expert
    8 4 0 5 5 9 6 0
    5 3 2 7 5 8 8 6
    1 0 0 7 3 4 8 2
    4 9 3 1 1 6 3 9
    9 2 2 1 7 4 6 7

Cards may be separated by spaces or commas, or written as eight contiguous
digits. A single difficulty line (``easy``, ``normal``, ``hard`` or
``expert``, optionally as ``difficulty: hard``) may appear anywhere; Expert
is assumed when it is missing.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from kabufuda.simulation.errors import PuzzleParseError
from kabufuda.simulation.state import DEAL_DEPTH, FIELD_COUNT, Board, Difficulty

logger = logging.getLogger(__name__)

_DIFFICULTY_LINE = re.compile(r"^(?:difficulty\s*[:=]\s*)?([a-z]+)$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[\s,]+")
_DIGITS = "0123456789"


def parse_difficulty(token: str) -> Difficulty:
    """Convert a difficulty name (any case) into a Difficulty."""
    try:
        return Difficulty(token.strip().lower())
    except ValueError:
        names = ", ".join(d.value for d in Difficulty)
        raise PuzzleParseError(f"Unknown difficulty '{token.strip()}' (expected one of {names})")


def parse_board(text: str, difficulty: Optional[Difficulty] = None) -> Board:
    """Parse puzzle text into a Board.

    Args:
        text: Puzzle text
        difficulty: Overrides any difficulty line in the text

    Returns:
        The dealt board. Suit counts are not checked here; use
        ``Board.is_valid`` or ``PuzzleValidator`` for that.

    Raises:
        PuzzleParseError: if the text is not a readable puzzle
    """
    rows: List[List[int]] = []
    file_difficulty: Optional[Difficulty] = None

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        match = _DIFFICULTY_LINE.match(line)
        if match:
            if file_difficulty is not None:
                raise PuzzleParseError("Difficulty given twice", line_number=line_number)
            try:
                file_difficulty = parse_difficulty(match.group(1))
            except PuzzleParseError as e:
                raise PuzzleParseError(str(e), line_number=line_number) from e
            continue

        rows.append(_parse_row(line, line_number))

    if len(rows) != DEAL_DEPTH:
        raise PuzzleParseError(f"Expected {DEAL_DEPTH} card rows, found {len(rows)}")

    chosen = difficulty or file_difficulty or Difficulty.EXPERT
    logger.debug(f"Parsed {len(rows)} rows, difficulty {chosen.value}")
    return Board.from_grid(rows, chosen)


def load_board(path: Union[str, Path], difficulty: Optional[Difficulty] = None) -> Board:
    """Read a puzzle file. OSError propagates for missing or unreadable files."""
    return parse_board(Path(path).read_text(), difficulty)


def _parse_row(line: str, line_number: int) -> List[int]:
    """Parse one grid row of suit digits."""
    if len(line) == FIELD_COUNT and all(c in _DIGITS for c in line):
        tokens = list(line)
    else:
        tokens = [t for t in _SEPARATORS.split(line) if t]

    if len(tokens) != FIELD_COUNT:
        raise PuzzleParseError(
            f"Expected {FIELD_COUNT} cards, found {len(tokens)}", line_number=line_number
        )

    cards: List[int] = []
    for token in tokens:
        if len(token) != 1 or token not in _DIGITS:
            raise PuzzleParseError(f"Invalid card '{token}'", line_number=line_number)
        cards.append(int(token))
    return cards
