"""Immutable board state for Kabufuda solitaire.

Slots are addressed with a single signed index: ``0..7`` are the eight
field stacks left to right, ``-1..-4`` are the four swap fields. Swap
index ``i`` lives in ``Board.swaps[(-i) - 1]``, so ``-1`` is the first
swap to be unlocked.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

SUIT_COUNT = 10
CARDS_PER_SUIT = 4
TOTAL_CARDS = SUIT_COUNT * CARDS_PER_SUIT
FIELD_COUNT = 8
SWAP_COUNT = 4
DEAL_DEPTH = 5


def is_field_index(index: int) -> bool:
    """True for a field stack slot (0..7)."""
    _check_slot(index)
    return index >= 0


def is_swap_index(index: int) -> bool:
    """True for a swap field slot (-1..-4)."""
    _check_slot(index)
    return index < 0


def swap_index(index: int) -> int:
    """Map a negative swap slot to its position in ``Board.swaps``."""
    if not -SWAP_COUNT <= index < 0:
        raise IndexError(f"Swap slot out of range: {index}")
    return (-index) - 1


def _check_slot(index: int) -> None:
    if not -SWAP_COUNT <= index < FIELD_COUNT:
        raise IndexError(f"Slot out of range: {index}")


@dataclass(frozen=True)
class Card:
    """Immutable card identified by its suit digit."""

    suit: int

    def __post_init__(self) -> None:
        if not 0 <= self.suit < SUIT_COUNT:
            raise ValueError(f"Suit must be in 0..{SUIT_COUNT - 1}, got {self.suit}")

    def __str__(self) -> str:
        return str(self.suit)


@dataclass(frozen=True)
class CardStack:
    """One of the eight field columns, bottom card first.

    A collapsed stack holds exactly four equal cards and never changes again.
    """

    cards: tuple[Card, ...] = ()
    collapsed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "cards", tuple(self.cards))
        if not all(isinstance(card, Card) for card in self.cards):
            raise ValueError("Card stacks cannot hold empty slots")
        if self.collapsed and not _is_complete_run(self.cards):
            raise ValueError("Only four equal cards can be collapsed")

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def top(self) -> Optional[Card]:
        """Exposed card, or None for an empty stack."""
        return self.cards[-1] if self.cards else None

    def top_size(self) -> int:
        """Number of equal cards running down from the top."""
        if not self.cards:
            return 0
        top = self.cards[-1]
        count = 0
        for card in reversed(self.cards):
            if card != top:
                break
            count += 1
        return count

    @property
    def can_collapse(self) -> bool:
        """True when the stack holds exactly four equal cards."""
        return _is_complete_run(self.cards)

    def push_cards(self, card: Card, size: int = 1) -> "CardStack":
        """Return a new stack with ``size`` copies of ``card`` on top."""
        if self.collapsed:
            raise ValueError("Cannot push onto a collapsed stack")
        return CardStack(self.cards + (card,) * size)

    def pop_cards(self, size: int) -> "CardStack":
        """Return a new stack with the top ``size`` cards removed."""
        if self.collapsed:
            raise ValueError("Cannot pop from a collapsed stack")
        if size > self.top_size():
            raise ValueError(f"Cannot pop {size} cards, top run is {self.top_size()}")
        return CardStack(self.cards[:-size])

    def try_collapse(self) -> "CardStack":
        """Collapse the stack if it holds four equal cards, else return it unchanged."""
        if self.collapsed or not self.can_collapse:
            return self
        return CardStack(self.cards, collapsed=True)


def _is_complete_run(cards: Sequence[Card]) -> bool:
    return len(cards) == CARDS_PER_SUIT and all(card == cards[0] for card in cards)


class SwapState(Enum):
    """Lifecycle of a swap field."""

    LOCKED = "locked"
    FREE = "free"
    OCCUPIED = "occupied"
    COLLAPSED = "collapsed"


@dataclass(frozen=True)
class SwapField:
    """Free cell holding nothing, one card, or a collapsed suit."""

    state: SwapState = SwapState.LOCKED
    card: Optional[Card] = None

    def __post_init__(self) -> None:
        holds_card = self.state in (SwapState.OCCUPIED, SwapState.COLLAPSED)
        if holds_card != (self.card is not None):
            raise ValueError(f"{self.state.value} swap field cannot hold card {self.card}")

    @property
    def is_locked(self) -> bool:
        return self.state == SwapState.LOCKED

    @property
    def is_free(self) -> bool:
        return self.state == SwapState.FREE

    @property
    def is_occupied(self) -> bool:
        return self.state == SwapState.OCCUPIED

    @property
    def is_collapsed(self) -> bool:
        return self.state == SwapState.COLLAPSED

    @property
    def size(self) -> int:
        """Number of cards represented by this field."""
        if self.state == SwapState.OCCUPIED:
            return 1
        if self.state == SwapState.COLLAPSED:
            return CARDS_PER_SUIT
        return 0

    def unlock(self) -> "SwapField":
        if not self.is_locked:
            raise ValueError(f"Cannot unlock a {self.state.value} swap field")
        return SwapField(SwapState.FREE)

    def push_card(self, card: Card) -> "SwapField":
        if not self.is_free:
            raise ValueError(f"Cannot push onto a {self.state.value} swap field")
        return SwapField(SwapState.OCCUPIED, card)

    def push_stack(self, card: Card, size: int) -> "SwapField":
        """Accept a single card, or a run of four which collapses the field."""
        if size == 1:
            return self.push_card(card)
        if size != CARDS_PER_SUIT:
            raise ValueError(f"Swap fields accept 1 or {CARDS_PER_SUIT} cards, got {size}")
        self.push_card(card)
        return SwapField(SwapState.COLLAPSED, card)

    def pop_card(self) -> "SwapField":
        if not self.is_occupied:
            raise ValueError(f"Cannot pop from a {self.state.value} swap field")
        return SwapField(SwapState.FREE)


class Difficulty(Enum):
    """Game difficulty; decides how many swap fields start unlocked."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def free_swaps(self) -> int:
        return _FREE_SWAPS[self]


_FREE_SWAPS = {
    Difficulty.EASY: 4,
    Difficulty.NORMAL: 3,
    Difficulty.HARD: 2,
    Difficulty.EXPERT: 1,
}


@dataclass(frozen=True)
class Board:
    """Immutable board: eight field stacks plus four swap fields.

    Boards compare and hash by their stacks and swaps only, so they can be
    used directly as keys of the solver's visited set. The difficulty is
    kept for display; the swap states already encode its effect.
    """

    stacks: tuple[CardStack, ...]
    swaps: tuple[SwapField, ...]
    difficulty: Difficulty = field(default=Difficulty.EXPERT, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stacks", tuple(self.stacks))
        object.__setattr__(self, "swaps", tuple(self.swaps))
        if len(self.stacks) != FIELD_COUNT:
            raise ValueError(f"Board needs {FIELD_COUNT} stacks, got {len(self.stacks)}")
        if len(self.swaps) != SWAP_COUNT:
            raise ValueError(f"Board needs {SWAP_COUNT} swap fields, got {len(self.swaps)}")

    @classmethod
    def create(cls, difficulty: Difficulty = Difficulty.EXPERT) -> "Board":
        """Empty board with the difficulty's swap fields unlocked."""
        board = cls(
            stacks=(CardStack(),) * FIELD_COUNT,
            swaps=(SwapField(),) * SWAP_COUNT,
            difficulty=difficulty,
        )
        for _ in range(difficulty.free_swaps):
            board = board.unlock_swap()
        return board

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[Iterable[int]],
        difficulty: Difficulty = Difficulty.EXPERT,
    ) -> "Board":
        """Build a board from eight columns of suit digits, bottom card first."""
        if len(columns) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} columns, got {len(columns)}")
        stacks = tuple(
            CardStack(tuple(Card(int(suit)) for suit in column))
            for column in columns
        )
        return cls.create(difficulty).copy_with(stacks=stacks)

    @classmethod
    def from_grid(
        cls,
        rows: Sequence[Sequence[int]],
        difficulty: Difficulty = Difficulty.EXPERT,
    ) -> "Board":
        """Build a board from a dealt grid.

        Args:
            rows: DEAL_DEPTH rows of FIELD_COUNT suit digits. Row 0 holds the
                bottom card of every column, the last row the exposed cards.
            difficulty: Number of swap fields unlocked at the start.
        """
        if len(rows) != DEAL_DEPTH:
            raise ValueError(f"Expected {DEAL_DEPTH} rows, got {len(rows)}")
        for row in rows:
            if len(row) != FIELD_COUNT:
                raise ValueError(f"Expected {FIELD_COUNT} cards per row, got {len(row)}")
        columns = [[row[col] for row in rows] for col in range(FIELD_COUNT)]
        return cls.from_columns(columns, difficulty)

    def copy_with(self, **changes) -> "Board":  # type: ignore
        """Create a new board with the given fields replaced."""
        return replace(self, **changes)

    def get_field(self, index: int) -> CardStack:
        if not 0 <= index < FIELD_COUNT:
            raise IndexError(f"Field slot out of range: {index}")
        return self.stacks[index]

    def get_swap(self, index: int) -> SwapField:
        return self.swaps[swap_index(index)]

    def with_field(self, index: int, stack: CardStack) -> "Board":
        """Return a new board with the field stack at ``index`` replaced."""
        self.get_field(index)
        stacks = tuple(
            stack if i == index else s
            for i, s in enumerate(self.stacks)
        )
        return self.copy_with(stacks=stacks)

    def with_swap(self, index: int, swap: SwapField) -> "Board":
        """Return a new board with the swap field at signed ``index`` replaced."""
        slot = swap_index(index)
        swaps = tuple(
            swap if i == slot else s
            for i, s in enumerate(self.swaps)
        )
        return self.copy_with(swaps=swaps)

    def unlock_swap(self) -> "Board":
        """Unlock the first locked swap field, if any remain."""
        for slot, swap in enumerate(self.swaps):
            if swap.is_locked:
                return self.with_swap(-(slot + 1), swap.unlock())
        return self

    def card_count(self) -> int:
        return sum(len(s) for s in self.stacks) + sum(s.size for s in self.swaps)

    def suit_counts(self) -> Counter:
        """Count cards per suit across stacks and occupied/collapsed swaps."""
        counts: Counter = Counter()
        for stack in self.stacks:
            counts.update(card.suit for card in stack)
        for swap in self.swaps:
            if swap.card is not None:
                counts[swap.card.suit] += swap.size
        return counts

    def is_valid(self) -> bool:
        """True when the board holds exactly four cards of each of the ten suits."""
        if self.card_count() != TOTAL_CARDS:
            return False
        counts = self.suit_counts()
        return all(counts[suit] == CARDS_PER_SUIT for suit in range(SUIT_COUNT))

    def has_won(self) -> bool:
        """Won once every stack is empty or collapsed and no swap holds a loose card."""
        for stack in self.stacks:
            if not stack.is_empty and not stack.collapsed:
                return False
        return not any(swap.is_occupied for swap in self.swaps)

    @property
    def max_size(self) -> int:
        """Height of the tallest field stack."""
        return max(len(s) for s in self.stacks)
