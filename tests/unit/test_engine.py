"""Tests for the depth-first solver."""

import pytest
from kabufuda.simulation.engine import Solver, SolverConfig, SolveResult, SolveStatus, solve
from kabufuda.simulation.errors import InvalidPuzzleError
from kabufuda.simulation.movegen import Move, execute_move, get_all_valid_moves
from kabufuda.simulation.state import Board, Card, CardStack, SwapField, SwapState
from kabufuda.puzzle.examples import create_layered_deal, create_sample_deal


def make_stack(*suits: int, collapsed: bool = False) -> CardStack:
    """Helper to create a stack, bottom card first."""
    return CardStack(tuple(Card(s) for s in suits), collapsed=collapsed)


def make_near_win_board() -> Board:
    """Three 7s on stack 7 and the fourth 7 waiting in swap -1."""
    stacks = tuple(make_stack(*(suit,) * 4, collapsed=True) for suit in range(7))
    stacks += (make_stack(7, 7, 7),)
    swaps = (
        SwapField(SwapState.OCCUPIED, Card(7)),
        SwapField(SwapState.COLLAPSED, Card(8)),
        SwapField(SwapState.COLLAPSED, Card(9)),
        SwapField(SwapState.FREE),
    )
    return Board(stacks=stacks, swaps=swaps)


def make_won_board() -> Board:
    stacks = tuple(make_stack(*(suit,) * 4, collapsed=True) for suit in range(8))
    swaps = (
        SwapField(SwapState.COLLAPSED, Card(8)),
        SwapField(SwapState.COLLAPSED, Card(9)),
        SwapField(SwapState.FREE),
        SwapField(SwapState.FREE),
    )
    return Board(stacks=stacks, swaps=swaps)


def make_stuck_board() -> Board:
    """Expert deal with the free swap filled and eight different exposed cards."""
    stacks = (
        make_stack(9, 1, 2, 3, 0),
        make_stack(9, 2, 3, 4, 1),
        make_stack(9, 3, 4, 5, 2),
        make_stack(9, 4, 5, 6, 3),
        make_stack(0, 5, 6, 7, 4),
        make_stack(0, 6, 7, 8, 5),
        make_stack(0, 7, 8, 1, 6),
        make_stack(8, 1, 2, 7),
    )
    swaps = (
        SwapField(SwapState.OCCUPIED, Card(8)),
        SwapField(SwapState.LOCKED),
        SwapField(SwapState.LOCKED),
        SwapField(SwapState.LOCKED),
    )
    return Board(stacks=stacks, swaps=swaps)


def make_dead_end_board() -> Board:
    """All swaps locked; the two exposed 5s can only swap places, then nothing moves."""
    stacks = (
        make_stack(9, 9, 1, 2, 0),
        make_stack(9, 9, 2, 3, 1),
        make_stack(0, 0, 3, 4, 2),
        make_stack(0, 1, 4, 6, 3),
        make_stack(1, 2, 6, 7, 4),
        make_stack(3, 4, 7, 8, 6),
        make_stack(5, 6, 8, 7, 5),
        make_stack(5, 7, 8, 8, 5),
    )
    return Board(stacks=stacks, swaps=(SwapField(),) * 4)


def replay(board: Board, moves) -> Board:
    for move in moves:
        board = execute_move(board, move)
    return board


class TestSolver:
    """Tests for Solver."""

    def test_solves_near_win_board(self):
        result = Solver().solve(make_near_win_board())

        assert isinstance(result, SolveResult)
        assert result.status == SolveStatus.SOLVED
        assert result.solved
        # Swapping the 7 straight back into -1 recreates the start and is pruned
        assert result.moves == (Move(-1, -4, 1), Move(-4, 7, 1))
        assert result.states_visited == 3
        assert result.states_skipped == 1
        assert result.max_depth == 2

    def test_already_won(self):
        result = Solver().solve(make_won_board())

        assert result.status == SolveStatus.ALREADY_WON
        assert result.solved
        assert result.moves == ()
        assert result.states_visited == 0

    def test_no_moves_is_unsolvable(self):
        board = make_stuck_board()
        assert board.is_valid()
        assert get_all_valid_moves(board) == []

        result = Solver().solve(board)

        assert result.status == SolveStatus.UNSOLVABLE
        assert not result.solved
        assert result.moves == ()
        assert result.states_visited == 1

    def test_backtracks_out_of_dead_ends(self):
        board = make_dead_end_board()
        assert board.is_valid()
        assert get_all_valid_moves(board) == [Move(6, 7, 1), Move(7, 6, 1)]

        result = Solver().solve(board)

        assert result.status == SolveStatus.UNSOLVABLE
        assert result.moves == ()
        assert result.states_visited == 3
        assert result.states_skipped == 0
        assert result.max_depth == 1

    def test_solution_replays_to_a_win(self):
        board = create_layered_deal()
        result = Solver().solve(board)

        assert result.status == SolveStatus.SOLVED
        assert replay(board, result.moves).has_won()
        assert result.max_depth >= len(result.moves)

    def test_deterministic(self):
        board = create_layered_deal()
        assert Solver().solve(board).moves == Solver().solve(board).moves

    def test_invalid_board_rejected(self):
        board = Board.from_columns(
            [
                [8, 5, 1, 4, 9],
                [4, 3, 0, 9, 2],
                [0, 2, 0, 3, 2],
                [5, 7, 7, 1, 1],
                [5, 5, 3, 1, 7],
                [9, 8, 4, 6, 4],
                [6, 8, 8, 3, 6],
                [0, 6, 2, 9, 3],
            ]
        )

        with pytest.raises(InvalidPuzzleError) as excinfo:
            Solver().solve(board)

        assert "suit 3 appears 5 times (expected 4)" in excinfo.value.problems
        assert "suit 7 appears 3 times (expected 4)" in excinfo.value.problems

    def test_state_limit(self):
        result = Solver(SolverConfig(max_states=1)).solve(make_near_win_board())

        assert result.status == SolveStatus.LIMIT_REACHED
        assert not result.solved
        assert result.moves == ()

    def test_time_limit(self):
        result = Solver(SolverConfig(max_seconds=1e-9)).solve(create_sample_deal())

        assert result.status == SolveStatus.LIMIT_REACHED
        assert result.moves == ()

    def test_search_does_not_recheck_generated_moves(self, monkeypatch):
        import kabufuda.simulation.movegen as movegen

        def fail(board, move):
            raise AssertionError("legality re-checked during search")

        monkeypatch.setattr(movegen, "move_is_valid_for_board", fail)

        result = Solver().solve(make_near_win_board())

        assert result.moves == (Move(-1, -4, 1), Move(-4, 7, 1))

    def test_progress_logging(self, caplog):
        config = SolverConfig(progress_interval=1)

        with caplog.at_level("INFO", logger="kabufuda.simulation.engine"):
            Solver(config).solve(make_near_win_board())

        assert "Processed: 2, Skipped: 1, Depth: 1" in caplog.text
        assert "Found a winning sequence of 2 moves" in caplog.text


class TestSolverConfig:
    """Tests for SolverConfig."""

    def test_defaults(self):
        config = SolverConfig()

        assert config.max_seconds is None
        assert config.max_states is None
        assert config.progress_interval == 1 << 20

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_seconds": 0}, {"max_states": 0}, {"progress_interval": 0}],
    )
    def test_rejects_non_positive_limits(self, kwargs):
        with pytest.raises(ValueError):
            SolverConfig(**kwargs)


def test_solve_returns_move_list() -> None:
    assert solve(make_near_win_board()) == [Move(-1, -4, 1), Move(-4, 7, 1)]


def test_solve_empty_for_won_and_unsolvable() -> None:
    assert solve(make_won_board()) == []
    assert solve(make_stuck_board()) == []
