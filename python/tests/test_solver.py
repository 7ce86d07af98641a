"""Solver test suite.

Boards are generated from fixed seeds so every run is reproducible.  The
returned move list is replayed through the real game engine, so each step
is checked for adjacency and the final board for the goal state.
"""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gameplay import GamePlay
from fifteen.engine.gamesolver import Solver, is_solvable, replay
from fifteen.models.board import Board, IllegalMoveError, Tile

SOLVED = list(range(1, 17))
ONE_SLIDE = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 15]
BLANK_NEXT_TO_14 = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 16, 14, 15]


# -- board builders -----------------------------------------------------------


def _scrambled_4x4(seed: int, steps: int = 25) -> Board:
    return GameGenerator.generate(4, steps=steps, rng=random.Random(seed))


def _shuffled_3x3(seed: int) -> Board:
    return GameGenerator.shuffle(3, rng=random.Random(seed))


# -- helpers ------------------------------------------------------------------


def _assert_solve(board: Board) -> list[Tile]:
    """Solve the board and verify the returned moves reach the goal state."""
    assert is_solvable(board)

    moves = Solver.solve(board)

    # ---- move-list sanity ---------------------------------------------------
    assert isinstance(moves, list), "solve() must return a list of Tile"
    assert len(moves) > 0, f"Unsolved board returned 0 moves ({board.tiles})"
    assert all(isinstance(m, Tile) for m in moves), "Every element must be a Tile"

    # ---- replay via the real game engine and check win ----------------------
    game = GamePlay.from_board(board)
    for i, tile in enumerate(moves):
        blank_before = game.state.board.blank_index
        assert tile.index == blank_before, (
            f"Move {i} ({tile}) does not land on the blank at {blank_before}"
        )
        game.apply(tile)
        assert game.state.board.tiles[tile.index] == tile.value

    assert game.is_won, f"Board not solved after {len(moves)} moves ({board.tiles})"
    return moves


# -- tests --------------------------------------------------------------------


def test_solved_board_needs_no_moves() -> None:
    assert Solver.solve(Board.from_flat(SOLVED)) == []


def test_one_slide_from_goal() -> None:
    moves = Solver.solve(Board.from_flat(ONE_SLIDE))

    assert moves == [Tile(value=15, index=14)]
    assert replay(Board.from_flat(ONE_SLIDE), moves).is_solved()


def test_blank_left_of_14_takes_two_slides() -> None:
    board = Board.from_flat(BLANK_NEXT_TO_14)

    moves = Solver.solve(board)

    assert moves == [Tile(value=14, index=13), Tile(value=15, index=14)]
    assert replay(board, moves).is_solved()


def test_moves_record_the_tile_that_arrived() -> None:
    board = _scrambled_4x4(seed=3, steps=12)
    current = board
    for tile in Solver.solve(board):
        moved_from = current.index_of(tile.value)
        assert current.blank_index == tile.index
        current = current.swap(moved_from)
        assert current.tiles[tile.index] == tile.value
    assert current.is_solved()


@pytest.mark.parametrize("seed", range(8), ids=lambda s: f"4x4-seed{s}")
def test_solve_scrambled_4x4(seed: int) -> None:
    _assert_solve(_scrambled_4x4(seed))


@pytest.mark.parametrize("seed", range(8), ids=lambda s: f"3x3-seed{s}")
def test_solve_shuffled_3x3(seed: int) -> None:
    _assert_solve(_shuffled_3x3(seed))


def test_blank_in_first_column_never_wraps() -> None:
    # Blank at slot 4 (row 1, col 0); slot 3 ends row 0 and is not adjacent.
    board = Board.from_flat([1, 2, 3, 4, 16, 5, 6, 8, 9, 10, 7, 11, 13, 14, 15, 12])
    moves = _assert_solve(board)
    assert moves[0].value != 4


def test_search_reports_statistics() -> None:
    result = Solver.search(_scrambled_4x4(seed=1, steps=15))

    assert result.moves
    assert result.stats.expanded >= len(result.moves)
    assert result.stats.generated >= result.stats.expanded
    assert result.stats.peak_frontier > 0
    assert result.stats.elapsed >= 0.0


def test_hint_returns_first_move() -> None:
    board = _scrambled_4x4(seed=5, steps=10)
    assert Solver.hint(board) == Solver.solve(board)[0]


def test_hint_is_none_for_solved_and_unsolvable() -> None:
    assert Solver.hint(Board.from_flat(SOLVED)) is None

    unsolvable = Board.from_flat([2, 1] + SOLVED[2:])
    assert Solver.hint(unsolvable) is None


def test_replay_rejects_non_adjacent_move() -> None:
    board = Board.from_flat(SOLVED)
    with pytest.raises(IllegalMoveError):
        replay(board, [Tile(value=1, index=15)])


def test_replay_rejects_move_away_from_blank() -> None:
    board = Board.from_flat(ONE_SLIDE)
    # 12 is adjacent to slot 15 but the blank sits at slot 14.
    with pytest.raises(IllegalMoveError):
        replay(board, [Tile(value=12, index=15)])
