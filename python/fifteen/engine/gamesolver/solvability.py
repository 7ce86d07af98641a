"""Closed-form solvability check for sliding puzzles."""

from __future__ import annotations

from collections.abc import Sequence

from fifteen.models.board import Board


def count_inversions(tiles: Sequence[int], blank: int) -> int:
    """Count out-of-order pairs of non-blank tiles in row-major order."""
    inversions = 0
    for i in range(len(tiles)):
        if tiles[i] == blank:
            continue
        for j in range(i + 1, len(tiles)):
            if tiles[j] != blank and tiles[i] > tiles[j]:
                inversions += 1
    return inversions


def blank_row_from_bottom(tiles: Sequence[int], size: int) -> int:
    """Row of the blank counted from the bottom, 1-indexed."""
    return size - tiles.index(size * size) // size


def is_solvable(state: Board | Sequence[int]) -> bool:
    """Return True if *state* can reach the goal state by legal slides.

    Each slide changes the inversion parity and, on even-width boards, the
    blank row parity in lockstep, so the check is exact.  Raises
    :class:`~fifteen.models.board.InvalidBoardError` for malformed input.
    """
    board = state if isinstance(state, Board) else Board.from_flat(state)
    inversions = count_inversions(board.tiles, board.blank)

    if board.size % 2 == 1:
        return inversions % 2 == 0

    if blank_row_from_bottom(board.tiles, board.size) % 2 == 0:
        return inversions % 2 == 1
    return inversions % 2 == 0
