from __future__ import annotations

import pytest

from fifteen.engine.gamesolver.heuristics import heuristic, linear_conflict, manhattan

SOLVED = list(range(1, 17))


def test_solved_board_scores_zero() -> None:
    assert manhattan(SOLVED) == 0
    assert linear_conflict(SOLVED) == 0
    assert heuristic(SOLVED) == 0
    assert heuristic(list(range(1, 10)), size=3) == 0


def test_blank_is_not_counted() -> None:
    tiles = SOLVED[:14] + [16, 15]
    assert manhattan(tiles) == 1
    assert linear_conflict(tiles) == 0
    assert heuristic(tiles) == 1


@pytest.mark.parametrize(
    ("tiles", "expected_manhattan", "expected_conflict"),
    [
        # 1 and 2 swapped inside their goal row
        ([2, 1] + SOLVED[2:], 2, 2),
        # 1 and 5 swapped inside their goal column
        ([5, 2, 3, 4, 1] + SOLVED[5:], 2, 2),
        # 3, 2, 1 reversed: 2 and 1 are each below the running max
        ([3, 2, 1] + SOLVED[3:], 4, 4),
        # misplaced tiles that leave every line in order
        ([5, 1, 3, 4, 2] + SOLVED[5:], 4, 0),
    ],
    ids=["row-pair", "column-pair", "row-triple", "no-conflict"],
)
def test_known_values(
    tiles: list[int], expected_manhattan: int, expected_conflict: int
) -> None:
    assert manhattan(tiles) == expected_manhattan
    assert linear_conflict(tiles) == expected_conflict
    assert heuristic(tiles) == expected_manhattan + expected_conflict
