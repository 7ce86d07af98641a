"""Distance estimates used to order the A* frontier."""

from __future__ import annotations

from collections.abc import Sequence


def manhattan(tiles: Sequence[int], size: int = 4) -> int:
    """Sum of row and column offsets of every tile from its goal slot."""
    blank = size * size
    distance = 0
    for i, v in enumerate(tiles):
        if v == blank:
            continue
        goal = v - 1
        distance += abs(i // size - goal // size) + abs(i % size - goal % size)
    return distance


def linear_conflict(tiles: Sequence[int], size: int = 4) -> int:
    """Extra cost for tiles blocking each other inside their goal line.

    For each row (column) only tiles whose goal is that row (column) are
    scanned, in slot order.  A tile that is not larger than every such tile
    before it costs 2.
    """
    blank = size * size
    conflict = 0
    for i in range(size):
        max_in_row = -1
        max_in_col = -1
        for j in range(size):
            v = tiles[i * size + j]
            if v != blank and (v - 1) // size == i:
                if v > max_in_row:
                    max_in_row = v
                else:
                    conflict += 2

            v = tiles[j * size + i]
            if v != blank and (v - 1) % size == i:
                if v > max_in_col:
                    max_in_col = v
                else:
                    conflict += 2
    return conflict


def heuristic(tiles: Sequence[int], size: int = 4) -> int:
    """Manhattan distance plus linear conflict; zero only when solved."""
    return manhattan(tiles, size) + linear_conflict(tiles, size)
