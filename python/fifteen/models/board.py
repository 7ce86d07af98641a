"""Board model for the fifteen puzzle."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of ``1..size*size``."""


class IllegalMoveError(ValueError):
    """Raised when a replayed move is not adjacent to the blank."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Tile:
    """A tile identified by its permanent ``value`` and its slot ``index``."""

    value: int
    index: int

    def to_dict(self) -> dict[str, int]:
        return {"value": self.value, "index": self.index}


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the puzzle grid.

    Tiles are stored flat in row-major order.  The highest value
    (``size * size``, i.e. 16 on a 4×4 board) represents the blank.
    """

    size: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int], size: int | None = None) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 15])
        """
        tiles = tuple(int(v) for v in flat)
        if size is None:
            size = math.isqrt(len(tiles))
        cls.validate(tiles, size)
        return cls(size=size, tiles=tiles)

    @classmethod
    def solved(cls, size: int = 4) -> Board:
        return cls(size=size, tiles=tuple(range(1, size * size + 1)))

    @staticmethod
    def validate(tiles: Sequence[int], size: int) -> None:
        """Raise :class:`InvalidBoardError` unless *tiles* is a valid board."""
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        cells = size * size
        if len(tiles) != cells:
            raise InvalidBoardError(
                f"Expected {cells} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        if cells not in tiles:
            raise InvalidBoardError(f"Missing blank marker {cells}.")
        if len(set(tiles)) != cells:
            raise InvalidBoardError("Tile values must be distinct.")
        out_of_range = [v for v in tiles if not 1 <= v <= cells]
        if out_of_range:
            raise InvalidBoardError(
                f"Tile values must lie in 1..{cells}, got {out_of_range}."
            )

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        return self.size * self.size

    @property
    def blank_index(self) -> int:
        return self.tiles.index(self.blank)

    def index_of(self, value: int) -> int:
        return self.tiles.index(value)

    def row_col(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def key(self) -> tuple[int, ...]:
        """Canonical hashable fingerprint of the board."""
        return self.tiles

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(v == i + 1 for i, v in enumerate(self.tiles))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        return self.tiles[index] == index + 1

    def neighbors(self, index: int) -> list[int]:
        """Indices orthogonally adjacent to *index*, in left/right/up/down order."""
        return neighbor_slots(index, self.size)

    def is_adjacent(self, a: int, b: int) -> bool:
        ra, ca = divmod(a, self.size)
        rb, cb = divmod(b, self.size)
        return abs(ra - rb) + abs(ca - cb) == 1

    # -- transitions ----------------------------------------------------------

    def swap(self, index: int) -> Board:
        """Return a new board with the blank swapped with the tile at *index*."""
        blank_index = self.blank_index
        tiles = list(self.tiles)
        tiles[blank_index], tiles[index] = tiles[index], tiles[blank_index]
        return Board(size=self.size, tiles=tuple(tiles))

    def apply(self, tile: Tile) -> Board:
        """Slide *tile* into the blank and return the resulting board.

        *tile* follows the solver's recording convention: ``tile.value`` is
        the tile being moved and ``tile.index`` is the slot it arrives in,
        which must be the blank's current slot.
        """
        if tile.value not in self.tiles:
            raise IllegalMoveError(f"No tile with value {tile.value}.")
        position = self.index_of(tile.value)
        blank_index = self.blank_index
        if blank_index != tile.index or not self.is_adjacent(position, blank_index):
            raise IllegalMoveError(
                f"Tile {tile.value} at {position} cannot slide into {tile.index} "
                f"(blank is at {blank_index})."
            )
        return self.swap(position)

    def to_rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]


def neighbor_slots(index: int, size: int) -> list[int]:
    """Slots adjacent to *index* on a ``size``-wide grid: left, right, up, down.

    Left and right never wrap across a row boundary.
    """
    row, col = divmod(index, size)
    out: list[int] = []
    if col > 0:
        out.append(index - 1)
    if col < size - 1:
        out.append(index + 1)
    if row > 0:
        out.append(index - size)
    if row < size - 1:
        out.append(index + size)
    return out
