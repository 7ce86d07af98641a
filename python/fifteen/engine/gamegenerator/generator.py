"""Generates fifteen puzzle boards."""

from __future__ import annotations

import logging
import random

from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates shuffled boards, either uniformly at random or by random walk."""

    @staticmethod
    def solved(size: int = 4) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(
        size: int = 4,
        force_unsolvable: bool = False,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a uniformly shuffled board.

        Permutations are drawn until one is solvable, or unsolvable when
        *force_unsolvable* is set.
        """
        rng = rng or random.Random()
        values = list(range(1, size * size + 1))
        attempts = 0
        while True:
            attempts += 1
            rng.shuffle(values)
            board = Board(size=size, tiles=tuple(values))
            if is_solvable(board) != force_unsolvable:
                break
        logger.debug(
            "Shuffled %s board after %d draw(s): %s",
            "unsolvable" if force_unsolvable else "solvable",
            attempts,
            board.tiles,
        )
        return board

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random legal slides.

        The walk never undoes the previous slide, so short walks stay
        non-trivial.  The result is solvable whenever *board* is.
        """
        rng = rng or random.Random()
        prev_blank: int | None = None

        for _ in range(steps):
            blank_index = board.blank_index
            neighbors = board.neighbors(blank_index)
            if prev_blank in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_blank)
            target = rng.choice(neighbors)
            prev_blank = blank_index
            board = board.swap(target)
        return board

    @staticmethod
    def generate(
        size: int = 4, steps: int | None = None, rng: random.Random | None = None
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size.

        With *steps* the board is a random walk of that length from the
        goal; otherwise it is a uniform shuffle.
        """
        if steps is not None and steps < 1:
            raise ValueError(f"steps must be positive, got {steps}.")
        rng = rng or random.Random()
        while True:
            if steps is None:
                board = GameGenerator.shuffle(size, rng=rng)
            else:
                board = GameGenerator.scramble(Board.solved(size), steps, rng)
            # Ensure the board is not already solved
            if not board.is_solved():
                return board
