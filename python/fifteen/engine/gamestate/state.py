"""Per-board session state: the live board, the move count, the clock and hints."""

from __future__ import annotations

import time

from fifteen.models.board import Board, Tile


class GameState:
    """State for one dealt board.

    A new ``GameState`` is created on every shuffle, so anything that
    refers to an old one (e.g. a search still running) can tell it is stale.
    """

    def __init__(self, board: Board, solvable: bool = True) -> None:
        self.board = board
        self.solvable = solvable
        self.moves = 0
        self.solution: list[Tile] = []
        self.solution_step = 0
        self._clock_started = time.time()
        self._clock_banked = 0.0
        self._paused = False

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    def increment_moves(self) -> None:
        self.moves += 1

    # -- hints ----------------------------------------------------------------

    def set_solution(self, moves: list[Tile]) -> None:
        """Replace the pending hints and rewind to the first one."""
        self.solution = list(moves)
        self.solution_step = 0

    def next_hint(self) -> Tile | None:
        if self.hints_remaining > 0:
            return self.solution[self.solution_step]
        return None

    @property
    def hints_remaining(self) -> int:
        return len(self.solution) - self.solution_step

    # -- clock ----------------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        """Seconds played, not counting time spent paused."""
        if self._paused:
            return self._clock_banked
        return self._clock_banked + time.time() - self._clock_started

    def pause(self) -> None:
        if not self._paused:
            self._clock_banked = self.elapsed_time
            self._paused = True

    def resume(self) -> None:
        if self._paused:
            self._clock_started = time.time()
            self._paused = False
