"""Core gameplay logic — shuffles, processes moves and replays hints."""

from __future__ import annotations

import logging
import random
import threading
from concurrent.futures import Future
from functools import partial

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.engine.gamesolver.solver import Solver
from fifteen.engine.gamestate import GameState
from fifteen.engine.worker import SolverWorker
from fifteen.models.board import Board, Direction, Tile
from fifteen.settings import Settings

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    When a :class:`SolverWorker` is attached, every new solvable board is
    sent to it and the returned move list becomes the hint sequence.  A
    result that arrives after the board was reshuffled or moved by hand is
    ignored.
    """

    def __init__(
        self,
        size: int = 4,
        worker: SolverWorker | None = None,
        unsolvable_probability: float = 0.1,
        rng: random.Random | None = None,
    ) -> None:
        self._setup(size, worker, unsolvable_probability, rng)
        self.reset()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        worker: SolverWorker | None = None,
        rng: random.Random | None = None,
    ) -> GamePlay:
        return cls(
            size=settings.size,
            worker=worker,
            unsolvable_probability=settings.unsolvable_probability,
            rng=rng,
        )

    @classmethod
    def from_board(
        cls, board: Board, worker: SolverWorker | None = None
    ) -> GamePlay:
        """Create a game session from an existing board."""
        obj = cls.__new__(cls)
        obj._setup(board.size, worker, 0.0, None)
        obj._start(board)
        return obj

    def _setup(
        self,
        size: int,
        worker: SolverWorker | None,
        unsolvable_probability: float,
        rng: random.Random | None,
    ) -> None:
        self.size = size
        self.worker = worker
        self.unsolvable_probability = unsolvable_probability
        self._rng = rng or random.Random()
        self._epoch = 0
        self._lock = threading.Lock()

    # -- lifecycle ------------------------------------------------------------

    def reset(self, force_unsolvable: bool | None = None) -> bool:
        """Shuffle a new board and return whether it is solvable.

        Unless *force_unsolvable* is given, an unsolvable board is dealt
        with probability ``unsolvable_probability``.
        """
        if force_unsolvable is None:
            force_unsolvable = self._rng.random() < self.unsolvable_probability
        board = GameGenerator.shuffle(
            self.size, force_unsolvable=force_unsolvable, rng=self._rng
        )
        return self._start(board)

    def _start(self, board: Board) -> bool:
        solvable = is_solvable(board)
        with self._lock:
            self.state = GameState(board, solvable=solvable)
            self._epoch += 1
        if not solvable:
            logger.info("Dealt an unsolvable board: %s", board.tiles)
            return False
        if self.worker is not None:
            self.request_solution()
        return True

    # -- solving --------------------------------------------------------------

    def request_solution(self) -> Future[list[Tile]] | None:
        """Compute hints for the live board.

        Any hints still pending are dropped first.  With a worker the
        search runs in the background and a future is returned; without
        one it runs inline and ``None`` is returned.
        """
        with self._lock:
            self._epoch += 1
            epoch = self._epoch
            state = self.state
            state.set_solution([])
        if not state.solvable:
            return None

        if self.worker is None:
            self._adopt(epoch, state, Solver.solve(state.board))
            return None
        return self.worker.submit(state.board, partial(self._adopt, epoch, state))

    def _adopt(self, epoch: int, state: GameState, moves: list[Tile]) -> None:
        # Runs on an executor thread when a worker is attached.
        with self._lock:
            if epoch != self._epoch or state is not self.state:
                logger.debug("Ignoring solution for an outdated board")
                return
            state.set_solution(moves)

    def help_me(self) -> Tile | None:
        """Play the next hint move; return it, or ``None`` when none remain."""
        with self._lock:
            tile = self.state.next_hint()
            if tile is None:
                return None
            self._slide(tile)
            self.state.solution_step += 1
        return tile

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        br, bc = board.row_col(board.blank_index)

        # The offset points to the tile that will slide into the blank.
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return False
        return self.move_tile(tr * board.size + tc)

    def move_tile(self, index: int) -> bool:
        """Move the tile at *index* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.  A manual move invalidates any pending hints.
        """
        with self._lock:
            board = self.state.board
            if not 0 <= index < len(board.tiles):
                return False
            if not board.is_adjacent(index, board.blank_index):
                return False

            self.state.board = board.swap(index)
            self.state.increment_moves()
            self._invalidate_hints()
        return True

    def apply(self, tile: Tile) -> None:
        """Replay one solver move against the live board.

        Like a manual move, this invalidates any pending hints.  Raises
        :class:`~fifteen.models.board.IllegalMoveError` if the tile is not
        adjacent to the blank or the blank is not at ``tile.index``.
        """
        with self._lock:
            self._slide(tile)
            self._invalidate_hints()

    def _slide(self, tile: Tile) -> None:
        self.state.board = self.state.board.apply(tile)
        self.state.increment_moves()

    def _invalidate_hints(self) -> None:
        self._epoch += 1
        self.state.set_solution([])

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
