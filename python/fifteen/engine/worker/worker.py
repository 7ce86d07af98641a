"""Background solver worker.

Runs the A* search on an executor so the caller (a UI loop, the CLI) is
never blocked.  Each submission receives exactly one result; a newer
submission supersedes older ones and their results are discarded when they
eventually arrive.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial

from fifteen.engine.gamesolver.solver import Solver
from fifteen.models.board import Board, Tile

logger = logging.getLogger(__name__)

SolutionCallback = Callable[[list[Tile]], None]


def _solve(board: Board) -> list[Tile]:
    # Module-level so it can be pickled for a process pool.
    return Solver.solve(board)


class SolverWorker:
    """Submits searches to a thread or process pool.

    Example::

        with SolverWorker() as worker:
            worker.submit(board, on_solution)
            ...
            moves = worker.result()

    *callback* runs on an executor thread, not on the submitting thread.
    """

    def __init__(self, executor: str = "thread", max_workers: int = 1) -> None:
        self._executor: Executor
        if executor == "thread":
            self._executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="fifteen-solver"
            )
        elif executor == "process":
            self._executor = ProcessPoolExecutor(max_workers=max_workers)
        else:
            raise ValueError(f"Unknown executor {executor!r}")

        self._lock = threading.Lock()
        self._generation = 0
        self._latest: Future[list[Tile]] | None = None

    # -- submission -----------------------------------------------------------

    def submit(
        self, board: Board, callback: SolutionCallback | None = None
    ) -> Future[list[Tile]]:
        """Start solving *board*; it must already be known to be solvable."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            previous = self._latest
            future = self._executor.submit(_solve, board)
            self._latest = future

        if previous is not None and previous.cancel():
            logger.debug("Cancelled queued search superseded by #%d", generation)

        logger.debug("Submitted search #%d for %s", generation, board.tiles)
        future.add_done_callback(partial(self._deliver, generation, callback))
        return future

    def _deliver(
        self,
        generation: int,
        callback: SolutionCallback | None,
        future: Future[list[Tile]],
    ) -> None:
        if future.cancelled():
            return

        exc = future.exception()
        if exc is not None:
            logger.error("Search #%d failed", generation, exc_info=exc)
            return

        with self._lock:
            current = generation == self._generation
        if not current:
            logger.debug("Discarding stale result of search #%d", generation)
            return

        moves = future.result()
        logger.debug("Search #%d finished with %d moves", generation, len(moves))
        if callback is not None:
            callback(moves)

    # -- queries --------------------------------------------------------------

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._latest is not None and not self._latest.done()

    def result(self, timeout: float | None = None) -> list[Tile]:
        """Block until the latest submission finishes and return its moves."""
        with self._lock:
            future = self._latest
        if future is None:
            raise RuntimeError("No search has been submitted.")
        return future.result(timeout=timeout)

    # -- lifecycle ------------------------------------------------------------

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=True)

    def __enter__(self) -> SolverWorker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
