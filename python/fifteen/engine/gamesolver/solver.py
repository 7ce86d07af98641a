"""A* solver for the fifteen puzzle."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from time import perf_counter

from fifteen.engine.gamesolver.heuristics import heuristic
from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.models.board import Board, Tile, neighbor_slots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchNode:
    """One frontier entry.  The move history is the chain of parents."""

    state: tuple[int, ...]
    cost: int
    priority: int
    move: Tile | None = None
    parent: SearchNode | None = None

    def moves(self) -> list[Tile]:
        out: list[Tile] = []
        node: SearchNode | None = self
        while node is not None and node.move is not None:
            out.append(node.move)
            node = node.parent
        out.reverse()
        return out


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0


@dataclass
class SearchResult:
    moves: list[Tile]
    stats: SearchStats = field(default_factory=SearchStats)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(board: Board) -> SearchResult:
        """Run A* from *board* and return the moves with search statistics.

        *board* must be solvable; this is not checked here.  Each recorded
        move is ``Tile(value, index)`` where ``index`` is the slot the
        blank occupied before the move and ``value`` the tile that slid
        into it.
        """
        size = board.size
        blank = board.blank
        stats = SearchStats()
        t0 = perf_counter()

        frontier: list[tuple[int, int, SearchNode]] = []
        counter = itertools.count()

        start = SearchNode(
            state=board.key(), cost=0, priority=heuristic(board.tiles, size)
        )
        heapq.heappush(frontier, (start.priority, next(counter), start))
        visited: set[tuple[int, ...]] = {start.state}

        while frontier:
            stats.peak_frontier = max(stats.peak_frontier, len(frontier))
            _, _, node = heapq.heappop(frontier)

            if heuristic(node.state, size) == 0:
                stats.elapsed = perf_counter() - t0
                moves = node.moves()
                logger.debug(
                    "Solved in %d moves (expanded=%d generated=%d peak=%d %.3fs)",
                    len(moves),
                    stats.expanded,
                    stats.generated,
                    stats.peak_frontier,
                    stats.elapsed,
                )
                return SearchResult(moves=moves, stats=stats)

            stats.expanded += 1
            empty_index = node.state.index(blank)
            for move_index in neighbor_slots(empty_index, size):
                new_state = list(node.state)
                new_state[empty_index], new_state[move_index] = (
                    new_state[move_index],
                    new_state[empty_index],
                )
                key = tuple(new_state)
                if key in visited:
                    continue
                visited.add(key)
                stats.generated += 1

                cost = node.cost + 1
                child = SearchNode(
                    state=key,
                    cost=cost,
                    priority=cost + heuristic(key, size),
                    move=Tile(value=key[empty_index], index=empty_index),
                    parent=node,
                )
                heapq.heappush(frontier, (child.priority, next(counter), child))

        stats.elapsed = perf_counter() - t0
        logger.warning(
            "Frontier exhausted after %d expansions without reaching the goal",
            stats.expanded,
        )
        return SearchResult(moves=[], stats=stats)

    @staticmethod
    def solve(board: Board) -> list[Tile]:
        """Return a move sequence that solves *board* (``[]`` if already solved)."""
        return Solver.search(board).moves

    @staticmethod
    def hint(board: Board) -> Tile | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        if board.is_solved() or not is_solvable(board):
            return None

        moves = Solver.solve(board)
        return moves[0] if moves else None


def replay(board: Board, moves: Iterable[Tile]) -> Board:
    """Apply *moves* one at a time and return the final board.

    Raises :class:`~fifteen.models.board.IllegalMoveError` on the first
    move that is not adjacent to the blank.
    """
    for tile in moves:
        board = board.apply(tile)
    return board

