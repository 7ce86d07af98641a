from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.engine.gamesolver.solver import SearchResult, Solver, replay

__all__ = ["SearchResult", "Solver", "is_solvable", "replay"]
