from fifteen.engine.worker.worker import SolverWorker

__all__ = ["SolverWorker"]
