from backend.engine.gamesolver.solver import SearchNode, SolveResult, Solver, Strategy

__all__ = ["SearchNode", "SolveResult", "Solver", "Strategy"]
