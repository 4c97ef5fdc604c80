from npuzzle.engine.solver.config import SolverConfig
from npuzzle.engine.solver.node import Frontier, SearchNode
from npuzzle.engine.solver.solver import SearchStats, Solver

__all__ = ["Frontier", "SearchNode", "SearchStats", "Solver", "SolverConfig"]
