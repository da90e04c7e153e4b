# kp_solvers/solvers/classic/dp_solver.py
import time
from typing import Dict, Any, Sequence

from kp_solvers.items import Item
from kp_solvers.solvers.interface import SolverInterface
from kp_solvers.solvers.classic.algorithms import BRUTE_FORCE_MAX_N, knapsack_01, brute_force_01


class DPSolver2D(SolverInterface):
    """
    An exact solver for the 0-1 Knapsack Problem using a 2D Dynamic Programming table.
    The chosen items are recovered by walking the table backwards.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "0/1 DP"

    def solve(self, capacity: int, items: Sequence[Item]) -> Dict[str, Any]:
        start_time = time.perf_counter()
        result = knapsack_01(capacity, items)
        end_time = time.perf_counter()

        return {
            "value": result.value,
            "time": end_time - start_time,
            "solution": result,
        }


class BruteForceSolver(SolverInterface):
    """
    Reference solver for the 0-1 Knapsack Problem that enumerates every subset.
    Only usable on small instances; larger ones are skipped.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Brute Force"
        self.max_n = min(self.config.get("max_n", 15), BRUTE_FORCE_MAX_N)

    def accepts(self, items: Sequence[Item]) -> bool:
        return len(items) <= self.max_n

    def solve(self, capacity: int, items: Sequence[Item]) -> Dict[str, Any]:
        start_time = time.perf_counter()
        result = brute_force_01(capacity, items)
        end_time = time.perf_counter()

        return {
            "value": result.value,
            "time": end_time - start_time,
            "solution": result,
        }
