# kp_solvers/solvers/classic/greedy_solver.py
import time
from typing import Dict, Any, Sequence

from kp_solvers.items import Item
from kp_solvers.solvers.interface import SolverInterface
from kp_solvers.solvers.classic.algorithms import fractional_knapsack


class FractionalGreedySolver(SolverInterface):
    """
    An exact solver for the Fractional Knapsack Problem. Items are taken in
    descending value-to-weight density and the last one may be split.
    Its value is an upper bound on the 0-1 optimum for the same capacity.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Fractional Greedy"

    def solve(self, capacity: float, items: Sequence[Item]) -> Dict[str, Any]:
        start_time = time.perf_counter()
        result = fractional_knapsack(capacity, items)
        end_time = time.perf_counter()

        return {
            "value": result.value,
            "time": end_time - start_time,
            "solution": result,
        }
