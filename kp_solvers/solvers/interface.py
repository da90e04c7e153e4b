# kp_solvers/solvers/interface.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence

from kp_solvers.items import Item
from kp_solvers.utils.generator import load_instance_from_file


class SolverInterface(ABC):
    """
    Common shape of every solver used by the evaluation scripts.

    `solve` returns a dict with the keys:
        - "value": the objective value found
        - "time": wall-clock seconds spent in the algorithm
        - "solution": the typed result object (ZeroOneResult / FractionalResult)
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self.name = self.__class__.__name__

    @abstractmethod
    def solve(self, capacity, items: Sequence[Item]) -> Dict[str, Any]:
        raise NotImplementedError

    def solve_file(self, instance_path: str) -> Dict[str, Any]:
        """Loads a CSV instance and solves it."""
        capacity, items = load_instance_from_file(instance_path)
        return self.solve(capacity, items)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
