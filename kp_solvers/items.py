# kp_solvers/items.py
# -*- coding: utf-8 -*-

'''
Item model shared by every solver.
'''

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from kp_solvers.errors import InvalidItemError


def _is_int(x) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


@dataclass(frozen=True)
class Item:
    """
    An item that can be put in the knapsack.

    Attributes
    ----------
    value : int
        Nonnegative value gained when the item is taken.
    weight : int
        Strictly positive weight (capacity consumption).
    index : int
        1-based position in the original input, used for reporting only.
    """
    value: int
    weight: int
    index: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or not _is_int(self.weight):
            raise InvalidItemError(
                f"Item[{self.index}] value and weight must be integers, "
                f"got value={self.value!r}, weight={self.weight!r}."
            )
        if self.value < 0:
            raise InvalidItemError(f"Item[{self.index}] value must be >= 0, got {self.value}.")
        if self.weight <= 0:
            raise InvalidItemError(f"Item[{self.index}] weight must be > 0, got {self.weight}.")
        if not _is_int(self.index) or self.index < 1:
            raise InvalidItemError(f"Item index must be a 1-based integer, got {self.index!r}.")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def make_items(pairs: Iterable[Tuple[int, int]]) -> List[Item]:
    """Builds items from (value, weight) pairs, numbering them from 1 in input order."""
    return [Item(value=value, weight=weight, index=i) for i, (value, weight) in enumerate(pairs, start=1)]
