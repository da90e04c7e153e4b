# kp_solvers/solvers/results.py
# -*- coding: utf-8 -*-

'''
Result models returned by the solvers.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from kp_solvers.items import Item


@dataclass(frozen=True)
class ZeroOneResult:
    """
    Outcome of a 0/1 knapsack solve.

    Attributes
    ----------
    value : int
        Optimal total value.
    chosen : list[bool]
        One flag per input position (not per Item.index); True if taken.
    """
    value: int
    chosen: List[bool] = field(default_factory=list)

    @property
    def included(self) -> List[int]:
        """Positions of the chosen items, ascending."""
        return [i for i, taken in enumerate(self.chosen) if taken]

    def selected_items(self, items: Sequence[Item]) -> List[Item]:
        return [items[i] for i in self.included]

    def total_weight(self, items: Sequence[Item]) -> int:
        return sum(items[i].weight for i in self.included)


@dataclass(frozen=True)
class FractionalChoice:
    """How much of a single item the greedy fill took; fraction lies in (0, 1]."""
    item: Item
    fraction: float

    @property
    def value(self) -> float:
        return self.item.value * self.fraction

    @property
    def weight(self) -> float:
        return self.item.weight * self.fraction


@dataclass(frozen=True)
class FractionalResult:
    """
    Outcome of a fractional knapsack solve.

    Attributes
    ----------
    value : float
        Optimal total value.
    choices : list[FractionalChoice]
        Items in the order they were consumed (descending value/weight ratio).
        Only the last choice may be partial.
    """
    value: float
    choices: List[FractionalChoice] = field(default_factory=list)

    @property
    def partial_choice(self):
        """The split item, or None when every recorded item was taken whole."""
        if self.choices and self.choices[-1].fraction < 1.0:
            return self.choices[-1]
        return None
