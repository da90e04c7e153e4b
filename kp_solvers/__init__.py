# -*- coding: utf-8 -*-
"""
Exact solvers for the 0/1 and the fractional knapsack problems.
"""

from .errors import (
    KnapsackError,
    InvalidCapacityError,
    InvalidItemError,
    InvalidCountError,
    InstanceFormatError,
)
from .items import Item, make_items
from .solvers.results import ZeroOneResult, FractionalChoice, FractionalResult
from .solvers.classic.algorithms import knapsack_01, fractional_knapsack, brute_force_01

__version__ = "0.1.0"

__all__ = [
    # errors
    "KnapsackError",
    "InvalidCapacityError",
    "InvalidItemError",
    "InvalidCountError",
    "InstanceFormatError",
    # models
    "Item",
    "make_items",
    "ZeroOneResult",
    "FractionalChoice",
    "FractionalResult",
    # solvers
    "knapsack_01",
    "fractional_knapsack",
    "brute_force_01",
]
