# kp_solvers/solvers/classic/algorithms.py
# -*- coding: utf-8 -*-


'''
This module provides the exact algorithms for the two knapsack variants.
Algorithms list:
- 0/1 Knapsack Problem using a 2D Dynamic Programming (DP) table, with reconstruction of the chosen items.
- Fractional Knapsack Problem using the greedy value/weight ratio strategy.
- Brute-force subset enumeration for 0/1 Knapsack, used as a correctness baseline on small instances.

All functions are pure: they never mutate the items they are given and keep no state between calls.
'''


# Library imports
import itertools
import logging
from typing import List, Sequence

from kp_solvers.errors import InvalidCountError
from kp_solvers.items import Item
from kp_solvers.solvers.results import FractionalChoice, FractionalResult, ZeroOneResult
from kp_solvers.solvers.validation import validate_integer_capacity, validate_items, validate_real_capacity

logger = logging.getLogger(__name__)

BRUTE_FORCE_MAX_N = 20


# Basic dynamic programming to solve the 0/1 knapsack problem
def knapsack_01(capacity: int, items: Sequence[Item]) -> ZeroOneResult:
    """
    Solves the 0/1 knapsack problem using a 2D DP array and walks the
    table backwards to recover which items were taken.

    Args:
        capacity (int): The maximum capacity of the knapsack, >= 0.
        items (Sequence[Item]): The items, in input order.

    Returns:
        ZeroOneResult: The optimal value and one inclusion flag per input position.

    Raises:
        InvalidCapacityError: capacity is negative or not an integer.
        InvalidItemError: an item has weight <= 0 or a negative value.
    """
    capacity = validate_integer_capacity(capacity)
    validate_items(items)

    n = len(items)
    # dp[i][w] stores the maximum value using the first 'i' items
    # with a knapsack capacity of 'w'.
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        current_weight = items[i - 1].weight
        current_value = items[i - 1].value
        previous, row = dp[i - 1], dp[i]

        for w in range(capacity + 1):
            if current_weight > w:
                # Item too heavy: cannot take it
                row[w] = previous[w]
            else:
                # Either skip or take this item
                row[w] = max(previous[w], current_value + previous[w - current_weight])

    # Reconstruction. Strict inequality: on a tie the item is left out.
    chosen = [False] * n
    w = capacity
    for i in range(n, 0, -1):
        if dp[i][w] != dp[i - 1][w]:
            chosen[i - 1] = True
            w -= items[i - 1].weight

    logger.debug(f"0/1 DP: n={n}, capacity={capacity}, value={dp[n][capacity]}, chosen={sum(chosen)}")
    return ZeroOneResult(value=dp[n][capacity], chosen=chosen)


def fractional_knapsack(capacity: float, items: Sequence[Item]) -> FractionalResult:
    """
    Solves the fractional knapsack problem greedily by value/weight ratio.

    Items with equal ratios keep their input order (the sort is stable).
    At most one item, the last one recorded, is split.

    Args:
        capacity (float): The maximum capacity of the knapsack, >= 0. Integers are widened.
        items (Sequence[Item]): The items, in input order.

    Returns:
        FractionalResult: The optimal value and the choices in consumption order.
    """
    capacity = validate_real_capacity(capacity)
    validate_items(items)

    ordered = sorted(items, key=lambda it: it.value / it.weight, reverse=True)

    remaining = capacity
    total_value = 0.0
    choices: List[FractionalChoice] = []

    # Take whole items or fractions until the knapsack is full
    for item in ordered:
        if remaining <= 0.0:
            break
        if item.weight <= remaining:
            remaining -= item.weight
            total_value += item.value
            choices.append(FractionalChoice(item=item, fraction=1.0))
        else:
            fraction = remaining / item.weight
            total_value += item.value * fraction
            choices.append(FractionalChoice(item=item, fraction=fraction))
            remaining = 0.0

    logger.debug(f"Fractional greedy: n={len(items)}, capacity={capacity}, value={total_value:.4f}, "
                 f"choices={len(choices)}")
    return FractionalResult(value=total_value, choices=choices)


def brute_force_01(capacity: int, items: Sequence[Item]) -> ZeroOneResult:
    """
    Enumerates every subset of the items and keeps the best feasible one.
    Exponential; refuses more than BRUTE_FORCE_MAX_N items.
    """
    capacity = validate_integer_capacity(capacity)
    validate_items(items)

    n = len(items)
    if n > BRUTE_FORCE_MAX_N:
        raise InvalidCountError(f"Brute force is limited to {BRUTE_FORCE_MAX_N} items, got {n}.")

    best_value = 0
    best_subset = ()
    for size in range(1, n + 1):
        for subset in itertools.combinations(range(n), size):
            weight = sum(items[i].weight for i in subset)
            if weight > capacity:
                continue
            value = sum(items[i].value for i in subset)
            if value > best_value:
                best_value = value
                best_subset = subset

    chosen = [i in best_subset for i in range(n)]
    return ZeroOneResult(value=best_value, chosen=chosen)
