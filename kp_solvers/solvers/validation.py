# kp_solvers/solvers/validation.py
# -*- coding: utf-8 -*-

'''
Eager precondition checks shared by the solvers. Each check raises before any
table is allocated or any item is sorted.
'''

import math
import numbers
from typing import Optional, Sequence

from kp_solvers.errors import InvalidCapacityError, InvalidCountError, InvalidItemError
from kp_solvers.items import Item, _is_int


def validate_integer_capacity(capacity) -> int:
    """Capacity for the DP solvers: a nonnegative integer."""
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise InvalidCapacityError(f"Capacity must be an integer, got {capacity!r}.")
    if capacity < 0:
        raise InvalidCapacityError(f"Capacity must be >= 0, got {capacity}.")
    return int(capacity)


def validate_real_capacity(capacity) -> float:
    """Capacity for the fractional solver: a finite nonnegative real, widened to float."""
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Real):
        raise InvalidCapacityError(f"Capacity must be a real number, got {capacity!r}.")
    try:
        capacity = float(capacity)
    except OverflowError as e:
        raise InvalidCapacityError("Capacity is too large to use as a real number.") from e
    if not math.isfinite(capacity):
        raise InvalidCapacityError(f"Capacity must be finite, got {capacity}.")
    if capacity < 0:
        raise InvalidCapacityError(f"Capacity must be >= 0, got {capacity}.")
    return capacity


def validate_items(items: Sequence[Item], count: Optional[int] = None) -> None:
    """
    Checks every item and, when given, the explicit item count.

    Item already validates itself on construction; the loop here also covers
    duck-typed item objects that never went through Item.__post_init__.
    """
    if count is not None:
        if count < 0:
            raise InvalidCountError(f"Item count must be >= 0, got {count}.")
        if count != len(items):
            raise InvalidCountError(f"Item count {count} does not match the {len(items)} items supplied.")

    for position, item in enumerate(items):
        if not _is_int(item.weight) or not _is_int(item.value):
            raise InvalidItemError(f"Item at position {position} must have integer value and weight, "
                                   f"got value={item.value!r}, weight={item.weight!r}.")
        if item.weight <= 0:
            raise InvalidItemError(f"Item at position {position} has non-positive weight {item.weight}.")
        if item.value < 0:
            raise InvalidItemError(f"Item at position {position} has negative value {item.value}.")
