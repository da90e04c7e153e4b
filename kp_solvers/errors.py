# kp_solvers/errors.py
# -*- coding: utf-8 -*-

'''
Exceptions raised by the knapsack solvers and the instance readers.
Every error carries a `kind` naming the class of invalid input.
'''


class KnapsackError(ValueError):
    """Base class for all invalid-input errors of this package."""
    kind = "KnapsackError"


class InvalidCapacityError(KnapsackError):
    """Raised when the knapsack capacity is negative or not a usable number."""
    kind = "InvalidCapacity"


class InvalidItemError(KnapsackError):
    """Raised when an item has a non-positive weight or a negative value."""
    kind = "InvalidItem"


class InvalidCountError(KnapsackError):
    """Raised when an explicit item count is negative or inconsistent."""
    kind = "InvalidCount"


class InstanceFormatError(KnapsackError):
    """Raised when an instance file or stream cannot be parsed."""
    kind = "InstanceFormat"
