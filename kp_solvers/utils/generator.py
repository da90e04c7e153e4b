# kp_solvers/utils/generator.py
# -*- coding: utf-8 -*-


'''
This module provides functions to generate knapsack instances and to read and write them.

Two on-disk formats are supported:
- plain text: first line 'n W', followed by n 'value weight' pairs separated by any whitespace.
- csv: first line 'n W', then a csv table with a 'value,weight' header row.
'''

import csv
import os
import random
import logging
from typing import List, Optional, TextIO, Tuple

from kp_solvers.errors import InstanceFormatError, InvalidCountError
from kp_solvers.items import Item, make_items

logger = logging.getLogger(__name__)

CORRELATIONS = ('uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum')


# Function to generate a knapsack instance with one constraint
def generate_knapsack_instance(
    n: int,
    correlation: str = 'uncorrelated',
    max_weight: int = 1000,
    max_value: int = 1000,
    capacity_ratio: float = 0.5,
    seed: Optional[int] = None
) -> Tuple[List[Tuple[int, int]], int]:

    """
    Generate an instance of the knapsack problem.

    Args:
        n (int): Number of items to generate.
        correlation (str): Type of correlation between item values and weights.
            Options: 'uncorrelated', 'weakly_correlated',
                    'strongly_correlated', 'subset_sum'.
        max_weight (int): Maximum weight for a single item.
        max_value (int): Maximum value for a single item (used when uncorrelated).
        capacity_ratio (float): Ratio of knapsack capacity to the total weight of all items (between 0.0 and 1.0).
        seed (int, optional): Seed for a private random generator, for reproducible instances.

    Returns:
        Tuple[List[Tuple[int, int]], int]:
            - A list of items, each represented as a tuple (value, weight).
            - The computed knapsack capacity.
    """

    if correlation not in CORRELATIONS:
        raise ValueError(f"Correlation type must be one of {', '.join(CORRELATIONS)}")
    if not (0.0 < capacity_ratio <= 1.0):
        raise ValueError("Capacity ratio must be between 0.0 and 1.0")
    if n < 0:
        raise InvalidCountError(f"Number of items must be >= 0, got {n}.")

    rng = random.Random(seed)
    items = []
    total_weight = 0

    for _ in range(n):
        weight = rng.randint(1, max_weight)

        if correlation == 'uncorrelated':
            value = rng.randint(1, max_value)
        elif correlation == 'weakly_correlated':
            # noise of about 25% of the maximum value
            noise = int(max_value / 4)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'strongly_correlated':
            # noise of about 10% of the maximum value
            noise = int(max_value / 10)
            value = max(1, weight + rng.randint(-noise, noise))
        else:
            # subset sum: value equals weight
            value = weight

        items.append((value, weight))
        total_weight += weight

    capacity = int(total_weight * capacity_ratio)
    return items, capacity


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise InstanceFormatError(f"Expected an integer for {what}, got {token!r}.") from e


def parse_instance(text: str) -> Tuple[int, List[Item]]:
    """
    Parses the plain text format: 'n W' followed by n 'value weight' pairs.

    Returns:
        Tuple[int, List[Item]]: (capacity, items), items numbered from 1.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise InstanceFormatError("Instance must start with the item count and the capacity.")

    n = _to_int(tokens[0], "the item count")
    capacity = _to_int(tokens[1], "the capacity")
    if n < 0:
        raise InvalidCountError(f"Item count must be >= 0, got {n}.")

    body = tokens[2:]
    if len(body) < 2 * n:
        raise InstanceFormatError(f"Expected {n} value/weight pairs, found only {len(body) // 2}.")
    if len(body) > 2 * n:
        logger.warning(f"Ignoring {len(body) - 2 * n} trailing token(s) after {n} items.")

    pairs = [
        (_to_int(body[2 * i], f"the value of item {i + 1}"), _to_int(body[2 * i + 1], f"the weight of item {i + 1}"))
        for i in range(n)
    ]
    return capacity, make_items(pairs)


def read_instance(stream: TextIO) -> Tuple[int, List[Item]]:
    """Reads a plain text instance from an open stream such as sys.stdin."""
    return parse_instance(stream.read())


def save_instance_to_file(items: List[Tuple[int, int]], capacity: int, filename: str):
    """Saves an instance to a csv file."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', newline='') as f:
        # first line: number of items and capacity
        f.write(f"{len(items)} {capacity}\n")
        writer = csv.writer(f)
        writer.writerow(['value', 'weight'])
        for value, weight in items:
            writer.writerow([value, weight])

    logger.info(f"Instance successfully saved to {filename}")


def load_instance_from_file(filename: str) -> Tuple[int, List[Item]]:
    """
    Loads a knapsack instance from a csv file.
    Assumes first line is 'num_items capacity', then a 'value,weight' header and one row per item.
    A count that does not match the header is reported as a warning.

    Returns:
        Tuple[int, List[Item]]: (capacity, items)
    """
    pairs = []

    with open(filename, 'r', newline='') as f:
        meta = f.readline().split()
        if len(meta) != 2:
            raise InstanceFormatError(f"'{filename}': first line must be 'num_items capacity'.")
        expected_num_items = _to_int(meta[0], "the item count")
        capacity = _to_int(meta[1], "the capacity")

        reader = csv.reader(f)
        try:
            next(reader)
        except StopIteration:
            logger.warning(f"File '{filename}' contains no data rows.")

        for line_no, row in enumerate(reader, start=3):
            if not row:
                continue
            if len(row) < 2:
                raise InstanceFormatError(f"'{filename}' line {line_no}: expected 'value,weight', got {row}.")
            pairs.append((_to_int(row[0], f"value on line {line_no}"), _to_int(row[1], f"weight on line {line_no}")))

    if len(pairs) != expected_num_items:
        logger.warning(f"Inconsistent data in '{filename}'. "
                       f"Header specified {expected_num_items} items, but file contained {len(pairs)} items.")

    items = make_items(pairs)

    logger.info(f"Instance successfully loaded from {filename} ({len(items)} items).")
    return capacity, items


def load_instance(path: str) -> Tuple[int, List[Item]]:
    """Loads an instance, picking the reader by file extension ('.csv' or plain text)."""
    if path.lower().endswith('.csv'):
        return load_instance_from_file(path)
    with open(path, 'r') as f:
        return read_instance(f)
