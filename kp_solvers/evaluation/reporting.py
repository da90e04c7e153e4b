# kp_solvers/evaluation/reporting.py
import os
import logging
from typing import List, Sequence

import pandas as pd

from kp_solvers.items import Item
from kp_solvers.solvers.results import FractionalResult, ZeroOneResult

logger = logging.getLogger(__name__)


def format_zero_one_report(result: ZeroOneResult, items: Sequence[Item]) -> str:
    """Human-readable report of a 0/1 solve, chosen items listed in input order."""
    lines: List[str] = [
        "=== 0/1 Knapsack (DP) ===",
        f"Optimal total value = {result.value}",
        "Items taken (index, value, weight):",
    ]
    for item in result.selected_items(items):
        lines.append(f"  Item {item.index}: value={item.value}, weight={item.weight}")
    return "\n".join(lines)


def format_fractional_report(result: FractionalResult, value_decimals: int = 2, fraction_decimals: int = 4) -> str:
    """Human-readable report of a fractional solve, choices listed in consumption order."""
    lines: List[str] = [
        "=== Fractional Knapsack (Greedy by value/weight) ===",
        f"Optimal total value = {result.value:.{value_decimals}f}",
        "Items taken (index, value, weight, fraction taken):",
    ]
    for choice in result.choices:
        item = choice.item
        lines.append(f"  Item {item.index}: value={item.value}, weight={item.weight}, "
                     f"fraction={choice.fraction:.{fraction_decimals}f}")
    return "\n".join(lines)


def save_results_to_csv(results_df: pd.DataFrame, save_path: str):
    """Writes an evaluation table to csv, creating the parent directory if needed."""
    directory = os.path.dirname(save_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    results_df.to_csv(save_path, index=False)
    logger.info(f"Results saved to {save_path}")
