# kp_solvers/evaluation/plotting.py
import pandas as pd
import seaborn as sns
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import logging

logger = logging.getLogger(__name__)


def plot_evaluation_times(results_df: pd.DataFrame, save_path: str):
    """Plots a comparison of solve times for all solvers."""
    logger.info("Generating evaluation time comparison plot...")
    plt.style.use('seaborn-v0_8-whitegrid')
    plt.figure(figsize=(12, 7))

    sns.lineplot(data=results_df, x='n', y='avg_time_ms', hue='solver', style='solver', markers=True, dashes=False)

    plt.title('Solver Performance: Time vs. Problem Size (n)', fontsize=16)
    plt.xlabel('Number of Items (n)', fontsize=12)
    plt.ylabel('Average Time per Instance (ms)', fontsize=12)
    plt.yscale('log') # time varies by orders of magnitude across solvers
    plt.legend(title='Solver')
    plt.grid(True, which="both", ls="--")
    plt.tight_layout()
    try:
        plt.savefig(save_path, dpi=150)
        logger.info(f"Time comparison plot saved to {save_path}")
    finally:
        plt.close()


def plot_relaxation_gap(gap_df: pd.DataFrame, save_path: str):
    """
    Plots how far the fractional relaxation sits above the 0/1 optimum.

    Args:
        gap_df (pd.DataFrame): Must contain the columns 'n' and 'gap_pct'.
        save_path (str): The path to save the plot image.
    """
    logger.info("Generating relaxation gap plot...")
    plt.style.use('seaborn-v0_8-whitegrid')
    plt.figure(figsize=(12, 7))

    sns.lineplot(data=gap_df, x='n', y='gap_pct', marker='o')

    plt.title('Fractional Relaxation Gap vs. Problem Size (n)', fontsize=16)
    plt.xlabel('Number of Items (n)', fontsize=12)
    plt.ylabel('(Fractional - 0/1) / 0/1  (%)', fontsize=12)
    plt.grid(True, ls="--")
    plt.tight_layout()
    try:
        plt.savefig(save_path, dpi=150)
        logger.info(f"Relaxation gap plot saved to {save_path}")
    finally:
        plt.close()
