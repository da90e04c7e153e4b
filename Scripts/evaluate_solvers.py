# Scripts/evaluate_solvers.py
import argparse
import glob
import logging
import os
import sys
from typing import Any, Dict, List, Sequence, Type

import numpy as np
import pandas as pd
from tqdm import tqdm

from kp_solvers.evaluation.plotting import plot_evaluation_times, plot_relaxation_gap
from kp_solvers.evaluation.reporting import save_results_to_csv
from kp_solvers.solvers.classic.dp_solver import BruteForceSolver
from kp_solvers.solvers.interface import SolverInterface
from kp_solvers.utils.config_loader import load_config
from kp_solvers.utils.generator import load_instance_from_file
from kp_solvers.utils.logger import setup_logger
from kp_solvers.utils.run_utils import create_run_name

logger = logging.getLogger(__name__)

TOLERANCE = 1e-9


def run_evaluation(solver_classes: Sequence[Type[SolverInterface]], instance_files: Sequence[str],
                   solver_config: Dict[str, Any] = None) -> pd.DataFrame:
    """
    Runs every solver on every instance and collects one row per (solver, instance).
    Instances too large for the brute-force solver are skipped for that solver only.
    """
    raw_results: List[Dict[str, Any]] = []
    instances = [(os.path.basename(path), *load_instance_from_file(path)) for path in instance_files]

    for SolverClass in solver_classes:
        solver = SolverClass(config=solver_config or {})
        logger.info(f"--- Evaluating Solver: {solver.name} ---")

        for name, capacity, items in tqdm(instances, desc=f"Solving with {solver.name}"):
            if isinstance(solver, BruteForceSolver) and not solver.accepts(items):
                logger.debug(f"Skipping {name} for {solver.name} (n={len(items)} > {solver.max_n}).")
                continue
            result = solver.solve(capacity, items)
            raw_results.append({
                "solver": solver.name,
                "instance": name,
                "n": len(items),
                "capacity": capacity,
                "value": result["value"],
                "time_seconds": result["time"],
            })

    return pd.DataFrame(raw_results, columns=["solver", "instance", "n", "capacity", "value", "time_seconds"])


def check_results(results_df: pd.DataFrame, exact_name: str, relaxation_name: str, baseline_name: str) -> pd.DataFrame:
    """
    Per-instance consistency checks:
      - relaxation_ok: the fractional value is not below the 0/1 optimum
      - baseline_ok: the 0/1 optimum equals the brute-force optimum (NaN where brute force was skipped)
      - gap_pct: relative distance of the relaxation above the 0/1 optimum
    """
    pivot = results_df.pivot_table(index=['n', 'instance'], columns='solver', values='value').reset_index()

    checks = pivot[['n', 'instance']].copy()
    exact = pivot[exact_name]
    relaxation = pivot[relaxation_name]
    checks['exact_value'] = exact
    checks['relaxation_value'] = relaxation
    checks['relaxation_ok'] = relaxation >= exact - TOLERANCE
    checks['gap_pct'] = np.where(exact > 0, (relaxation - exact) / exact.where(exact > 0, 1) * 100, 0.0)

    if baseline_name in pivot.columns:
        baseline = pivot[baseline_name]
        checks['baseline_value'] = baseline
        checks['baseline_ok'] = np.where(baseline.isna(), np.nan, np.isclose(exact, baseline))

    return checks


def main(argv=None) -> int:
    """
    Evaluates all configured solvers on the generated suite, checks the results
    against each other, then writes reports and plots.
    """
    parser = argparse.ArgumentParser(description="Evaluate knapsack problem solvers.")
    parser.add_argument('--config', type=str, default=None, help='Path to a config.yaml.')
    parser.add_argument('--data-dir', type=str, default=None,
                        help='Directory with csv instances; defaults to paths.data_testing from the config.')
    parser.add_argument('--limit', type=int, default=None,
                        help='Limit the number of instances to run (for quick testing).')
    args = parser.parse_args(argv)

    cfg = load_config(args.config)

    # --- 1. Create a unique name and directory for this evaluation run ---
    run_name = create_run_name(cfg)
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "evaluation", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="evaluation_session", log_dir=run_dir)
    logger.info(f"--- Starting New Evaluation Run: {run_name} ---")

    # --- 2. Data Loading ---
    test_data_dir = args.data_dir or cfg.paths.data_testing
    instance_files = sorted(glob.glob(os.path.join(test_data_dir, "*.csv")))
    if not instance_files:
        logger.error(f"Test data directory is empty or does not exist: {test_data_dir}")
        logger.error("Please run 'kp-generate' to create test instances first.")
        return 1
    if args.limit is not None and args.limit > 0:
        logger.info(f"--- Running in limited mode. Processing only the first {args.limit} instances. ---")
        instance_files = instance_files[:args.limit]

    # --- 3. Run Evaluation Loop ---
    solver_classes = cfg.solvers.algorithms_to_test
    results_df = run_evaluation(solver_classes, instance_files,
                                solver_config={"max_n": cfg.solvers.brute_force_max_n})
    if results_df.empty:
        logger.critical("CRITICAL: No results were generated from any solver. Exiting.")
        return 1

    # --- 4. Consistency Checks ---
    names = {cls: cls().name for cls in (cfg.solvers.exact_01, cfg.solvers.relaxation, cfg.solvers.baseline_algorithm)}
    exact_name = names[cfg.solvers.exact_01]
    relaxation_name = names[cfg.solvers.relaxation]
    solved_by = set(results_df['solver'].unique())
    if exact_name not in solved_by or relaxation_name not in solved_by:
        logger.critical(f"Both '{exact_name}' and '{relaxation_name}' must be in algorithms_to_test to run the checks.")
        return 1

    checks_df = check_results(results_df, exact_name, relaxation_name, names[cfg.solvers.baseline_algorithm])
    failures = int((~checks_df['relaxation_ok']).sum())
    if 'baseline_ok' in checks_df.columns:
        failures += int((checks_df['baseline_ok'] == 0).sum())
    if failures:
        logger.error(f"{failures} consistency check(s) failed; see checks.csv in {run_dir}.")
    else:
        logger.info("All consistency checks passed.")

    # --- 5. Save Reports and Generate Plots ---
    logger.info("--- Finalizing Results and Plots ---")
    agg_df = results_df.groupby(['solver', 'n']).agg(
        avg_value=('value', 'mean'),
        avg_time_ms=('time_seconds', lambda x: x.mean() * 1000)
    ).reset_index()

    save_results_to_csv(results_df, os.path.join(run_dir, "evaluation_raw.csv"))
    save_results_to_csv(agg_df, os.path.join(run_dir, "evaluation_summary.csv"))
    save_results_to_csv(checks_df, os.path.join(run_dir, "checks.csv"))
    plot_evaluation_times(agg_df, os.path.join(run_dir, "evaluation_times_vs_n.png"))
    plot_relaxation_gap(checks_df.groupby('n', as_index=False)['gap_pct'].mean(),
                        os.path.join(run_dir, "relaxation_gap_vs_n.png"))

    logger.info("--- Evaluation script finished ---")
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
