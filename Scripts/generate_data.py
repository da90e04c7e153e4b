# Scripts/generate_data.py
# -*- coding: utf-8 -*-

'''
This script generates a suite of knapsack problem instances for evaluating the solvers.
It creates a series of CSV files in the configured directory, several instances per problem size.
'''

import argparse
import logging
import os
from types import SimpleNamespace
from typing import List

from kp_solvers.utils.config_loader import load_config
from kp_solvers.utils.generator import generate_knapsack_instance, save_instance_to_file
from kp_solvers.utils.logger import setup_logger

logger = logging.getLogger(__name__)


def create_suite(gen_cfg: SimpleNamespace, out_dir: str) -> List[str]:
    """
    Generates and saves instances for n in [start_n, end_n] (step step_n).
    Each instance gets its own seed derived from the base seed, so a suite is reproducible.

    Returns:
        List[str]: Paths of the written files.
    """
    logger.info(f"--- Generating Test Suite in '{out_dir}' Directory ---")
    os.makedirs(out_dir, exist_ok=True)

    written = []
    for n_items in range(gen_cfg.start_n, gen_cfg.end_n + 1, gen_cfg.step_n):
        for k in range(gen_cfg.instances_per_n):
            seed = None if gen_cfg.seed is None else gen_cfg.seed + n_items * 1000 + k
            items, capacity = generate_knapsack_instance(
                n=n_items,
                correlation=gen_cfg.correlation,
                max_weight=gen_cfg.max_weight,
                max_value=gen_cfg.max_value,
                capacity_ratio=gen_cfg.capacity_ratio,
                seed=seed,
            )
            filename = os.path.join(out_dir, f"instance_n{n_items}_{gen_cfg.correlation}_{k}.csv")
            save_instance_to_file(items, capacity, filename)
            written.append(filename)

    logger.info(f"--- Test Suite Generation Complete: {len(written)} instances ---")
    return written


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a suite of knapsack instances.")
    parser.add_argument('--config', type=str, default=None, help='Path to a config.yaml.')
    parser.add_argument('--out-dir', type=str, default=None,
                        help='Output directory; defaults to paths.data_testing from the config.')
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    setup_logger(run_name="generation", log_dir=cfg.paths.logs)

    create_suite(cfg.data_gen, args.out_dir or cfg.paths.data_testing)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
