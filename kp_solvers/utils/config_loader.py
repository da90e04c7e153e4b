# kp_solvers/utils/config_loader.py
import yaml
import os
from types import SimpleNamespace
from typing import Dict, Any

# --- Import solver CLASSes here ---
from kp_solvers.solvers.classic.algorithms import BRUTE_FORCE_MAX_N
from kp_solvers.solvers.classic.dp_solver import DPSolver2D, BruteForceSolver
from kp_solvers.solvers.classic.greedy_solver import FractionalGreedySolver

# The registry maps a name to a Solver Class.
ALGORITHM_REGISTRY = {
    "0/1 DP": DPSolver2D,
    "Fractional Greedy": FractionalGreedySolver,
    "Brute Force": BruteForceSolver,
}

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, 'configs', 'config.yaml')


def _post_process_config(config_dict: Dict[str, Any], project_root: str) -> Dict[str, Any]:
    """
    Processes the raw config dict to add absolute paths and solver classes.
    This function contains all logic that cannot be represented in a static YAML file.
    """
    # --- 1. Build absolute paths for all entries in the 'paths' section ---
    for key, rel_path in config_dict['paths'].items():
        config_dict['paths'][key] = os.path.join(project_root, rel_path)
    config_dict['paths']['root'] = project_root

    # --- 2. Sanity-check the generation range ---
    gen_cfg = config_dict['data_gen']
    if gen_cfg['start_n'] < 0 or gen_cfg['step_n'] <= 0 or gen_cfg['end_n'] < gen_cfg['start_n']:
        raise ValueError(f"Invalid data_gen range: start_n={gen_cfg['start_n']}, "
                         f"end_n={gen_cfg['end_n']}, step_n={gen_cfg['step_n']}.")

    # --- 3. Map Algorithm Names to Solver Classes ---
    solvers_cfg = config_dict['solvers']
    if not 0 <= solvers_cfg['brute_force_max_n'] <= BRUTE_FORCE_MAX_N:
        raise ValueError(f"solvers.brute_force_max_n must be between 0 and {BRUTE_FORCE_MAX_N}, "
                         f"got {solvers_cfg['brute_force_max_n']}.")
    try:
        solvers_cfg['algorithms_to_test'] = [ALGORITHM_REGISTRY[name] for name in solvers_cfg['algorithms_to_test']]
        for key in ('exact_01', 'relaxation', 'baseline_algorithm'):
            solvers_cfg[key] = ALGORITHM_REGISTRY[solvers_cfg[key]]
    except KeyError as e:
        raise ValueError(f"Algorithm '{e.args[0]}' is defined in config.yaml but not found in "
                         f"ALGORITHM_REGISTRY in config_loader.py.") from e

    return config_dict


def load_config(config_path: str = None) -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.
    Relative paths inside the file are resolved against the project root.
    """
    full_config_path = config_path or DEFAULT_CONFIG_PATH

    try:
        with open(full_config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {full_config_path}")

    processed_config = _post_process_config(config_dict, PROJECT_ROOT)

    # Convert the final dictionary to a SimpleNamespace for easy attribute access
    def dict_to_namespace(d: Dict) -> SimpleNamespace:
        for k, v in d.items():
            if isinstance(v, dict):
                d[k] = dict_to_namespace(v)
        return SimpleNamespace(**d)

    return dict_to_namespace(processed_config)
