# kp_solvers/utils/run_utils.py
import datetime
from types import SimpleNamespace

def create_run_name(config: SimpleNamespace) -> str:
    """
    Creates a unique and informative name for an evaluation run.

    Args:
        config (SimpleNamespace): The configuration object for the run.

    Returns:
        str: A unique name, e.g., '20250622_210000_n5-100_uncorrelated'
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")

    try:
        gen = config.data_gen
        run_name = f"{timestamp}_n{gen.start_n}-{gen.end_n}_{gen.correlation}"
    except AttributeError:
        # Fallback for configs without a generation section
        run_name = timestamp

    return run_name
