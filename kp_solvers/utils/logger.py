# kp_solvers/utils/logger.py
import logging
import sys
import os
from datetime import datetime

# Configuration is passed in as arguments so that this helper stays independent of config files.

def setup_logger(run_name: str, log_dir: str = None, level=logging.INFO):
    """
    Configures the root logger for the entire application.
    This should be called only ONCE at the application's entry point.

    Args:
        run_name (str): Prefix of the log file, e.g. 'solve' or 'evaluation'.
        log_dir (str, optional): Directory for the log file. When None, only the console handler is installed.
        level: Level of the console handler.

    Returns:
        str | None: Path of the log file, if one was created.
    """
    logger = logging.getLogger() # root logger

    # Already configured: leave the existing handlers alone
    if logger.hasHandlers():
        return None

    logger.setLevel(logging.DEBUG)
    log_filepath = None

    # 1. File handler, one uniquely named file per run
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filepath = os.path.join(log_dir, f"{run_name}_{timestamp}.log")

        file_handler = logging.FileHandler(log_filepath, mode='w')
        file_handler.setLevel(logging.DEBUG) # file keeps DEBUG and above
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        ))
        logger.addHandler(file_handler)

    # 2. Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(console_handler)

    if log_filepath:
        logger.info(f"Logger initialized. All subsequent logs will be saved to: {log_filepath}")
    return log_filepath
