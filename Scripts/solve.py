# Scripts/solve.py
import argparse
import logging
import sys

from kp_solvers.errors import KnapsackError
from kp_solvers.evaluation.reporting import format_fractional_report, format_zero_one_report
from kp_solvers.solvers.classic.algorithms import fractional_knapsack, knapsack_01
from kp_solvers.utils.config_loader import load_config
from kp_solvers.utils.generator import load_instance, read_instance
from kp_solvers.utils.logger import setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a knapsack instance both as a 0/1 problem (DP) and as a fractional problem (greedy).",
        epilog="Plain input format: 'n W' on the first line, then n lines of 'value weight'.",
    )
    parser.add_argument(
        "-i", "--input",
        type=str,
        default=None,
        help="Instance file ('.csv' benchmark format or plain text). Reads plain text from stdin when omitted."
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a config.yaml; defaults to configs/config.yaml in the project root."
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Also write a DEBUG log file into this directory."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show DEBUG messages on the console.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(run_name="solve", log_dir=args.log_dir, level=logging.DEBUG if args.verbose else logging.WARNING)

    value_decimals, fraction_decimals = 2, 4
    try:
        cfg = load_config(args.config)
        value_decimals = cfg.report.value_decimals
        fraction_decimals = cfg.report.fraction_decimals
    except FileNotFoundError as e:
        if args.config:
            logger.error(str(e))
            return 1
        logger.debug(f"No project config found, using default report precision. ({e})")
    except ValueError as e:
        logger.warning(f"Ignoring invalid config, using default report precision. ({e})")

    try:
        if args.input:
            capacity, items = load_instance(args.input)
        else:
            capacity, items = read_instance(sys.stdin)

        result_01 = knapsack_01(capacity, items)
        result_frac = fractional_knapsack(capacity, items)
    except KnapsackError as e:
        logger.error(f"{e.kind}: {e}")
        return 2
    except OSError as e:
        logger.error(f"Could not read instance: {e}")
        return 1

    print(format_zero_one_report(result_01, items))
    print()
    print(format_fractional_report(result_frac, value_decimals=value_decimals, fraction_decimals=fraction_decimals))
    return 0


if __name__ == '__main__':
    sys.exit(main())
