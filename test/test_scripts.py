import glob
import io
import os
from types import SimpleNamespace

import pandas as pd
import pytest
import yaml

from Scripts import evaluate_solvers, generate_data, solve
from Scripts.evaluate_solvers import check_results, run_evaluation
from Scripts.generate_data import create_suite
from kp_solvers.utils.generator import save_instance_to_file
from kp_solvers.solvers.classic.dp_solver import BruteForceSolver, DPSolver2D
from kp_solvers.solvers.classic.greedy_solver import FractionalGreedySolver
from kp_solvers.evaluation.plotting import plot_evaluation_times


@pytest.fixture
def gen_cfg():
    return SimpleNamespace(correlation="weakly_correlated", start_n=2, end_n=6, step_n=2,
                           instances_per_n=2, max_weight=20, max_value=20, capacity_ratio=0.5, seed=5)


def test_solve_from_file(tmp_path, capsys):
    path = tmp_path / "instance.txt"
    path.write_text("3 50\n60 10\n100 20\n120 30\n")

    assert solve.main(["--input", str(path)]) == 0

    out = capsys.readouterr().out
    assert "=== 0/1 Knapsack (DP) ===\nOptimal total value = 220" in out
    assert "Optimal total value = 240.00" in out
    assert "  Item 3: value=120, weight=30, fraction=0.6667" in out


def test_solve_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 10\n50 30\n"))

    assert solve.main([]) == 0

    out = capsys.readouterr().out
    assert "Optimal total value = 0\n" in out
    assert "Optimal total value = 16.67" in out


def test_solve_rejects_invalid_instance(tmp_path, capsys):
    path = tmp_path / "instance.txt"
    path.write_text("1 10\n50 0\n")

    assert solve.main(["--input", str(path)]) == 2
    assert capsys.readouterr().out == ""


def test_solve_missing_file(tmp_path):
    assert solve.main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_create_suite_is_reproducible(tmp_path, gen_cfg):
    first = create_suite(gen_cfg, str(tmp_path / "a"))
    second = create_suite(gen_cfg, str(tmp_path / "b"))
    assert len(first) == 6
    for a, b in zip(first, second):
        with open(a) as fa, open(b) as fb:
            assert fa.read() == fb.read()


def test_evaluation_checks_pass(tmp_path, gen_cfg):
    files = create_suite(gen_cfg, str(tmp_path / "suite"))
    results = run_evaluation([DPSolver2D, FractionalGreedySolver, BruteForceSolver], files,
                             solver_config={"max_n": 4})

    assert set(results["solver"]) == {"0/1 DP", "Fractional Greedy", "Brute Force"}
    # brute force only ran on n <= 4
    assert results[results["solver"] == "Brute Force"]["n"].max() == 4
    assert len(results) == 6 + 6 + 4

    checks = check_results(results, "0/1 DP", "Fractional Greedy", "Brute Force")
    assert len(checks) == 6
    assert checks["relaxation_ok"].all()
    assert (checks["gap_pct"] >= 0).all()
    ran_baseline = checks["baseline_ok"].dropna()
    assert len(ran_baseline) == 4
    assert (ran_baseline == 1).all()


def test_plot_evaluation_times(tmp_path):
    df = pd.DataFrame({
        "solver": ["0/1 DP", "0/1 DP", "Fractional Greedy", "Fractional Greedy"],
        "n": [2, 4, 2, 4],
        "avg_time_ms": [0.1, 0.3, 0.01, 0.02],
    })
    path = tmp_path / "times.png"
    plot_evaluation_times(df, str(path))
    assert path.exists()


def _write_config(tmp_path, algorithms=("0/1 DP", "Fractional Greedy", "Brute Force")):
    config = {
        "paths": {"data_testing": str(tmp_path / "suite"), "artifacts": str(tmp_path / "artifacts"),
                  "logs": str(tmp_path / "logs")},
        "data_gen": {"correlation": "strongly_correlated", "start_n": 2, "end_n": 6, "step_n": 2,
                     "instances_per_n": 1, "max_weight": 20, "max_value": 20,
                     "capacity_ratio": 0.5, "seed": 11},
        "solvers": {"algorithms_to_test": list(algorithms), "exact_01": "0/1 DP",
                    "relaxation": "Fractional Greedy", "baseline_algorithm": "Brute Force",
                    "brute_force_max_n": 4},
        "report": {"value_decimals": 1, "fraction_decimals": 2},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config))
    return str(path)


def test_solve_falls_back_on_invalid_config(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text(yaml.safe_dump({
        "paths": {}, "data_gen": {"start_n": 5, "end_n": 1, "step_n": 1},
        "solvers": {}, "report": {},
    }))
    instance = tmp_path / "instance.txt"
    instance.write_text("1 10\n50 30\n")

    assert solve.main(["--input", str(instance), "--config", str(config)]) == 0
    assert "Optimal total value = 16.67" in capsys.readouterr().out


def test_solve_uses_configured_precision(tmp_path, capsys):
    instance = tmp_path / "instance.txt"
    instance.write_text("1 10\n50 30\n")

    assert solve.main(["--input", str(instance), "--config", _write_config(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Optimal total value = 16.7" in out
    assert "fraction=0.33" in out


def test_evaluation_skips_instances_past_brute_force_limit(tmp_path):
    path = str(tmp_path / "instance_n21.csv")
    save_instance_to_file([(i + 1, i + 2) for i in range(21)], 40, path)

    results = run_evaluation([BruteForceSolver, DPSolver2D], [path], solver_config={"max_n": 25})

    assert list(results["solver"]) == ["0/1 DP"]


def test_generate_then_evaluate_end_to_end(tmp_path):
    config = _write_config(tmp_path)

    assert generate_data.main(["--config", config]) == 0
    suite = sorted(glob.glob(str(tmp_path / "suite" / "*.csv")))
    assert [os.path.basename(p) for p in suite] == [
        "instance_n2_strongly_correlated_0.csv",
        "instance_n4_strongly_correlated_0.csv",
        "instance_n6_strongly_correlated_0.csv",
    ]

    assert evaluate_solvers.main(["--config", config, "--data-dir", str(tmp_path / "suite")]) == 0

    run_dirs = glob.glob(str(tmp_path / "artifacts" / "runs" / "evaluation" / "*"))
    assert len(run_dirs) == 1
    for name in ("evaluation_raw.csv", "evaluation_summary.csv", "checks.csv",
                 "evaluation_times_vs_n.png", "relaxation_gap_vs_n.png"):
        assert os.path.exists(os.path.join(run_dirs[0], name))

    checks = pd.read_csv(os.path.join(run_dirs[0], "checks.csv"))
    assert checks["relaxation_ok"].all()
    assert checks["baseline_ok"].dropna().tolist() == [1.0, 1.0]


def test_evaluate_requires_instances(tmp_path):
    config = _write_config(tmp_path)
    assert evaluate_solvers.main(["--config", config, "--data-dir", str(tmp_path / "empty")]) == 1


def test_evaluate_requires_exact_and_relaxation_solvers(tmp_path):
    config = _write_config(tmp_path, algorithms=("0/1 DP",))
    generate_data.main(["--config", config])
    assert evaluate_solvers.main(["--config", config, "--data-dir", str(tmp_path / "suite")]) == 1
