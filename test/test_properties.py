import pytest

from kp_solvers import brute_force_01, fractional_knapsack, knapsack_01, make_items
from kp_solvers.errors import InvalidCountError
from kp_solvers.solvers.classic.dp_solver import BruteForceSolver
from kp_solvers.utils.generator import CORRELATIONS, generate_knapsack_instance


def _instances():
    for correlation in CORRELATIONS:
        for n in (0, 1, 2, 5, 9, 12, 15):
            pairs, capacity = generate_knapsack_instance(
                n=n, correlation=correlation, max_weight=30, max_value=40, capacity_ratio=0.4, seed=1000 + n
            )
            yield correlation, n, make_items(pairs), capacity


@pytest.mark.parametrize("correlation, n, items, capacity", list(_instances()))
def test_solvers_agree_with_each_other(correlation, n, items, capacity):
    exact = knapsack_01(capacity, items)
    brute = brute_force_01(capacity, items)
    relaxed = fractional_knapsack(capacity, items)

    # DP is optimal
    assert exact.value == brute.value
    # the reconstructed set is feasible and accounts for the whole value
    assert exact.total_weight(items) <= capacity
    assert exact.value == sum(it.value for it in exact.selected_items(items))
    # the relaxation bounds the integral optimum
    assert relaxed.value >= exact.value - 1e-9
    # at most one split item, and only in last position
    partial = [i for i, c in enumerate(relaxed.choices) if c.fraction < 1.0]
    assert partial in ([], [len(relaxed.choices) - 1])
    assert all(0.0 < c.fraction <= 1.0 for c in relaxed.choices)
    assert relaxed.value == pytest.approx(sum(c.item.value * c.fraction for c in relaxed.choices))


def test_brute_force_small_instance(classic_items):
    result = brute_force_01(50, classic_items)
    assert result.value == 220
    assert result.chosen == [False, True, True]


def test_brute_force_refuses_large_instances():
    items = make_items([(1, 1)] * 21)
    with pytest.raises(InvalidCountError):
        brute_force_01(10, items)


def test_brute_force_solver_accepts_by_size():
    solver = BruteForceSolver(config={"max_n": 3})
    assert solver.accepts(make_items([(1, 1)] * 3))
    assert not solver.accepts(make_items([(1, 1)] * 4))


def test_brute_force_solver_limit_is_capped():
    solver = BruteForceSolver(config={"max_n": 25})
    assert solver.max_n == 20
    assert not solver.accepts(make_items([(1, 1)] * 21))
