import math

import numpy as np
import pytest

from gaco.engine.algorithm.components.candidates import CandidateSet
from gaco.engine.algorithm.gaco.penalty import OracleState, oracle_penalty

ALPHA_LOW = (6.0 * math.sqrt(3.0) - 2.0) / (6.0 * math.sqrt(3.0))


def _candidates(objective, violation):
    objective = np.asarray(objective, dtype=float)
    return CandidateSet(
        X=np.zeros((objective.size, 1)),
        F=objective.reshape(-1, 1),
        G=None,
        H=None,
        violation=np.asarray(violation, dtype=float),
        ids=np.arange(objective.size),
    )


def test_feasible_points_below_the_oracle_score_their_distance():
    out = oracle_penalty(np.array([-3.0, 0.0]), np.zeros(2), oracle=0.0)
    np.testing.assert_allclose(out, [-3.0, 0.0])


def test_feasible_points_above_the_oracle():
    out = oracle_penalty(np.array([3.0]), np.zeros(1), oracle=0.0)
    assert out[0] == pytest.approx(ALPHA_LOW * 3.0)


def test_infeasible_points_below_the_oracle_score_their_violation():
    out = oracle_penalty(np.array([-5.0]), np.array([2.0]), oracle=0.0)
    assert out[0] == pytest.approx(2.0)


@pytest.mark.parametrize(
    ("f", "res", "alpha"),
    [
        (9.0, 1.0, (9.0 * ALPHA_LOW - 1.0) / (9.0 - 1.0)),
        (9.0, 4.0, 1.0 - 1.0 / (2.0 * math.sqrt(9.0 / 4.0))),
        (4.0, 9.0, 0.5 * math.sqrt(4.0 / 9.0)),
    ],
)
def test_alpha_regimes_above_the_oracle(f, res, alpha):
    out = oracle_penalty(np.array([f]), np.array([res]), oracle=0.0)
    assert out[0] == pytest.approx(alpha * f + (1.0 - alpha) * res)


def test_accuracy_adds_a_quadratic_violation_term():
    base = oracle_penalty(np.array([1.0, 1.0]), np.array([0.0, 2.0]), oracle=0.0)
    weighted = oracle_penalty(np.array([1.0, 1.0]), np.array([0.0, 2.0]), oracle=0.0, accuracy=0.5)
    np.testing.assert_allclose(weighted - base, [0.0, 2.0])


def test_unconstrained_ranking_matches_objective_ranking():
    f = np.random.default_rng(5).normal(size=50) * 10.0
    for oracle in (-100.0, 0.0, 3.0, 1e6):
        order = np.argsort(oracle_penalty(f, np.zeros_like(f), oracle), kind="stable")
        np.testing.assert_array_equal(order, np.argsort(f, kind="stable"))


def test_update_moves_toward_best_feasible_objective():
    state = OracleState(oracle=10.0)
    pool = _candidates([4.0, 2.0, 1.0], [0.0, 0.0, 3.0])
    state.update(pool, adaptation_rate=0.5, accuracy=0.0)
    assert state.oracle == pytest.approx(6.0)
    assert state.best_penalty == pytest.approx(state.penalize(pool, 0.0).min())


def test_update_uses_least_infeasible_when_nothing_is_feasible():
    state = OracleState(oracle=10.0)
    state.update(_candidates([4.0, 2.0], [1.0, 0.5]), adaptation_rate=1.0, accuracy=0.0)
    assert state.oracle == 2.0


def test_oracle_never_increases():
    state = OracleState(oracle=0.0)
    state.update(_candidates([4.0, 2.0], [0.0, 0.0]), adaptation_rate=1.0, accuracy=0.0)
    assert state.oracle == 0.0


def test_zero_adaptation_rate_freezes_the_oracle():
    state = OracleState(oracle=5.0)
    state.update(_candidates([1.0], [0.0]), adaptation_rate=0.0, accuracy=0.0)
    assert state.oracle == 5.0


def test_state_roundtrip():
    state = OracleState(oracle=1.5, best_penalty=-0.25)
    assert OracleState.from_dict(state.to_dict()) == state
