import numpy as np
import pytest

from gaco import (
    CEC2006G01Problem,
    HockSchittkowsky71Problem,
    InventoryProblem,
    MINLPRastriginProblem,
    Problem,
    ProblemProtocol,
    RosenbrockProblem,
    ZDT1Problem,
)
from gaco.foundation.constraints.utils import compute_violation
from gaco.foundation.encoding import normalize_encoding
from gaco.foundation.eval.population import evaluate_population_with_constraints


@pytest.mark.parametrize(
    "problem",
    [RosenbrockProblem(4), HockSchittkowsky71Problem(), CEC2006G01Problem(), ZDT1Problem(), MINLPRastriginProblem(), InventoryProblem()],
)
def test_problems_satisfy_the_protocol(problem):
    assert isinstance(problem, ProblemProtocol)


def test_rosenbrock_optimum():
    prob = RosenbrockProblem(5)
    result = evaluate_population_with_constraints(prob, prob.best_known()[None, :])
    assert result.F[0, 0] == 0.0


def test_cec2006_g01_optimum_is_feasible():
    prob = CEC2006G01Problem()
    result = evaluate_population_with_constraints(prob, prob.best_known()[None, :])
    assert result.F[0, 0] == pytest.approx(-15.0)
    assert compute_violation(result.G, result.H)[0] == pytest.approx(0.0, abs=1e-12)


def test_hs71_best_known_is_nearly_feasible():
    prob = HockSchittkowsky71Problem()
    result = evaluate_population_with_constraints(prob, prob.best_known()[None, :])
    assert result.F[0, 0] == pytest.approx(17.014, abs=1e-3)
    assert compute_violation(result.G, result.H)[0] < 1e-5


def test_inventory_is_stochastic():
    prob = InventoryProblem(seed=1)
    X = np.full((1, 4), 50.0)
    a = prob.objectives(X)
    b = prob.objectives(X)
    assert prob.stochastic
    assert a[0] != b[0]
    prob.set_seed(1)
    assert prob.objectives(X)[0] == a[0]


def test_minlp_rounds_integer_variables():
    prob = MINLPRastriginProblem(1, 1)
    a = prob.objectives(np.array([[0.0, -5.2]]))
    b = prob.objectives(np.array([[0.0, -5.0]]))
    assert a[0] == b[0]


def test_problem_requires_objectives():
    class Empty(Problem):
        n_var = 1
        xl = 0.0
        xu = 1.0

    with pytest.raises(NotImplementedError):
        evaluate_population_with_constraints(Empty(), np.zeros((1, 1)))


def test_set_c_tol_validates():
    prob = HockSchittkowsky71Problem()
    prob.set_c_tol(0.5)
    assert prob.c_tol == 0.5
    with pytest.raises(ValueError):
        prob.set_c_tol(-1.0)


@pytest.mark.parametrize(("raw", "expected"), [("continuous", "real"), ("INT", "integer"), (None, "real"), ("mixed", "mixed")])
def test_normalize_encoding(raw, expected):
    assert normalize_encoding(raw) == expected


def test_unknown_encoding_is_rejected():
    with pytest.raises(ValueError, match="Unknown encoding"):
        normalize_encoding("binary")
