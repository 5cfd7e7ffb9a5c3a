import numpy as np
import pytest

from gaco import (
    BoundsError,
    HockSchittkowsky71Problem,
    MINLPRastriginProblem,
    Population,
    Problem,
    ProblemDimensionError,
    RosenbrockProblem,
    ZDT1Problem,
)


def test_population_is_evaluated_at_construction():
    prob = RosenbrockProblem(3)
    pop = Population(prob, 12, seed=1)
    assert len(pop) == pop.size == 12
    assert pop.n_eval == 12
    assert pop.X.shape == (12, 3)
    assert pop.F.shape == (12, 1)
    assert np.all(pop.X >= prob.xl) and np.all(pop.X <= prob.xu)
    np.testing.assert_allclose(pop.F[:, 0], prob.objectives(pop.X))
    assert pop.G is None and pop.H is None


def test_same_seed_same_population():
    a = Population(RosenbrockProblem(2), 8, seed=9)
    b = Population(RosenbrockProblem(2), 8, seed=9)
    np.testing.assert_array_equal(a.X, b.X)


def test_empty_population():
    pop = Population(RosenbrockProblem(2), 0)
    assert len(pop) == 0
    assert pop.n_eval == 0
    with pytest.raises(ValueError):
        pop.best_idx()


def test_constrained_population_keeps_g_and_h():
    pop = Population(HockSchittkowsky71Problem(), 6, seed=2)
    assert pop.G.shape == (6, 1)
    assert pop.H.shape == (6, 1)
    assert pop.violation().shape == (6,)
    assert np.all(pop.violation() >= 0.0)


def test_champion_prefers_feasibility():
    pop = Population(RosenbrockProblem(2), 3, seed=0)
    pop.replace(
        np.zeros((3, 2)),
        np.array([[5.0], [1.0], [3.0]]),
    )
    assert pop.best_idx() == 1
    assert pop.champion_f[0] == 1.0
    assert pop.get_x() is not pop.X


def test_getters_return_copies():
    pop = Population(RosenbrockProblem(2), 4, seed=0)
    F = pop.get_f()
    np.testing.assert_array_equal(F, pop.F)
    F[:] = -1.0
    assert np.all(pop.F >= 0.0)
    X = pop.get_x()
    X[:] = 100.0
    assert np.all(pop.X <= 10.0)


def test_integer_variables_are_sampled_as_integers():
    pop = Population(MINLPRastriginProblem(2, 1), 20, seed=3)
    np.testing.assert_array_equal(pop.X[:, -1], np.rint(pop.X[:, -1]))
    assert np.all(pop.X[:, -1] >= -10) and np.all(pop.X[:, -1] <= -5)


def test_scalar_bounds_are_broadcast():
    pop = Population(ZDT1Problem(5), 4, seed=0)
    assert pop.F.shape == (4, 2)
    assert np.all((pop.X >= 0.0) & (pop.X <= 1.0))


def test_set_xf_and_push_back():
    pop = Population(RosenbrockProblem(2), 2, seed=0)
    pop.set_xf(0, np.ones(2), np.array([0.0]))
    assert pop.champion_f[0] == 0.0
    with pytest.raises(IndexError):
        pop.set_xf(5, np.ones(2), np.array([0.0]))
    pop.push_back(np.array([1.0, 1.0]))
    assert len(pop) == 3
    assert pop.n_eval == 3
    assert pop.F[-1, 0] == 0.0


def test_replace_rejects_mismatched_arrays():
    pop = Population(RosenbrockProblem(2), 2, seed=0)
    with pytest.raises(ValueError):
        pop.replace(np.zeros((2, 2)), np.zeros((3, 1)))


def test_inverted_bounds_are_rejected():
    class Inverted(Problem):
        def __init__(self):
            self.n_var = 2
            self.xl = np.array([1.0, 0.0])
            self.xu = np.array([0.0, 1.0])

        def objectives(self, X):
            return X.sum(axis=1)

    with pytest.raises(BoundsError):
        Population(Inverted(), 3)


def test_wrong_objective_shape_is_reported():
    class TooMany(RosenbrockProblem):
        def objectives(self, X):
            return np.zeros((X.shape[0], 3))

    with pytest.raises(ProblemDimensionError):
        Population(TooMany(2), 3)
