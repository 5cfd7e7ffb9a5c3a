import numpy as np

from gaco.foundation.constraints.utils import compute_violation, is_feasible


def test_unconstrained_rows_have_zero_violation():
    np.testing.assert_array_equal(compute_violation(None, None, n=3), np.zeros(3))
    assert compute_violation(None).shape == (0,)
    assert is_feasible(None, n=2).all()


def test_inequalities_and_equalities_are_summed():
    G = np.array([[1.0, -2.0], [-1.0, -1.0]])
    H = np.array([[-0.5], [0.0]])
    np.testing.assert_allclose(compute_violation(G, H), [1.5, 0.0])
    np.testing.assert_array_equal(is_feasible(G, H), [False, True])


def test_tolerance_absorbs_small_violations():
    G = np.array([[0.5], [2.0]])
    H = np.array([[-0.8], [0.0]])
    np.testing.assert_allclose(compute_violation(G, H, c_tol=1.0), [0.0, 1.0])
