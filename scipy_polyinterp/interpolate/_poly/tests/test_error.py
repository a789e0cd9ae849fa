import numpy as np
from numpy.testing import assert_, assert_equal, assert_allclose
import pytest
from scipy.special import factorial as scipy_factorial
from scipy_polyinterp.interpolate import (
    error_estimate, factorial, equispaced_nodes, fun, fun_derivative,
    NewtonPolynomial,
)


def test_factorial():
    assert_equal(factorial(0), 1)
    assert_equal(factorial(1), 1)
    assert_equal(factorial(5), 120)
    for n in range(20):
        assert_allclose(factorial(n), scipy_factorial(n, exact=True), rtol=1e-15)


@pytest.mark.parametrize("n", [-1, 2.0, False])
def test_factorial_invalid(n):
    with pytest.raises(ValueError):
        factorial(n)


def test_error_estimate_quadratic():
    x = equispaced_nodes(2, 0, np.pi)
    # f'''(pi / 4) = 32 and prod (t - x_i) = 3 pi^3 / 64
    assert_allclose(error_estimate(x, np.pi / 4), np.pi**3 / 4, rtol=1e-12)
    assert_allclose(error_estimate(x, np.pi / 4, n=2), np.pi**3 / 4, rtol=1e-12)


def test_error_estimate_single_node():
    x = equispaced_nodes(0, 0, np.pi)
    t = np.pi / 4
    assert_allclose(error_estimate(x, t), abs(fun_derivative(1, t) * t), rtol=1e-12)
    assert_allclose(error_estimate(x, t), 2 * np.pi, rtol=1e-12)


def test_error_estimate_vanishes_at_nodes():
    x = equispaced_nodes(4, 0, np.pi)
    assert_equal(error_estimate(x, x), np.zeros_like(x))


def test_error_estimate_custom_derivative():
    # for f(x) = x^3 the remainder of a quadratic interpolant is exact
    x = np.array([0.0, 1.0, 2.0])
    t = np.linspace(-1, 3, num=9)

    def derivative(order, t):
        assert_equal(order, 3)
        return 6.0 * np.ones_like(t)

    p = NewtonPolynomial(x, x**3)
    assert_allclose(error_estimate(x, t, derivative=derivative), np.abs(t**3 - p(t)),
                    rtol=1e-12, atol=1e-12)


def test_error_estimate_tracks_true_error():
    # away from the nodes the estimate has the magnitude of the true error
    x = equispaced_nodes(6, 0, np.pi)
    p = NewtonPolynomial(x, fun(x))
    t = np.linspace(0.1, np.pi - 0.1, num=50)
    r = error_estimate(x, t)
    assert_(isinstance(error_estimate(x, 1.0), float))
    assert_equal(r.shape, t.shape)
    assert_(np.max(np.abs(fun(t) - p(t))) <= 10 * np.max(r))


def test_error_estimate_large_degree():
    # (n + 1)! and f^(n+1) both overflow, no exception is raised
    x = equispaced_nodes(1023, 0, np.pi)
    assert_(np.isnan(error_estimate(x, 0.3)))
    assert_equal(factorial(1024), np.inf)
