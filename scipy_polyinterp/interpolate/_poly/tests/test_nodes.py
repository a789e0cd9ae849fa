from itertools import product
import numpy as np
from numpy.testing import assert_, assert_equal, assert_allclose
import pytest
from scipy.optimize._numdiff import approx_derivative
from scipy_polyinterp.interpolate import equispaced_nodes, fun, fun_derivative


parameters_nodes = list(product(
    [1, 2, 3, 7, 15], # n
    [(0, np.pi), (-1, 1), (-5.5, 7.25)], # interval
))
@pytest.mark.parametrize("n, interval", parameters_nodes)
def test_equispaced_nodes(n, interval):
    a, b = interval
    x = equispaced_nodes(n, a, b)

    assert_equal(x.shape, (n + 1,))
    assert_equal(x[0], a)
    assert_equal(x[-1], b)
    assert_(np.all(np.diff(x) > 0))
    assert_allclose(np.diff(x), (b - a) / n, rtol=0, atol=1e-12)


def test_single_node():
    x = equispaced_nodes(0, 0, np.pi)
    assert_equal(x, [0.0])


@pytest.mark.parametrize("n", [-1, 2.5, True, "3"])
def test_invalid_degree(n):
    with pytest.raises(ValueError, match="`n` must be"):
        equispaced_nodes(n, 0, 1)


@pytest.mark.parametrize("a, b", [(1, 1), (2, 1), (0, np.inf), (np.nan, 1)])
def test_invalid_interval(a, b):
    with pytest.raises(ValueError, match="`t_span`"):
        equispaced_nodes(3, a, b)


def test_fun():
    assert_allclose(fun([0, np.pi / 2, np.pi]), [4, -4, 4], rtol=0, atol=1e-14)
    assert_allclose(fun(np.pi / 4), 0, rtol=0, atol=1e-14)


@pytest.mark.parametrize("order", range(9))
def test_fun_derivative(order):
    x = np.linspace(0, np.pi, num=7)

    if order == 0:
        assert_allclose(fun_derivative(0, x), fun(x))

    # derivatives repeat up to the factor 2^4 after four steps
    assert_allclose(fun_derivative(order + 4, x), 16 * fun_derivative(order, x))

    # next derivative agrees with finite differences of the current one
    for xi in x:
        dy = approx_derivative(
            lambda z: np.atleast_1d(fun_derivative(order, z)),
            np.array([xi]), method="3-point",
        )
        assert_allclose(dy[0], fun_derivative(order + 1, xi), rtol=1e-5, atol=1e-5 * 2**order)


@pytest.mark.parametrize("order", [-1, 1.0])
def test_fun_derivative_invalid_order(order):
    with pytest.raises(ValueError, match="`order` must be"):
        fun_derivative(order, 0.0)


def test_fun_derivative_overflow():
    # 2^order exceeds the float range, the derivative saturates to +-inf
    x = np.array([0.3, 1.0])
    assert_equal(fun_derivative(1024, x), [np.inf, -np.inf])
    assert_equal(fun_derivative(1025, 0.3), -np.inf)
    assert_(np.isfinite(fun_derivative(1021, 0.3)))
