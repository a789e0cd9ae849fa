import numpy as np
from .function import fun_derivative


def factorial(n):
    """Compute n! iteratively as a float.

    Parameters
    ----------
    n : int
        Non-negative integer.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"`n` must be an integer, got {n!r}.")
    if n < 0:
        raise ValueError(f"Factorial is undefined for negative `n`, got {n}.")

    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
    return result


def error_estimate(x, t, n=None, derivative=fun_derivative):
    """Estimate the interpolation error with the Lagrange remainder.

    Computes::

        R_n(t) = | f^(n+1)(t) prod_i (t - x_i) / (n + 1)! |

    Note that the derivative is evaluated at `t` itself rather than at the
    unknown intermediate point of the remainder theorem, so the result is
    an estimate, not a rigorous bound.

    Parameters
    ----------
    x : array_like, shape (n + 1,)
        Interpolation nodes.
    t : float or array_like
        Points to estimate the error at.
    n : int, optional
        Polynomial degree. Default is ``len(x) - 1``.
    derivative : callable, optional
        ``derivative(order, t)`` returning the `order`-th derivative of the
        interpolated function. Default is the derivative of 4 cos(2x).

    Returns
    -------
    r : float or ndarray
        Error estimate, a float for scalar ``t``.
    """
    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise ValueError("`x` must be 1-dimensional.")
    if n is None:
        n = x.size - 1

    t = np.asarray(t, dtype=float)
    product = np.ones_like(t)
    for xi in x:
        product = product * (t - xi)

    # (n + 1)! overflows to inf beyond n = 170 and f^(n+1) beyond n = 1022,
    # the estimate then degrades to 0 or nan instead of raising
    with np.errstate(over="ignore", invalid="ignore"):
        r = np.abs(derivative(n + 1, t) * product / factorial(n + 1))
    if t.ndim == 0:
        return float(r)
    return r
