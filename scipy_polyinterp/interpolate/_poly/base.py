import numpy as np


def check_arguments(x, y):
    """Helper function for checking arguments common to all interpolants."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if x.ndim != 1:
        raise ValueError("`x` must be 1-dimensional.")
    if y.ndim != 1:
        raise ValueError("`y` must be 1-dimensional.")

    if x.shape != y.shape:
        raise ValueError("`x` and `y` must be of same shape.")
    if x.size == 0:
        raise ValueError("At least one interpolation node is required.")

    if not np.isfinite(x).all():
        raise ValueError("All interpolation nodes `x` must be finite.")
    if not np.isfinite(y).all():
        raise ValueError("All sample values `y` must be finite.")

    # coincident nodes would divide by zero in the basis polynomials and
    # in the divided differences
    if np.unique(x).size != x.size:
        raise ValueError("Interpolation nodes must be distinct.")

    return x, y


def _readonly(a):
    a = np.array(a, dtype=float)
    a.setflags(write=False)
    return a


class InterpPolynomial:
    """Base class for interpolation polynomials through (x[i], y[i]).

    In order to implement a new interpolant you need to follow the guidelines:

        1. A constructor must accept the nodes ``x`` and the sample values
           ``y`` and pass them to the base class, which validates them
           with `check_arguments`.
        2. An interpolant must implement a private method
           `_call_impl(self, t)` which evaluates the polynomial at an
           ndarray ``t`` of arbitrary shape.
        3. An interpolant must implement a private method
           `_expression_impl(self)` which returns the textual formula of
           the polynomial with numeric literals rounded to two decimals.

    Parameters
    ----------
    x : array_like, shape (n + 1,)
        Distinct interpolation nodes.
    y : array_like, shape (n + 1,)
        Sample values at the nodes.

    Attributes
    ----------
    x : ndarray
        Read-only copy of the nodes.
    y : ndarray
        Read-only copy of the sample values.
    n : int
        Degree of the polynomial, ``len(x) - 1``.
    """
    def __init__(self, x, y):
        x, y = check_arguments(x, y)
        self.x = _readonly(x)
        self.y = _readonly(y)
        self.n = self.x.size - 1

    def __call__(self, t):
        """Evaluate the interpolation polynomial.

        Parameters
        ----------
        t : float or array_like
            Points to evaluate at.

        Returns
        -------
        p : float or ndarray
            Computed values, a float for scalar ``t``.
        """
        t = np.asarray(t, dtype=float)
        p = self._call_impl(t)
        if t.ndim == 0:
            return float(p)
        return p

    @property
    def expression(self):
        """Textual formula of the polynomial."""
        return self._expression_impl()

    def _call_impl(self, t):
        raise NotImplementedError

    def _expression_impl(self):
        raise NotImplementedError
