import inspect
from warnings import warn
import numpy as np
from scipy.optimize import OptimizeResult
from scipy.integrate._ivp.common import warn_extraneous
from .base import InterpPolynomial
from .common import equispaced_nodes, validate_degree, validate_span
from .error import error_estimate
from .function import fun
from .lagrange import LagrangePolynomial
from .newton import NewtonPolynomial, divided_differences_table


METHODS = {
    "Lagrange": LagrangePolynomial,
    "Newton": NewtonPolynomial,
}


# equispaced interpolation is ill-conditioned beyond this degree
MAX_BENIGN_DEGREE = 15


class InterpResult(OptimizeResult):
    pass


def make_interp_poly(x, y, method="Newton"):
    """Construct the interpolation polynomial through (x[i], y[i]).

    Parameters
    ----------
    x : array_like, shape (n + 1,)
        Distinct interpolation nodes.
    y : array_like, shape (n + 1,)
        Sample values at the nodes.
    method : string or `InterpPolynomial`, optional
        Representation of the polynomial:

            * 'Newton' (default): Newton form with divided differences.
            * 'Lagrange': Lagrange form, evaluated term by term.

        You can also pass an arbitrary class derived from
        `InterpPolynomial`.

    Returns
    -------
    poly : `InterpPolynomial`
        Callable interpolation polynomial.
    """
    if method not in METHODS and not (
            inspect.isclass(method) and issubclass(method, InterpPolynomial)):
        raise ValueError(f"`method` must be one of {list(METHODS)} or InterpPolynomial class.")

    if method in METHODS:
        method = METHODS[method]

    return method(x, y)


def interpolate_fun(n, t, t_span=(0, np.pi), **extraneous):
    """Interpolate f(x) = 4 cos(2x) on equally spaced nodes and compare.

    Both the Lagrange and the Newton form of the degree `n` interpolation
    polynomial are evaluated at `t`, together with the exact function value
    and the Lagrange remainder estimate.

    Parameters
    ----------
    n : int
        Polynomial degree, n >= 0. For n = 0 the single node ``t_span[0]``
        is used and the interpolant is constant.
    t : float or array_like
        Points to evaluate at.
    t_span : 2-member sequence, optional
        Interpolation interval (a, b) with a < b. Default is (0, pi).

    Returns
    -------
    Bunch object with the following fields defined:
    x : ndarray, shape (n + 1,)
        Interpolation nodes.
    y : ndarray, shape (n + 1,)
        Sample values f(x).
    t : float or ndarray
        Evaluation points.
    degree : int
        Polynomial degree n.
    coeffs : ndarray, shape (n + 1,)
        Divided differences used by the Newton form.
    table : list of ndarray
        Triangular table of divided differences.
    Ln, Pn : float or ndarray
        Values of the Lagrange and the Newton form at `t`.
    f : float or ndarray
        Exact function values at `t`.
    error : float or ndarray
        Lagrange remainder estimate at `t`.
    lagrange_expression, newton_expression : str
        Formulas of both forms with the numbers substituted.
    """
    warn_extraneous(extraneous)

    n = validate_degree(n)
    a, b = validate_span(t_span)
    if n > MAX_BENIGN_DEGREE:
        warn(f"Equispaced interpolation of degree {n} > {MAX_BENIGN_DEGREE} "
             "is ill-conditioned, expect large rounding errors.",
             stacklevel=2)

    x = equispaced_nodes(n, a, b)
    y = fun(x)

    lagrange = make_interp_poly(x, y, method="Lagrange")
    newton = make_interp_poly(x, y, method="Newton")

    t = np.asarray(t, dtype=float)
    f = fun(t)
    if t.ndim == 0:
        t = float(t)
        f = float(f)

    return InterpResult(
        x=x, y=y, t=t, degree=n,
        coeffs=newton.coeffs,
        table=divided_differences_table(x, y),
        Ln=lagrange(t),
        Pn=newton(t),
        f=f,
        error=error_estimate(x, t, n),
        lagrange_expression=lagrange.expression,
        newton_expression=newton.expression,
    )
