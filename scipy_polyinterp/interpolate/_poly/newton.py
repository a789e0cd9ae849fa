import numpy as np
from .base import InterpPolynomial, check_arguments
from .common import format_number


def divided_differences(x, y):
    """Compute the leading divided differences of Newton's formula.

    Parameters
    ----------
    x : array_like, shape (n + 1,)
        Distinct interpolation nodes.
    y : array_like, shape (n + 1,)
        Sample values at the nodes.

    Returns
    -------
    d : ndarray, shape (n + 1,)
        ``d[k] = f[x_0, ..., x_k]``.
    """
    x, y = check_arguments(x, y)
    n = x.size - 1
    d = y.copy()
    for order in range(1, n + 1):
        for i in range(n, order - 1, -1):
            d[i] = (d[i] - d[i - 1]) / (x[i] - x[i - order])
    return d


def divided_differences_table(x, y):
    """Compute the full triangular table of divided differences.

    Row ``i`` holds ``f[x_i], f[x_i, x_i+1], ..., f[x_i, ..., x_n]``, so the
    rows shrink from n + 1 entries down to one. The first row coincides
    with `divided_differences`.

    Returns
    -------
    table : list of ndarray
        Ragged table, ``table[i][j] = f[x_i, ..., x_i+j]``.
    """
    x, y = check_arguments(x, y)
    m = x.size
    table = [np.empty(m - i) for i in range(m)]
    for i in range(m):
        table[i][0] = y[i]

    for j in range(1, m):
        for i in range(m - j):
            table[i][j] = (table[i + 1][j - 1] - table[i][j - 1]) / (x[i + j] - x[i])
    return table


def format_divided_differences_table(x, table):
    lines = ["Table of divided differences:"]
    for i, row in enumerate(table):
        cells = " ".join(f"{format_number(v, 4):>10}" for v in row)
        lines.append(f"x_{i} = {format_number(x[i]):>6} | {cells}")
    return "\n".join(lines)


def _newton_eval(x, d, t):
    result = d[0] * np.ones_like(t)
    product = np.ones_like(t)
    for i in range(1, x.size):
        product = product * (t - x[i - 1])
        result = result + d[i] * product
    return result


def _newton_expression(x, d):
    terms = [format_number(d[0])]
    for i in range(1, x.size):
        factors = [format_number(d[i])]
        factors += [f"(x - {format_number(x[j])})" for j in range(i)]
        terms.append(f"({' * '.join(factors)})")
    return " + ".join(terms)


class NewtonPolynomial(InterpPolynomial):
    """Interpolation polynomial in Newton form.

    The polynomial::

        P(t) = d_0 + sum_{i >= 1} d_i prod_{k < i} (t - x_k)

    is evaluated with a running product, one multiplication per term.

    Parameters
    ----------
    x : array_like, shape (n + 1,)
        Distinct interpolation nodes.
    y : array_like, shape (n + 1,)
        Sample values at the nodes.

    Attributes
    ----------
    coeffs : ndarray
        Read-only divided differences ``f[x_0, ..., x_k]``.
    """
    def __init__(self, x, y):
        super().__init__(x, y)
        self.coeffs = divided_differences(self.x, self.y)
        self.coeffs.setflags(write=False)

    def _call_impl(self, t):
        return _newton_eval(self.x, self.coeffs, t)

    def _expression_impl(self):
        return _newton_expression(self.x, self.coeffs)


def newton_polynomial(x, coeffs, t):
    """Evaluate Newton's interpolation polynomial at `t`.

    Unlike `NewtonPolynomial`, this takes precomputed divided differences
    (see `divided_differences`) instead of the sample values.

    Returns
    -------
    value : float or ndarray
        Pn(t).
    expression : str
        Formula of Pn(x) with the nodes and coefficients substituted.
    """
    x, coeffs = check_arguments(x, coeffs)
    t = np.asarray(t, dtype=float)
    value = _newton_eval(x, coeffs, t)
    if t.ndim == 0:
        value = float(value)
    return value, _newton_expression(x, coeffs)
