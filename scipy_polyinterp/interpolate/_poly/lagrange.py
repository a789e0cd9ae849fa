import numpy as np
from .base import InterpPolynomial
from .common import format_number


class LagrangePolynomial(InterpPolynomial):
    """Interpolation polynomial in Lagrange form.

    The polynomial is evaluated directly from::

        L(t) = sum_i y_i prod_{j != i} (t - x_j) / (x_i - x_j)

    i.e. every basis polynomial is recomputed for each evaluation. No
    barycentric weights are used.

    Parameters
    ----------
    x : array_like, shape (n + 1,)
        Distinct interpolation nodes.
    y : array_like, shape (n + 1,)
        Sample values at the nodes.
    """
    def _call_impl(self, t):
        x, y = self.x, self.y
        result = np.zeros_like(t)
        for i in range(x.size):
            term = y[i] * np.ones_like(t)
            for j in range(x.size):
                if j != i:
                    term = term * ((t - x[j]) / (x[i] - x[j]))
            result = result + term
        return result

    def _expression_impl(self):
        x, y = self.x, self.y
        terms = []
        for i in range(x.size):
            factors = [format_number(y[i])]
            for j in range(x.size):
                if j != i:
                    factors.append(
                        f"((x - {format_number(x[j])}) / "
                        f"({format_number(x[i])} - {format_number(x[j])}))"
                    )
            terms.append(" * ".join(factors))
        return " + ".join(terms)


def lagrange_polynomial(x, y, t):
    """Evaluate the Lagrange interpolation polynomial at `t`.

    Returns
    -------
    value : float or ndarray
        Ln(t).
    expression : str
        Formula of Ln(x) with the nodes and sample values substituted.
    """
    poly = LagrangePolynomial(x, y)
    return poly(t), poly.expression
