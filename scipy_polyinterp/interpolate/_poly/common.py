import numpy as np


def validate_degree(n):
    """Helper function for checking the polynomial degree."""
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"`n` must be an integer, got {n!r}.")
    if n < 0:
        raise ValueError(f"`n` must be non-negative, got {n}.")
    return int(n)


def validate_span(t_span):
    a, b = map(float, t_span)
    if not (np.isfinite(a) and np.isfinite(b)):
        raise ValueError("Both bounds of `t_span` must be finite.")
    if not a < b:
        raise ValueError(f"`t_span` must satisfy a < b, got ({a}, {b}).")
    return a, b


def equispaced_nodes(n, a, b):
    """Compute n + 1 equally spaced interpolation nodes on [a, b].

    Parameters
    ----------
    n : int
        Polynomial degree, n >= 0.
    a, b : float
        Interval bounds with a < b.

    Returns
    -------
    x : ndarray, shape (n + 1,)
        Nodes ``a + i * (b - a) / n`` with ``x[0] = a`` and ``x[n] = b``.
        For n = 0 the single node ``a`` is returned.
    """
    n = validate_degree(n)
    a, b = validate_span((a, b))

    # a single node sits at the left bound
    return np.linspace(a, b, num=n + 1)


def format_number(value, decimals=2):
    """Render a number with at most `decimals` digits after the point.

    Trailing zeros are dropped, e.g. 4.0 -> "4", 1.5708 -> "1.57".
    """
    s = f"{float(value):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s
