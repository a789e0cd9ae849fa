"""The test function f(x) = 4 cos(2x) and its closed-form derivatives."""
import numpy as np


AMPLITUDE = 4.0
FREQUENCY = 2.0


def fun(x):
    """Evaluate f(x) = 4 cos(2x) for a scalar or an array."""
    return AMPLITUDE * np.cos(FREQUENCY * np.asarray(x, dtype=float))


def fun_derivative(order, x):
    """Evaluate the `order`-th derivative of f at x.

    The derivatives of 4 cos(2x) cycle with period four::

        order % 4 == 0:  4 2^order cos(2x)
        order % 4 == 1: -4 2^order sin(2x)
        order % 4 == 2: -4 2^order cos(2x)
        order % 4 == 3:  4 2^order sin(2x)
    """
    if isinstance(order, (bool, np.bool_)) or not isinstance(order, (int, np.integer)):
        raise ValueError(f"`order` must be an integer, got {order!r}.")
    if order < 0:
        raise ValueError(f"`order` must be non-negative, got {order}.")

    x = np.asarray(x, dtype=float)
    r = order % 4
    if r == 0:
        g = np.cos(FREQUENCY * x)
    elif r == 1:
        g = -np.sin(FREQUENCY * x)
    elif r == 2:
        g = -np.cos(FREQUENCY * x)
    else:
        g = np.sin(FREQUENCY * x)

    # large orders overflow to inf like IEEE-754 pow
    with np.errstate(over="ignore", invalid="ignore"):
        return AMPLITUDE * np.power(FREQUENCY, float(order)) * g
