import numpy as np
import matplotlib.pyplot as plt
from scipy_polyinterp.interpolate import (
    interpolate_fun, equispaced_nodes, fun, make_interp_poly,
)


"""Lagrange and Newton interpolation of f(x) = 4 cos(2x) on [0, pi].

Plots the interpolants of several degrees against f and compares the true
error with the Lagrange remainder estimate.
"""
if __name__ == "__main__":
    # interpolation interval
    a, b = 0, np.pi
    t_span = (a, b)

    # evaluation points
    t = np.linspace(a, b, num=200)

    fig, ax = plt.subplots(2, 1)
    ax[0].plot(t, fun(t), "-k", label="f(x)")

    for n, style in zip([2, 4, 8], ["--r", "--g", "--b"]):
        res = interpolate_fun(n, t, t_span=t_span)
        print(f"n = {n}: max |Ln - Pn| = {np.max(np.abs(res.Ln - res.Pn)):.3e}")

        ax[0].plot(res.x, res.y, "o" + style[-1])
        ax[0].plot(t, res.Pn, style, label=f"P_{n}(x)")

        ax[1].semilogy(t, np.abs(res.f - res.Pn), style, label=f"|f - P_{n}|")
        ax[1].semilogy(t, res.error, ":" + style[-1], label=f"R_{n}(x)")

    ax[0].grid()
    ax[0].legend()
    ax[1].grid()
    ax[1].legend()

    # both forms represent the same polynomial
    x = equispaced_nodes(6, a, b)
    lagrange = make_interp_poly(x, fun(x), method="Lagrange")
    newton = make_interp_poly(x, fun(x), method="Newton")
    print(f"Ln(x) = {lagrange.expression}")
    print(f"Pn(x) = {newton.expression}")
    print(f"max |Ln - Pn| on [a, b]: {np.max(np.abs(lagrange(t) - newton(t))):.3e}")

    plt.show()
