"""Interactive comparison of Lagrange and Newton interpolation.

Reads the degree n and an evaluation point from standard input and prints
both interpolants of 4 cos(2x) on [0, pi] at that point.
"""
import numpy as np
from scipy_polyinterp.interpolate import interpolate_fun, format_divided_differences_table


def report(res):
    """Render an `InterpResult` as the text printed by `main`."""
    lines = [
        f"\nResults at x = {res.t}:\n",
        f"Lagrange Polynomial Ln(x) = {res.Ln}",
        f"Newton Polynomial Pn(x) = {res.Pn}",
        f"Exact Function f(x) = {res.f}",
        f"Interpolation Error Estimate Rn(x) = {res.error}",
        f"\nLagrange Polynomial Expression:\nLn(x) = {res.lagrange_expression}",
        f"\nNewton Polynomial Expression:\nPn(x) = {res.newton_expression}",
        "",
        format_divided_differences_table(res.x, res.table),
    ]
    return "\n".join(lines)


def main():
    # malformed input raises ValueError and ends the run
    n = int(input("Enter the degree of the polynomial (n): "))
    t = float(input("Enter the value of x to evaluate: "))

    res = interpolate_fun(n, t, t_span=(0, np.pi))
    print(report(res))


if __name__ == "__main__":
    main()
