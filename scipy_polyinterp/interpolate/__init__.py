from ._poly import (
    interpolate_fun, make_interp_poly, InterpResult, METHODS,
    InterpPolynomial, LagrangePolynomial, NewtonPolynomial,
    lagrange_polynomial, newton_polynomial,
    divided_differences, divided_differences_table,
    format_divided_differences_table,
    equispaced_nodes, fun, fun_derivative,
    error_estimate, factorial,
)
