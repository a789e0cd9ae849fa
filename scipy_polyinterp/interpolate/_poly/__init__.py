"""Polynomial interpolation on equally spaced nodes."""
from .interp import interpolate_fun, make_interp_poly, InterpResult, METHODS
from .base import InterpPolynomial
from .common import equispaced_nodes
from .function import fun, fun_derivative
from .lagrange import LagrangePolynomial, lagrange_polynomial
from .newton import (
    NewtonPolynomial, newton_polynomial,
    divided_differences, divided_differences_table,
    format_divided_differences_table,
)
from .error import error_estimate, factorial
