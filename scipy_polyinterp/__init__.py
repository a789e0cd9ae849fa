"""Python implementation of classical polynomial interpolation in the style of scipy."""
