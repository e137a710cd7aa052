"""A table of polynomial, power and logarithmic functions with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["functions", "interface"]