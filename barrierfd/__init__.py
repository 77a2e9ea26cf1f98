"""Finite-difference pricing of up-and-out barrier call options under a CGMY-type jump model."""

__version__ = "0.1.0"

__all__ = ["math_utils", "solvers", "option", "cli"]