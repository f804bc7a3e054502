"""
Exception hierarchy.

Every failure is raised where it is detected; a training run either
completes or aborts with one of these.
"""


class DescentError(Exception):
    """Base class for all PyDescent errors."""
    pass


class DimensionMismatch(DescentError, ValueError):
    """Row width, parameter length or label length disagree."""
    pass


class NumericDegeneracy(DescentError, ArithmeticError):
    """Zero-variance column, log of zero, or a non-finite cost."""
    pass


class InvalidHyperparameter(DescentError, ValueError):
    """Learning rate, iteration count, tolerance or threshold out of range."""
    pass


__all__ = [
    "DescentError",
    "DimensionMismatch",
    "NumericDegeneracy",
    "InvalidHyperparameter",
]
