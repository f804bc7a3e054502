"""
PyDescent: linear and logistic regression by batch gradient descent.

Copyright (C) 2026 PyDescent developers
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Main user-facing API
from .linear import linreg, LinearRegression
from .logistic import logreg, LogisticRegression

# Core routines
from ._core import (
    Family,
    Linear,
    Logistic,
    get_family,
    NormalizationStats,
    fit_normalization,
    normalize,
    fit_normalize,
    DescentConfig,
    gradient_descent,
    classify,
)
from .exceptions import (
    DescentError,
    DimensionMismatch,
    NumericDegeneracy,
    InvalidHyperparameter,
)

# Backend utilities (for advanced users)
from ._backends import get_backend, list_available_backends, DescentResult

__all__ = [
    'linreg',
    'LinearRegression',
    'logreg',
    'LogisticRegression',
    'Family',
    'Linear',
    'Logistic',
    'get_family',
    'NormalizationStats',
    'fit_normalization',
    'normalize',
    'fit_normalize',
    'DescentConfig',
    'gradient_descent',
    'classify',
    'DescentError',
    'DimensionMismatch',
    'NumericDegeneracy',
    'InvalidHyperparameter',
    'get_backend',
    'list_available_backends',
    'DescentResult',
]
