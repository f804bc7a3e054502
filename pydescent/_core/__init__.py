"""
Core algorithms (backend-agnostic).
"""

from .families import Family, Linear, Logistic, get_family
from .normalization import (
    NormalizationStats,
    fit_normalization,
    normalize,
    fit_normalize,
)
from .gradient_descent import DescentConfig, gradient_descent
from .thresholding import classify

__all__ = [
    "Family",
    "Linear",
    "Logistic",
    "get_family",
    "NormalizationStats",
    "fit_normalization",
    "normalize",
    "fit_normalize",
    "DescentConfig",
    "gradient_descent",
    "classify",
]
