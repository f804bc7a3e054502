"""
Utility functions.
"""

import numpy as np

from .exceptions import DimensionMismatch


def check_array(X, name='X', dtype=np.float64):
    """Validate array input."""
    try:
        X = np.asarray(X, dtype=dtype)
    except ValueError as e:
        raise DimensionMismatch(f"{name} rows must all have the same length") from e
    if X.ndim != 2:
        raise DimensionMismatch(f"{name} must be 2-dimensional, got {X.ndim}-d")
    if not np.all(np.isfinite(X)):
        raise ValueError(f"{name} contains NaN or Inf")
    return X


def check_vector(y, name='y', dtype=np.float64):
    """Validate vector input."""
    y = np.asarray(y, dtype=dtype)
    if y.ndim != 1:
        raise DimensionMismatch(f"{name} must be 1-dimensional, got {y.ndim}-d")
    if not np.all(np.isfinite(y)):
        raise ValueError(f"{name} contains NaN or Inf")
    return y


def check_bias_column(X, name='X'):
    """Column 0 must be the constant bias column."""
    if X.shape[1] == 0 or not np.all(X[:, 0] == 1.0):
        raise ValueError(f"First column of {name} must be the bias column of ones")
    return X


def check_consistent_length(X, y, x_name='X', y_name='y'):
    """Label vector must have one entry per row."""
    if X.shape[0] != y.shape[0]:
        raise DimensionMismatch(
            f"{y_name} has {y.shape[0]} entries but {x_name} has {X.shape[0]} rows"
        )


def check_width(X, theta, x_name='X'):
    """Row width must equal parameter length."""
    width = X.shape[-1]
    if width != theta.shape[0]:
        raise DimensionMismatch(
            f"{x_name} rows have {width} values but theta has {theta.shape[0]}"
        )
