"""
Mean normalization of feature columns.

Statistics are fitted once on a reference matrix (the training set) and
then applied to that matrix and to any matrix evaluated against the
trained model. A test matrix is never normalized with its own statistics.
"""

import numpy as np
from dataclasses import dataclass

from .._utils import check_array, check_bias_column
from ..exceptions import DimensionMismatch, NumericDegeneracy


@dataclass(frozen=True)
class NormalizationStats:
    """Per-column mean and standard deviation (bias column excluded)."""
    mean: np.ndarray
    std: np.ndarray

    @property
    def n_features(self) -> int:
        return self.mean.shape[0]

    def _check(self, X: np.ndarray) -> np.ndarray:
        X = check_array(X)
        if X.shape[1] != self.n_features + 1:
            raise DimensionMismatch(
                f"X has {X.shape[1] - 1} feature columns, "
                f"statistics were fitted on {self.n_features}"
            )
        return X

    def apply(self, X: np.ndarray) -> np.ndarray:
        """Normalize X with these statistics."""
        X = self._check(X)
        out = X.copy()
        out[:, 1:] = (X[:, 1:] - self.mean) / self.std
        return out

    def inverse(self, X: np.ndarray) -> np.ndarray:
        """Map normalized values back to the original scale."""
        X = self._check(X)
        out = X.copy()
        out[:, 1:] = X[:, 1:] * self.std + self.mean
        return out


def fit_normalization(X: np.ndarray) -> NormalizationStats:
    """
    Compute normalization statistics from a feature matrix.

    Parameters
    ----------
    X : ndarray, shape (m, n+1)
        Feature matrix whose first column is the bias

    Returns
    -------
    NormalizationStats
        Column means and population standard deviations (ddof=0)

    Raises
    ------
    NumericDegeneracy
        If any feature column has zero variance; dividing by its
        standard deviation would produce Inf/NaN.
    """
    X = check_bias_column(check_array(X))
    features = X[:, 1:]
    mean = features.mean(axis=0)
    std = features.std(axis=0)

    # Rounding in the mean can leave a tiny nonzero std on a constant column
    flat = np.flatnonzero(np.ptp(features, axis=0) == 0)
    if flat.size > 0:
        cols = ', '.join(str(j + 1) for j in flat)
        raise NumericDegeneracy(
            f"Zero variance in column(s) {cols}; cannot normalize"
        )

    return NormalizationStats(mean=mean, std=std)


def normalize(X: np.ndarray, stats: NormalizationStats) -> np.ndarray:
    """Normalize X using previously fitted statistics."""
    return stats.apply(X)


def fit_normalize(X: np.ndarray):
    """Fit statistics on X and return (normalized X, statistics)."""
    stats = fit_normalization(X)
    return stats.apply(X), stats


__all__ = [
    "NormalizationStats",
    "fit_normalization",
    "normalize",
    "fit_normalize",
]
