"""
Model families.

A family pairs a hypothesis function with the cost function it is trained
against, so the two can never be mismatched.
"""

import numpy as np
from abc import ABC, abstractmethod
from scipy.special import expit

from .._utils import check_consistent_length, check_vector, check_width
from ..exceptions import NumericDegeneracy


def _as_rows(X: np.ndarray) -> np.ndarray:
    X = np.asarray(X, dtype=np.float64)
    if X.ndim not in (1, 2):
        raise ValueError(f"X must be a row or a matrix, got {X.ndim}-d")
    return X


class Family(ABC):
    """Base class for model families."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Family name."""
        pass

    @abstractmethod
    def linkinv(self, z: np.ndarray) -> np.ndarray:
        """Map the linear predictor z = X θ to a prediction."""
        pass

    @abstractmethod
    def loss(self, h: np.ndarray, y: np.ndarray) -> float:
        """Average loss of predictions h against labels y."""
        pass

    def validate_labels(self, y: np.ndarray) -> np.ndarray:
        """Check that labels are admissible for this family."""
        return y

    def hypothesis(self, X: np.ndarray, theta: np.ndarray) -> np.ndarray:
        """
        Predicted value per row.

        Parameters
        ----------
        X : ndarray, shape (m, n+1) or (n+1,)
            Feature matrix or a single feature row
        theta : ndarray, shape (n+1,)
            Parameter vector

        Returns
        -------
        ndarray, shape (m,), or float for a single row
        """
        X = _as_rows(X)
        theta = np.asarray(theta, dtype=np.float64)
        check_width(X, theta)
        return self.linkinv(X @ theta)

    def cost(self, X: np.ndarray, y: np.ndarray, theta: np.ndarray) -> float:
        """Cost J(θ) over all rows of X."""
        X = _as_rows(X)
        if X.ndim == 1:
            X = X[np.newaxis, :]
        y = check_vector(y)
        theta = np.asarray(theta, dtype=np.float64)
        check_width(X, theta)
        check_consistent_length(X, y)
        return self.loss(self.linkinv(X @ theta), y)

    def __repr__(self):
        return f"{type(self).__name__}()"


class Linear(Family):
    """Identity hypothesis with squared-error cost."""

    @property
    def name(self) -> str:
        return "linear"

    def linkinv(self, z: np.ndarray) -> np.ndarray:
        return z

    def loss(self, h: np.ndarray, y: np.ndarray) -> float:
        m = y.shape[0]
        r = h - y
        return float(r @ r) / (2 * m)


class Logistic(Family):
    """Sigmoid hypothesis with log-loss cost."""

    # Beyond these the sigmoid rounds to 0 or 1 in float64
    THRESH = 30.0
    MTHRESH = -30.0
    EPS = np.finfo(np.float64).eps

    @property
    def name(self) -> str:
        return "logistic"

    def linkinv(self, z: np.ndarray) -> np.ndarray:
        z = np.asarray(z, dtype=np.float64)
        mu = expit(z)
        mu = np.where(z < self.MTHRESH, self.EPS, mu)
        mu = np.where(z > self.THRESH, 1 - self.EPS, mu)
        if mu.ndim == 0:
            return float(mu)
        return mu

    def validate_labels(self, y: np.ndarray) -> np.ndarray:
        if not np.all((y == 0) | (y == 1)):
            raise ValueError("Logistic labels must be 0 or 1")
        return y

    def loss(self, h: np.ndarray, y: np.ndarray) -> float:
        m = y.shape[0]
        if np.any((h == 0) & (y != 0)) or np.any((h == 1) & (y != 1)):
            raise NumericDegeneracy(
                "Log-loss undefined: a prediction saturated to exactly 0 or 1"
            )
        with np.errstate(divide='ignore', invalid='ignore'):
            terms = -y * np.log(h) - (1 - y) * np.log(1 - h)
        # 0 * log(0) is 0 for labels that switch the term off
        terms = np.where(((h == 0) & (y == 0)) | ((h == 1) & (y == 1)), 0.0, terms)
        j = float(np.sum(terms)) / m
        if not np.isfinite(j):
            raise NumericDegeneracy(f"Log-loss is not finite: {j}")
        return j


_FAMILIES = {
    "linear": Linear,
    "logistic": Logistic,
}


def get_family(family) -> Family:
    """Resolve a family name or instance."""
    if isinstance(family, Family):
        return family
    try:
        return _FAMILIES[family]()
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown family: {family!r}\n"
            f"Valid options: {', '.join(repr(k) for k in _FAMILIES)}"
        ) from None


__all__ = ["Family", "Linear", "Logistic", "get_family"]
