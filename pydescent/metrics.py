"""
Evaluation helpers.
"""

import numpy as np

from .exceptions import DimensionMismatch


def _paired(y_true, y_pred):
    y_true = np.asarray(y_true, dtype=np.float64).ravel()
    y_pred = np.asarray(y_pred, dtype=np.float64).ravel()
    if y_true.shape != y_pred.shape:
        raise DimensionMismatch(
            f"y_true has {y_true.size} entries, y_pred has {y_pred.size}"
        )
    if y_true.size == 0:
        raise ValueError("Cannot evaluate empty predictions")
    return y_true, y_pred


def mean_squared_error(y_true, y_pred) -> float:
    """Mean of squared residuals."""
    y_true, y_pred = _paired(y_true, y_pred)
    return float(np.mean((y_pred - y_true) ** 2))


def r_squared(y_true, y_pred) -> float:
    """Coefficient of determination (0.0 when y_true is constant)."""
    y_true, y_pred = _paired(y_true, y_pred)
    rss = np.sum((y_true - y_pred) ** 2)
    tss = np.sum((y_true - np.mean(y_true)) ** 2)
    return float(1 - rss / tss) if tss > 0 else 0.0


def accuracy(y_true, y_pred) -> float:
    """Share of labels predicted exactly."""
    y_true, y_pred = _paired(y_true, y_pred)
    return float(np.mean(y_true == y_pred))


def confusion_matrix(y_true, y_pred) -> np.ndarray:
    """
    2x2 confusion matrix for 0/1 labels.

    Returns
    -------
    ndarray
        [[tn, fp],
         [fn, tp]]
    """
    y_true, y_pred = _paired(y_true, y_pred)
    for name, v in (('y_true', y_true), ('y_pred', y_pred)):
        if not np.all((v == 0) | (v == 1)):
            raise ValueError(f"{name} must contain only 0/1 labels")
    cm = np.zeros((2, 2), dtype=int)
    for t, p in zip(y_true.astype(int), y_pred.astype(int)):
        cm[t, p] += 1
    return cm


__all__ = ["mean_squared_error", "r_squared", "accuracy", "confusion_matrix"]
