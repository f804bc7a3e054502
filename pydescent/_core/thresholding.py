"""
Probability thresholding for logistic models.
"""

import numpy as np

from ..exceptions import InvalidHyperparameter

DEFAULT_THRESHOLD = 0.5


def classify(probability, threshold: float = DEFAULT_THRESHOLD):
    """
    Turn predicted probabilities into 0/1 labels.

    Returns 1 where probability > threshold, else 0. Scalars give an
    int, arrays give an int array of the same shape.
    """
    if not 0.0 <= threshold <= 1.0:
        raise InvalidHyperparameter(
            f"threshold must lie in [0, 1], got {threshold}"
        )
    labels = (np.asarray(probability, dtype=np.float64) > threshold).astype(int)
    if labels.ndim == 0:
        return int(labels)
    return labels


__all__ = ["classify", "DEFAULT_THRESHOLD"]
