"""
Batch gradient-descent trainer.

Validates inputs, then delegates the loop itself to a backend.
"""

import numbers
import warnings
import numpy as np
from dataclasses import dataclass
from typing import Optional

from .families import get_family
from .._utils import (
    check_array,
    check_vector,
    check_bias_column,
    check_consistent_length,
    check_width,
)
from ..exceptions import InvalidHyperparameter

DEFAULT_ALPHA = 0.01
DEFAULT_MAX_ITER = 1000
COST_RISE_RTOL = 1e-12


@dataclass(frozen=True)
class DescentConfig:
    """
    Training hyperparameters.

    Attributes
    ----------
    alpha : float
        Learning rate, finite and > 0
    max_iter : int
        Iteration budget, >= 0 (0 returns the initial parameters)
    tol : float, optional
        Opt-in early stop once successive costs differ by less than tol
    """
    alpha: float = DEFAULT_ALPHA
    max_iter: int = DEFAULT_MAX_ITER
    tol: Optional[float] = None

    def __post_init__(self):
        alpha = self.alpha
        if (isinstance(alpha, bool) or not isinstance(alpha, numbers.Real)
                or not np.isfinite(alpha) or alpha <= 0):
            raise InvalidHyperparameter(
                f"alpha must be a positive finite number, got {alpha!r}"
            )
        max_iter = self.max_iter
        if (isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral)
                or max_iter < 0):
            raise InvalidHyperparameter(
                f"max_iter must be a non-negative integer, got {max_iter!r}"
            )
        tol = self.tol
        if tol is not None:
            if (isinstance(tol, bool) or not isinstance(tol, numbers.Real)
                    or not np.isfinite(tol) or tol <= 0):
                raise InvalidHyperparameter(
                    f"tol must be a positive finite number, got {tol!r}"
                )


def gradient_descent(
    X: np.ndarray,
    y: np.ndarray,
    theta: Optional[np.ndarray] = None,
    alpha: float = DEFAULT_ALPHA,
    max_iter: int = DEFAULT_MAX_ITER,
    family='linear',
    tol: Optional[float] = None,
    backend='cpu',
):
    """
    Minimize a family's cost by batch gradient descent.

    Each iteration computes h = hypothesis(X, θ), the residual h - y and
    the gradient Xᵀ(h - y), updates every θ_j simultaneously by
    θ ← θ - (α/m)·gradient, and records J(θ) after the update.

    Parameters
    ----------
    X : ndarray, shape (m, n+1)
        Feature matrix; column 0 must be all ones
    y : ndarray, shape (m,)
        Labels (0/1 for the logistic family)
    theta : ndarray, shape (n+1,), optional
        Initial parameters, zeros by default. Not modified.
    alpha : float
        Learning rate
    max_iter : int
        Number of iterations (exact unless tol stops earlier)
    family : str or Family
        'linear' or 'logistic'
    tol : float, optional
        Opt-in convergence tolerance on successive costs
    backend : str or BackendBase
        See :func:`pydescent.get_backend`

    Returns
    -------
    DescentResult
        Final θ, cost history (one entry per iteration), iteration count

    Raises
    ------
    DimensionMismatch
        Label length or θ length disagrees with X
    InvalidHyperparameter
        Non-positive alpha, negative max_iter or non-positive tol
    NumericDegeneracy
        The cost became non-finite during training

    Examples
    --------
    >>> X = np.array([[1, 2], [1, 4], [1, 6]])
    >>> result = gradient_descent(X, [3, 7, 11], alpha=0.05, max_iter=5000)
    >>> result.theta
    array([1., 2.])
    """
    config = DescentConfig(alpha=alpha, max_iter=max_iter, tol=tol)
    family = get_family(family)

    X = check_bias_column(check_array(X))
    y = family.validate_labels(check_vector(y))
    check_consistent_length(X, y)

    if theta is None:
        theta = np.zeros(X.shape[1])
    else:
        theta = check_vector(theta, name='theta')
    check_width(X, theta)

    from .._backends import get_backend
    backend = get_backend(backend)

    result = backend.run_descent(
        X, y, theta,
        alpha=float(config.alpha),
        max_iter=int(config.max_iter),
        family=family,
        tol=config.tol,
    )

    history = result.cost_history
    # Rounding noise near the optimum is not an increase
    rises = np.diff(history) > COST_RISE_RTOL * np.maximum(1.0, np.abs(history[:-1]))
    if np.any(rises):
        k = int(np.argmax(rises)) + 2
        warnings.warn(
            f"Cost increased at iteration {k}; "
            f"learning rate alpha={config.alpha} may be too large",
            RuntimeWarning,
        )

    return result


__all__ = ["DescentConfig", "gradient_descent", "DEFAULT_ALPHA", "DEFAULT_MAX_ITER"]
