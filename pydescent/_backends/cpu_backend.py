"""
CPU backend using NumPy.

This is the reference implementation.
"""

import numpy as np
from typing import Optional

from .base import BackendBase, DescentResult
from ..exceptions import NumericDegeneracy


class CPUBackend(BackendBase):
    """
    CPU backend using NumPy.

    Always uses FP64 precision.
    """

    def __init__(self):
        self.name = "cpu"
        self.precision = "fp64"

    def run_descent(
        self,
        X: np.ndarray,
        y: np.ndarray,
        theta: np.ndarray,
        alpha: float,
        max_iter: int,
        family,
        tol: Optional[float] = None
    ) -> DescentResult:
        """Batch gradient descent in NumPy."""
        m = X.shape[0]
        theta = np.array(theta, dtype=np.float64)
        history = np.empty(max_iter, dtype=np.float64)
        step = alpha / m
        converged = False
        k = 0

        while k < max_iter:
            with np.errstate(over='ignore', invalid='ignore'):
                h = family.linkinv(X @ theta)
                residual = h - y
                # All j updated from the same pre-update theta
                theta = theta - step * (X.T @ residual)
                cost = family.cost(X, y, theta)

            if not np.isfinite(cost):
                raise NumericDegeneracy(
                    f"Cost became non-finite at iteration {k + 1} "
                    f"(alpha={alpha} may be too large)"
                )

            history[k] = cost
            k += 1

            if tol is not None and k > 1 and abs(history[k - 2] - cost) < tol:
                converged = True
                break

        return DescentResult(
            theta=theta,
            cost_history=history[:k].copy(),
            iterations=k,
            converged=converged,
            family=family.name,
            alpha=alpha,
            backend=self.name,
        )

    def get_device_info(self) -> dict:
        """Get backend information."""
        import scipy
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'library': f'NumPy {np.__version__}, SciPy {scipy.__version__}',
        }
