"""
PyTorch backend with FP64 precision.

Runs the descent loop on CUDA when available, otherwise on the CPU.
"""

import numpy as np
import warnings
from typing import Optional

from .base import BackendBase, DescentResult
from ..exceptions import NumericDegeneracy


class PyTorchBackend(BackendBase):
    """
    PyTorch backend.

    Same algorithm as the CPU backend, using float64 tensors so results
    agree with NumPy to machine precision.
    """

    # Same saturation bounds as the NumPy logistic family
    THRESH = 30.0
    EPS = float(np.finfo(np.float64).eps)

    def __init__(self, device: Optional[str] = None):
        """Initialize PyTorch backend."""
        self.name = "pytorch"
        self.precision = "fp64"

        try:
            import torch
            self.torch = torch
        except ImportError:
            raise ImportError(
                "PyTorch required for this backend. "
                "Install: pip install torch"
            )

        if device is None:
            if torch.cuda.is_available():
                device = 'cuda'
            else:
                warnings.warn("No CUDA GPU available, using CPU")
                device = 'cpu'

        if device == 'mps':
            raise RuntimeError(
                "FP64 not supported on Apple Metal. "
                "Use backend='cpu'."
            )

        self.device = torch.device(device)

    def _linkinv(self, z, family_name: str):
        torch = self.torch
        if family_name == 'linear':
            return z
        mu = torch.sigmoid(z)
        mu = torch.where(z < -self.THRESH, torch.full_like(mu, self.EPS), mu)
        mu = torch.where(z > self.THRESH, torch.full_like(mu, 1 - self.EPS), mu)
        return mu

    def _cost(self, h, y, family_name: str) -> float:
        torch = self.torch
        m = y.shape[0]
        if family_name == 'linear':
            r = h - y
            return float(torch.dot(r, r).item()) / (2 * m)
        terms = -y * torch.log(h) - (1 - y) * torch.log(1 - h)
        return float(torch.sum(terms).item()) / m

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
        """Batch gradient descent with torch tensors."""
        torch = self.torch
        if family.name not in ('linear', 'logistic'):
            raise ValueError(
                f"PyTorch backend does not support family '{family.name}'"
            )

        m = X.shape[0]
        X_t = torch.from_numpy(np.ascontiguousarray(X)).double().to(self.device)
        y_t = torch.from_numpy(np.ascontiguousarray(y)).double().to(self.device)
        theta_t = torch.from_numpy(np.array(theta, dtype=np.float64)).to(self.device)

        history = np.empty(max_iter, dtype=np.float64)
        step = alpha / m
        converged = False
        k = 0

        while k < max_iter:
            h = self._linkinv(X_t @ theta_t, family.name)
            theta_t = theta_t - step * (X_t.T @ (h - y_t))
            cost = self._cost(self._linkinv(X_t @ theta_t, family.name), y_t, family.name)

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
            theta=theta_t.cpu().numpy(),
            cost_history=history[:k].copy(),
            iterations=k,
            converged=converged,
            family=family.name,
            alpha=alpha,
            backend=self.name,
        )

    def get_device_info(self) -> dict:
        """Get backend information."""
        torch = self.torch
        info = {
            'backend': 'gpu' if self.device.type == 'cuda' else 'cpu',
            'device': str(self.device),
            'precision': 'fp64',
            'library': f'PyTorch {torch.__version__}',
        }
        if self.device.type == 'cuda':
            info['gpu_name'] = torch.cuda.get_device_name(self.device)
        return info
