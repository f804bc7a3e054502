"""
Abstract base classes for backends.

Defines the interface all backends must implement.
"""

from abc import ABC, abstractmethod
import numpy as np
from typing import Optional
from dataclasses import dataclass, field


@dataclass
class DescentResult:
    """Outcome of one gradient-descent run."""
    theta: np.ndarray          # Final parameter vector
    cost_history: np.ndarray   # Cost after each iteration
    iterations: int            # Iterations actually run
    converged: bool            # Stopped on tolerance?
    family: str                # 'linear' or 'logistic'
    alpha: float               # Learning rate used
    backend: str = field(default="cpu")

    @property
    def final_cost(self) -> float:
        """Last recorded cost (NaN when no iteration ran)."""
        if self.cost_history.size == 0:
            return float('nan')
        return float(self.cost_history[-1])


class BackendBase(ABC):
    """Abstract base class for all backends."""

    name = "base"

    @abstractmethod
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
        """
        Run batch gradient descent - complete computation.

        Inputs are already validated. Backends implement the loop with
        their native types, only converting at entry/exit.

        Parameters
        ----------
        X : ndarray, shape (m, n+1)
            Feature matrix including the bias column
        y : ndarray, shape (m,)
            Label vector
        theta : ndarray, shape (n+1,)
            Initial parameters (never modified)
        alpha : float
            Learning rate
        max_iter : int
            Iteration budget
        family : Family
            Hypothesis/cost pair
        tol : float, optional
            Stop once successive costs differ by less than this

        Returns
        -------
        DescentResult
            Final parameters and cost history (numpy arrays)

        Raises
        ------
        NumericDegeneracy
            If the cost becomes non-finite
        """
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
