"""
Shared machinery for the user-facing models.

Input parsing, intercept handling, normalization and training are the
same for both families; subclasses add scoring and reporting.
"""

import numpy as np
import pandas as pd
from abc import ABC, abstractmethod
from typing import Optional, Union, List

from ._core.families import get_family
from ._core.gradient_descent import DEFAULT_ALPHA, DEFAULT_MAX_ITER, gradient_descent
from ._core.normalization import fit_normalization
from .preprocessing import add_intercept


class GradientDescentModel(ABC):
    """
    Base class: fit a family by batch gradient descent on construction.

    Subclasses set ``family`` and implement ``score`` and ``_fit_report``.
    """

    family = None
    title = "GRADIENT DESCENT RESULTS"

    def __init__(
        self,
        y: Union[str, np.ndarray],
        X: Union[List[str], np.ndarray],
        data: Optional[pd.DataFrame] = None,
        alpha: float = DEFAULT_ALPHA,
        max_iter: int = DEFAULT_MAX_ITER,
        normalize: bool = True,
        tol: Optional[float] = None,
        theta0: Optional[np.ndarray] = None,
        backend='auto',
    ):
        """
        Fit the model.

        Parameters
        ----------
        y : str or array
            Response variable
            - If string: column name in data
            - If array: numeric values
        X : list of str or array
            Predictor variables (no intercept column)
            - If list of strings: column names in data
            - If array: numeric matrix (m × n)
        data : DataFrame, optional
            Dataset containing y and X variables
        alpha : float
            Learning rate
        max_iter : int
            Number of gradient-descent iterations
        normalize : bool
            Mean-normalize predictors with statistics fitted here; the
            same statistics are reused by predict()
        tol : float, optional
            Opt-in early stop on successive cost change
        theta0 : array, optional
            Initial parameters (intercept first), zeros by default
        backend : str
            Computational backend: 'auto', 'cpu', 'pytorch'
        """
        # Parse inputs
        if isinstance(y, str):
            if data is None:
                raise ValueError("Must provide data when y is a string")
            self.y_values = np.asarray(data[y].values, dtype=np.float64)
            self.y_name = y
        else:
            self.y_values = np.asarray(y, dtype=np.float64)
            self.y_name = 'y'

        if isinstance(X, list) and all(isinstance(x, str) for x in X):
            if data is None:
                raise ValueError("Must provide data when X is list of strings")
            self.X_values = np.asarray(data[X].values, dtype=np.float64)
            self.X_names = list(X)
        else:
            self.X_values = np.asarray(X, dtype=np.float64)
            if self.X_values.ndim == 1:
                self.X_values = self.X_values[:, np.newaxis]
            self.X_names = [f'x{i}' for i in range(self.X_values.shape[1])]

        # Store metadata
        self.n_obs = len(self.y_values)
        self.n_coef = self.X_values.shape[1] + 1  # +1 for intercept
        self.var_names = ['Intercept'] + self.X_names
        self.normalize = normalize

        X_full = add_intercept(self.X_values)
        if normalize:
            self.stats = fit_normalization(X_full)
            X_full = self.stats.apply(X_full)
        else:
            self.stats = None

        self.result = gradient_descent(
            X_full,
            self.y_values,
            theta=theta0,
            alpha=alpha,
            max_iter=max_iter,
            family=self.family,
            tol=tol,
            backend=backend,
        )
        self.theta = self.result.theta
        self.cost_history = self.result.cost_history
        self.fitted_values = get_family(self.family).hypothesis(X_full, self.theta)

    @property
    def coef(self):
        """Named coefficients on the (possibly normalized) training scale."""
        return pd.Series(self.theta, index=self.var_names)

    @property
    def raw_coef(self):
        """Coefficients re-expressed for unnormalized predictors."""
        if self.stats is None:
            return self.coef
        slopes = self.theta[1:] / self.stats.std
        intercept = self.theta[0] - np.sum(slopes * self.stats.mean)
        return pd.Series(np.concatenate([[intercept], slopes]), index=self.var_names)

    def design_matrix(self, newdata: Union[pd.DataFrame, np.ndarray]) -> np.ndarray:
        """Intercept plus predictors, normalized with the training statistics."""
        if isinstance(newdata, pd.DataFrame):
            X_new = newdata[self.X_names].values
        else:
            X_new = np.asarray(newdata, dtype=np.float64)
            if X_new.ndim == 1:
                X_new = X_new[np.newaxis, :] if self.n_coef > 2 else X_new[:, np.newaxis]

        X_new_full = add_intercept(X_new)
        if self.stats is not None:
            X_new_full = self.stats.apply(X_new_full)
        return X_new_full

    def predict(self, newdata: Union[pd.DataFrame, np.ndarray]) -> np.ndarray:
        """
        Hypothesis output for new data.

        Parameters
        ----------
        newdata : DataFrame or array
            New predictor values
            - If DataFrame: must have columns matching self.X_names
            - If array: must have same number of columns as X

        Returns
        -------
        array
            Predicted values
        """
        return get_family(self.family).hypothesis(self.design_matrix(newdata), self.theta)

    @abstractmethod
    def score(self, newdata, y) -> float:
        """Goodness of fit of predictions on newdata."""
        pass

    def _fit_report(self) -> List[str]:
        return []

    def summary(self):
        """Print summary of training results."""
        result = self.result
        print()
        print("="*80)
        print(self.title)
        print("="*80)
        print()

        print(f"Dependent variable: {self.y_name}")
        print(f"Number of observations: {self.n_obs}")
        print(f"Predictors normalized: {'yes' if self.normalize else 'no'}")
        print()

        print("Coefficients:")
        print("-"*80)
        print(f"{'Variable':<20} {'Estimate':>14} {'Raw scale':>14}")
        print("-"*80)
        raw = self.raw_coef.values
        for i, name in enumerate(self.var_names):
            print(f"{name:<20} {self.theta[i]:>14.6f} {raw[i]:>14.6f}")
        print("-"*80)
        print()

        print(f"Learning rate:      {result.alpha}")
        print(f"Iterations:         {result.iterations}")
        print(f"Converged (tol):    {'yes' if result.converged else 'no'}")
        if result.iterations > 0:
            print(f"Initial cost:       {result.cost_history[0]:.6f}")
            print(f"Final cost:         {result.final_cost:.6f}")
        for line in self._fit_report():
            print(line)

        print()
        print(f"Backend: {result.backend}")
        print("="*80)
        print()

    def __repr__(self):
        return (f"{type(self).__name__}(n={self.n_obs}, p={self.n_coef - 1}, "
                f"iterations={self.result.iterations})")
