"""
Linear regression trained by batch gradient descent.
"""

from ._model import GradientDescentModel
from .metrics import mean_squared_error, r_squared


class LinearRegression(GradientDescentModel):
    """
    Linear regression: h(x) = θᵀx, squared-error cost.

    Fits on construction, like the rest of the API.

    Examples
    --------
    >>> import pandas as pd
    >>> from pydescent import linreg
    >>>
    >>> diamonds = pd.read_csv('diamonds.csv')
    >>> model = linreg(y='price', X=['carat', 'depth', 'table'],
    ...                data=diamonds, alpha=0.1, max_iter=500)
    >>> model.summary()
    >>> model.coef              # Named coefficients (normalized scale)
    >>> model.raw_coef          # Same model, original units
    >>> model.predict(new_diamonds)
    """

    family = 'linear'
    title = "LINEAR REGRESSION (GRADIENT DESCENT)"

    def score(self, newdata, y) -> float:
        """R² of predictions on newdata."""
        return r_squared(y, self.predict(newdata))

    @property
    def r_squared(self) -> float:
        """R² on the training data."""
        return r_squared(self.y_values, self.fitted_values)

    @property
    def mse(self) -> float:
        """Mean squared error on the training data."""
        return mean_squared_error(self.y_values, self.fitted_values)

    def _fit_report(self):
        return [
            f"Training MSE:       {self.mse:.6f}",
            f"Training R-squared: {self.r_squared:.4f}",
        ]


def linreg(y, X, data=None, **kwargs):
    """
    Fit linear regression by gradient descent (convenience function).

    Parameters
    ----------
    y : str or array
        Response variable
    X : list of str or array
        Predictor variables
    data : DataFrame, optional
        Dataset
    **kwargs
        Additional arguments passed to LinearRegression

    Returns
    -------
    LinearRegression
        Fitted model object
    """
    return LinearRegression(y=y, X=X, data=data, **kwargs)
