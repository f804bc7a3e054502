"""
Logistic regression trained by batch gradient descent.
"""

import numpy as np

from ._model import GradientDescentModel
from ._core.thresholding import DEFAULT_THRESHOLD, classify
from .metrics import accuracy, confusion_matrix


class LogisticRegression(GradientDescentModel):
    """
    Logistic regression: h(x) = sigmoid(θᵀx), log-loss cost.

    Labels must be 0 or 1.

    Examples
    --------
    >>> from pydescent import logreg
    >>> model = logreg(y='diagnosis', X=['radius_mean', 'texture_mean'],
    ...                data=cancer, alpha=0.1, max_iter=2000)
    >>> model.predict_proba(test_rows)
    >>> model.predict_class(test_rows, threshold=0.5)
    >>> model.score(test_rows, test_labels)   # accuracy
    """

    family = 'logistic'
    title = "LOGISTIC REGRESSION (GRADIENT DESCENT)"

    def predict_proba(self, newdata) -> np.ndarray:
        """Predicted probability of class 1."""
        return self.predict(newdata)

    def predict_class(self, newdata, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
        """Predicted 0/1 labels."""
        return classify(self.predict_proba(newdata), threshold)

    def score(self, newdata, y, threshold: float = DEFAULT_THRESHOLD) -> float:
        """Accuracy of thresholded predictions on newdata."""
        return accuracy(y, self.predict_class(newdata, threshold))

    @property
    def accuracy(self) -> float:
        """Accuracy on the training data at the default threshold."""
        return accuracy(self.y_values, classify(self.fitted_values))

    def _fit_report(self):
        cm = confusion_matrix(self.y_values, classify(self.fitted_values))
        return [
            f"Training accuracy:  {self.accuracy:.4f}",
            f"Confusion matrix:   TN={cm[0, 0]} FP={cm[0, 1]} FN={cm[1, 0]} TP={cm[1, 1]}",
        ]


def logreg(y, X, data=None, **kwargs):
    """
    Fit logistic regression by gradient descent (convenience function).

    Parameters
    ----------
    y : str or array
        0/1 response variable
    X : list of str or array
        Predictor variables
    data : DataFrame, optional
        Dataset
    **kwargs
        Additional arguments passed to LogisticRegression

    Returns
    -------
    LogisticRegression
        Fitted model object
    """
    return LogisticRegression(y=y, X=X, data=data, **kwargs)
