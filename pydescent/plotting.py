"""
Diagnostic plots.

Cost history for checking convergence, predicted against actual values
for checking fit. Both return the matplotlib Axes they drew on.
"""

import numpy as np
import matplotlib.pyplot as plt


def plot_cost_history(history, ax=None, title="Cost per iteration", label=None):
    """Plot J(θ) against the iteration number."""
    history = np.asarray(history, dtype=np.float64)
    if ax is None:
        _, ax = plt.subplots()
    iterations = np.arange(1, history.size + 1)
    ax.plot(iterations, history, label=label)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Cost J(θ)")
    ax.set_title(title)
    ax.grid(True)
    if label is not None:
        ax.legend()
    return ax


def plot_predictions(y_true, y_pred, ax=None, title="Predicted vs actual"):
    """Scatter predictions against actual values with the y = x line."""
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    if ax is None:
        _, ax = plt.subplots()
    ax.scatter(y_true, y_pred, s=10, alpha=0.6)
    lo = min(y_true.min(), y_pred.min())
    hi = max(y_true.max(), y_pred.max())
    ax.plot([lo, hi], [lo, hi], color="red", linewidth=1)
    ax.set_xlabel("Actual")
    ax.set_ylabel("Predicted")
    ax.set_title(title)
    return ax


__all__ = ["plot_cost_history", "plot_predictions"]
