"""
Test the batch gradient-descent trainer.
"""

import warnings

import pytest
import numpy as np

from pydescent import (
    DescentConfig,
    Logistic,
    gradient_descent,
    fit_normalize,
    DimensionMismatch,
    InvalidHyperparameter,
    NumericDegeneracy,
)


X_TOY = np.array([[1.0, 2.0], [1.0, 4.0], [1.0, 6.0]])
Y_TOY = np.array([3.0, 7.0, 11.0])

X_SEP = np.array([[1.0, 0.0], [1.0, 1.0], [1.0, 5.0], [1.0, 6.0]])
Y_SEP = np.array([0.0, 0.0, 1.0, 1.0])


class TestLinearDescent:
    """Linear regression training."""

    def test_toy_problem(self):
        """y = 2x + 1 on unnormalized data, alpha=0.01, 1000 iterations."""
        result = gradient_descent(X_TOY, Y_TOY, theta=np.zeros(2),
                                  alpha=0.01, max_iter=1000)
        np.testing.assert_allclose(result.theta, [1.0, 2.0], atol=0.2)
        assert result.final_cost < 0.01
        assert result.cost_history[0] > result.final_cost

    def test_toy_problem_converges_exactly(self):
        """A larger step and budget reach the exact solution."""
        result = gradient_descent(X_TOY, Y_TOY, alpha=0.05, max_iter=5000)
        np.testing.assert_allclose(result.theta, [1.0, 2.0], atol=1e-6)
        assert result.final_cost < 1e-12

    def test_history_length_matches_budget(self):
        result = gradient_descent(X_TOY, Y_TOY, alpha=0.01, max_iter=250)
        assert result.cost_history.shape == (250,)
        assert result.iterations == 250
        assert not result.converged
        assert result.family == 'linear'

    def test_single_step_is_batch_update(self):
        """All θ_j move from the same pre-update θ."""
        result = gradient_descent(X_TOY, Y_TOY, alpha=0.01, max_iter=1)
        # gradient at θ=0 is Xᵀ(0 - y) = -[21, 100]
        np.testing.assert_allclose(result.theta, [0.07, 1.0 / 3.0])
        expected_cost = np.sum((X_TOY @ result.theta - Y_TOY) ** 2) / 6.0
        assert result.cost_history[0] == pytest.approx(expected_cost)

    def test_cost_non_increasing(self):
        """Small alpha on normalized convex data never raises the cost."""
        rng = np.random.default_rng(0)
        features = rng.normal(size=(200, 2))
        y = 3.0 + 2.0 * features[:, 0] - features[:, 1] + rng.normal(scale=0.1, size=200)
        X, _ = fit_normalize(np.column_stack([np.ones(200), features]))

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = gradient_descent(X, y, alpha=0.1, max_iter=500)

        assert np.all(np.diff(result.cost_history) <= 1e-12)

    def test_zero_iterations(self):
        """max_iter=0 returns the initial θ and an empty history."""
        theta0 = np.array([0.5, -0.5])
        result = gradient_descent(X_TOY, Y_TOY, theta=theta0, max_iter=0)
        np.testing.assert_array_equal(result.theta, theta0)
        assert result.cost_history.size == 0
        assert result.iterations == 0
        assert np.isnan(result.final_cost)

    def test_initial_theta_not_modified(self):
        theta0 = np.zeros(2)
        gradient_descent(X_TOY, Y_TOY, theta=theta0, max_iter=10)
        np.testing.assert_array_equal(theta0, np.zeros(2))

    def test_deterministic(self):
        a = gradient_descent(X_TOY, Y_TOY, alpha=0.01, max_iter=300)
        b = gradient_descent(X_TOY, Y_TOY, alpha=0.01, max_iter=300)
        np.testing.assert_array_equal(a.theta, b.theta)
        np.testing.assert_array_equal(a.cost_history, b.cost_history)


class TestLogisticDescent:
    """Logistic regression training."""

    def test_separable_toy_problem(self):
        result = gradient_descent(X_SEP, Y_SEP, alpha=0.1, max_iter=5000,
                                  family='logistic')
        h = Logistic().hypothesis(X_SEP, result.theta)
        assert np.all(h[:2] < 0.5)
        assert np.all(h[2:] > 0.5)
        assert result.family == 'logistic'

    def test_cost_non_increasing(self):
        result = gradient_descent(X_SEP, Y_SEP, alpha=0.1, max_iter=2000,
                                  family='logistic')
        assert np.all(np.diff(result.cost_history) <= 1e-12)
        assert result.cost_history[0] < np.log(2)

    def test_rejects_non_binary_labels(self):
        with pytest.raises(ValueError, match="0 or 1"):
            gradient_descent(X_SEP, [0, 2, 1, 1], family='logistic')


class TestToleranceStop:
    """Opt-in convergence criterion."""

    def test_stops_early(self):
        result = gradient_descent(X_TOY, Y_TOY, alpha=0.05, max_iter=100000, tol=1e-10)
        assert result.converged
        assert result.iterations < 100000
        assert result.cost_history.size == result.iterations
        assert abs(result.cost_history[-2] - result.cost_history[-1]) < 1e-10

    def test_budget_still_caps(self):
        result = gradient_descent(X_TOY, Y_TOY, alpha=0.01, max_iter=5, tol=1e-30)
        assert not result.converged
        assert result.iterations == 5


class TestValidation:
    """Errors raised before training starts."""

    def test_label_length_off_by_one(self):
        with pytest.raises(DimensionMismatch):
            gradient_descent(X_TOY, Y_TOY[:2])
        with pytest.raises(DimensionMismatch):
            gradient_descent(X_TOY, np.append(Y_TOY, 15.0))

    def test_uneven_rows(self):
        with pytest.raises(DimensionMismatch, match="same length"):
            gradient_descent([[1, 2], [1, 4, 5], [1, 6]], [3, 7, 11])

    def test_default_backend_is_cpu(self):
        result = gradient_descent(X_TOY, Y_TOY, max_iter=5)
        assert result.backend == 'cpu'

    def test_theta_length(self):
        with pytest.raises(DimensionMismatch):
            gradient_descent(X_TOY, Y_TOY, theta=np.zeros(3))

    def test_missing_bias_column(self):
        with pytest.raises(ValueError, match="bias"):
            gradient_descent(X_TOY[:, ::-1], Y_TOY)

    @pytest.mark.parametrize("alpha", [0.0, -0.1, np.nan, np.inf])
    def test_bad_alpha(self, alpha):
        with pytest.raises(InvalidHyperparameter):
            gradient_descent(X_TOY, Y_TOY, alpha=alpha)

    @pytest.mark.parametrize("max_iter", [-1, 1.5, True])
    def test_bad_max_iter(self, max_iter):
        with pytest.raises(InvalidHyperparameter):
            gradient_descent(X_TOY, Y_TOY, max_iter=max_iter)

    def test_bad_tol(self):
        with pytest.raises(InvalidHyperparameter):
            gradient_descent(X_TOY, Y_TOY, tol=0.0)

    def test_config_defaults(self):
        config = DescentConfig()
        assert config.alpha == 0.01
        assert config.max_iter == 1000
        assert config.tol is None


class TestNumericFailures:
    """Divergence is reported, not propagated."""

    def test_divergence_raises(self):
        with pytest.raises(NumericDegeneracy, match="iteration"):
            gradient_descent(X_TOY, Y_TOY, alpha=1.0, max_iter=5000)

    def test_rising_cost_warns(self):
        with pytest.warns(RuntimeWarning, match="Cost increased"):
            gradient_descent(X_TOY, Y_TOY, alpha=0.11, max_iter=50)
