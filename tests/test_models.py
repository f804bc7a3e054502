"""
Test the user-facing model classes.
"""

import pytest
import numpy as np
import pandas as pd

from pydescent import (
    linreg,
    logreg,
    LinearRegression,
    LogisticRegression,
    NumericDegeneracy,
)


@pytest.fixture
def regression_data():
    rng = np.random.default_rng(42)
    n = 300
    df = pd.DataFrame({
        'carat': rng.uniform(0.2, 3.0, n),
        'depth': rng.normal(60.0, 2.0, n),
    })
    df['price'] = 5.0 + 3.0 * df['carat'] - 2.0 * df['depth'] + rng.normal(0, 0.05, n)
    return df


@pytest.fixture
def classification_data():
    rng = np.random.default_rng(7)
    n = 400
    df = pd.DataFrame({
        'radius': rng.normal(0.0, 1.0, n),
        'texture': rng.normal(0.0, 1.0, n),
    })
    df['malignant'] = (df['radius'] + df['texture'] > 0).astype(int)
    return df


class TestLinearRegression:
    """Linear model fitted on a DataFrame."""

    def test_recovers_coefficients(self, regression_data):
        model = linreg(y='price', X=['carat', 'depth'], data=regression_data,
                       alpha=0.1, max_iter=2000)
        assert isinstance(model, LinearRegression)
        assert list(model.coef.index) == ['Intercept', 'carat', 'depth']
        np.testing.assert_allclose(model.raw_coef.values[1:], [3.0, -2.0], atol=0.05)
        assert model.raw_coef["Intercept"] == pytest.approx(5.0, abs=0.5)
        assert model.r_squared > 0.99
        assert model.cost_history.shape == (2000,)

    def test_predict_uses_training_statistics(self, regression_data):
        train, test = regression_data.iloc[:240], regression_data.iloc[240:]
        model = linreg(y='price', X=['carat', 'depth'], data=train,
                       alpha=0.1, max_iter=2000)
        pred = model.predict(test)
        expected = 5.0 + 3.0 * test['carat'].values - 2.0 * test['depth'].values
        np.testing.assert_allclose(pred, expected, atol=0.5)
        assert model.score(test, test['price'].values) > 0.99

    def test_predict_single_test_row(self, regression_data):
        model = linreg(y='price', X=['carat', 'depth'], data=regression_data,
                       alpha=0.1, max_iter=2000)
        pred = model.predict(regression_data.iloc[[0]])
        assert pred.shape == (1,)
        assert np.isfinite(pred[0])

    def test_arrays_without_normalization(self):
        model = LinearRegression(y=[3.0, 7.0, 11.0], X=[2.0, 4.0, 6.0],
                                 alpha=0.05, max_iter=5000, normalize=False)
        np.testing.assert_allclose(model.theta, [1.0, 2.0], atol=1e-6)
        assert model.stats is None
        assert model.X_names == ['x0']
        np.testing.assert_allclose(model.predict(np.array([10.0])), [21.0], atol=1e-5)

    def test_requires_data_for_names(self):
        with pytest.raises(ValueError, match="Must provide data"):
            linreg(y='price', X=['carat'])

    @pytest.mark.parametrize("value", [1.0, 0.1, 0.7, 2.3])
    def test_constant_predictor(self, regression_data, value):
        df = regression_data.assign(constant=value)
        with pytest.raises(NumericDegeneracy):
            linreg(y='price', X=['carat', 'constant'], data=df)

    def test_summary(self, regression_data, capsys):
        model = linreg(y='price', X=['carat', 'depth'], data=regression_data,
                       alpha=0.1, max_iter=200)
        model.summary()
        out = capsys.readouterr().out
        assert 'LINEAR REGRESSION' in out
        assert 'Intercept' in out
        assert 'carat' in out
        assert 'Training R-squared' in out
        assert 'Backend:' in out

    def test_repr(self, regression_data):
        model = linreg(y='price', X=['carat', 'depth'], data=regression_data, max_iter=10)
        assert repr(model) == "LinearRegression(n=300, p=2, iterations=10)"


class TestLogisticRegression:
    """Logistic model fitted on a DataFrame."""

    def test_classifies_training_data(self, classification_data):
        model = logreg(y='malignant', X=['radius', 'texture'],
                       data=classification_data, alpha=0.5, max_iter=2000)
        assert isinstance(model, LogisticRegression)
        assert model.accuracy > 0.95
        assert np.all(np.diff(model.cost_history) <= 1e-12)

    def test_probabilities_and_classes(self, classification_data):
        train, test = classification_data.iloc[:320], classification_data.iloc[320:]
        model = logreg(y='malignant', X=['radius', 'texture'], data=train,
                       alpha=0.5, max_iter=2000)
        proba = model.predict_proba(test)
        assert np.all((proba > 0) & (proba < 1))
        labels = model.predict_class(test)
        assert set(np.unique(labels)) <= {0, 1}
        assert model.score(test, test['malignant'].values) > 0.9

    def test_threshold_extremes(self, classification_data):
        model = logreg(y='malignant', X=['radius', 'texture'],
                       data=classification_data, alpha=0.5, max_iter=200)
        assert np.all(model.predict_class(classification_data, threshold=1.0) == 0)
        assert np.all(model.predict_class(classification_data, threshold=0.0) == 1)

    def test_rejects_non_binary_labels(self, classification_data):
        df = classification_data.assign(malignant=classification_data['malignant'] * 2)
        with pytest.raises(ValueError, match="0 or 1"):
            logreg(y='malignant', X=['radius', 'texture'], data=df)

    def test_summary(self, classification_data, capsys):
        model = logreg(y='malignant', X=['radius', 'texture'],
                       data=classification_data, alpha=0.5, max_iter=100)
        model.summary()
        out = capsys.readouterr().out
        assert 'LOGISTIC REGRESSION' in out
        assert 'Training accuracy' in out
        assert 'Confusion matrix' in out


class TestModelBase:
    """Shared model machinery."""

    def test_base_is_abstract(self):
        from pydescent._model import GradientDescentModel
        with pytest.raises(TypeError):
            GradientDescentModel(y=[1.0, 2.0, 3.0], X=[1.0, 2.0, 4.0])

    def test_package_metadata(self):
        import pydescent
        assert pydescent.__version__ == "1.0.0"
        assert "GPL-3.0" in pydescent.__doc__
