"""
Data preparation helpers.

The steps that turn a raw table into a numeric feature matrix and a
label vector: one-hot encoding, imputation, shuffling and splitting,
and adding the bias column.
"""

import numpy as np
import pandas as pd
from typing import Optional, Tuple, Union

from .exceptions import InvalidHyperparameter

DEFAULT_TRAIN_FRACTION = 0.8


def one_hot_encode(column: pd.Series, prefix: Optional[str] = None) -> pd.DataFrame:
    """
    Expand a categorical column into k binary indicator columns.

    Parameters
    ----------
    column : Series or array-like
        Categorical values with k distinct levels
    prefix : str, optional
        Prefix for the new column names (defaults to the Series name)

    Returns
    -------
    DataFrame, shape (len(column), k)
        One 0/1 column per level, exactly one 1 per row

    Examples
    --------
    >>> one_hot_encode(pd.Series(['Ideal', 'Good', 'Ideal'], name='cut'))
       cut_Good  cut_Ideal
    0         0          1
    1         1          0
    2         0          1
    """
    column = pd.Series(column)
    if column.isna().any():
        raise ValueError("Cannot one-hot encode a column with missing values")
    if prefix is None:
        prefix = column.name
    return pd.get_dummies(column, prefix=prefix, dtype=int)


def impute(column: pd.Series, fill_value) -> pd.Series:
    """Replace missing entries of a column with a fixed value."""
    return pd.Series(column).fillna(fill_value)


def train_test_split(
    rows: Union[pd.DataFrame, np.ndarray],
    seed: int,
    train_fraction: float = DEFAULT_TRAIN_FRACTION,
) -> Tuple:
    """
    Shuffle rows with a fixed seed, then cut into train/test.

    The train set is the first ``int(train_fraction * n)`` shuffled rows,
    the test set is the remainder.

    Parameters
    ----------
    rows : DataFrame or ndarray
        Data to split (features and labels together)
    seed : int
        Seed for the shuffle
    train_fraction : float
        Share of rows in the train set, strictly between 0 and 1

    Returns
    -------
    (train, test)
        Same type as ``rows``
    """
    if not 0.0 < train_fraction < 1.0:
        raise InvalidHyperparameter(
            f"train_fraction must lie in (0, 1), got {train_fraction}"
        )

    n = len(rows)
    order = np.random.default_rng(seed).permutation(n)
    cut = int(train_fraction * n)

    if isinstance(rows, pd.DataFrame):
        shuffled = rows.iloc[order].reset_index(drop=True)
        return shuffled.iloc[:cut].reset_index(drop=True), shuffled.iloc[cut:].reset_index(drop=True)

    shuffled = np.asarray(rows)[order]
    return shuffled[:cut], shuffled[cut:]


def add_intercept(X) -> np.ndarray:
    """Prepend the constant bias column."""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
        X = X[:, np.newaxis]
    return np.column_stack([np.ones(len(X)), X])


__all__ = [
    "one_hot_encode",
    "impute",
    "train_test_split",
    "add_intercept",
    "DEFAULT_TRAIN_FRACTION",
]
