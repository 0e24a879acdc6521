from __future__ import annotations

import numpy as np
import pytest

from foldwise.components.data.dataset import Dataset
from foldwise.components.models.builders import LinRegBuilder
from foldwise.components.models.fit import SklearnFit
from foldwise.contracts.model_configs import LinearRegConfig


class ConstantModel:
    def __init__(self, value: float):
        self.value = float(value)

    def predict(self, X):
        return np.full(np.asarray(X).shape[0], self.value)


def constant_fit(value: float):
    def _fit(train):
        return ConstantModel(value)

    return _fit


@pytest.fixture
def toy_regression() -> Dataset:
    rng = np.random.default_rng(0)
    X = rng.normal(size=(100, 3))
    y = X @ np.array([1.5, -2.0, 0.5]) + 3.0 + rng.normal(scale=0.1, size=100)
    return Dataset.from_arrays(X, y, kind="regression", name="toy")


@pytest.fixture
def toy_classification() -> Dataset:
    rng = np.random.default_rng(1)
    X = rng.normal(size=(60, 2))
    y = np.array([0] * 45 + [1] * 15)
    X[y == 1] += 2.5
    return Dataset.from_arrays(X, y, kind="classification", name="toy_clf")


@pytest.fixture
def linreg_fit() -> SklearnFit:
    return SklearnFit(builder=LinRegBuilder(cfg=LinearRegConfig()))
