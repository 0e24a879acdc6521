from __future__ import annotations

"""Adapters turning model builders into fit callables.

The evaluator only knows ``fit(train) -> model``; :class:`SklearnFit` is that
callable for scikit-learn estimators. Optional standardisation wraps the
estimator in a :class:`~sklearn.pipeline.Pipeline` so scaling is learned on the
training rows of each fold only.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from foldwise.components.data.dataset import Resample
from foldwise.components.interfaces import ModelBuilder
from foldwise.core.errors import InvalidArgument


@dataclass(frozen=True)
class SklearnFit:
    builder: ModelBuilder
    standardize: bool = False

    def __call__(self, train: Resample) -> Any:
        if len(train) == 0:
            raise InvalidArgument("cannot fit on an empty training resample")
        estimator = self.builder.make_estimator()
        if self.standardize:
            estimator = Pipeline([("scale", StandardScaler()), ("model", estimator)])
        estimator.fit(np.asarray(train.X), np.asarray(train.y))
        return estimator


def make_fit(builder: ModelBuilder, *, standardize: bool = False) -> SklearnFit:
    return SklearnFit(builder=builder, standardize=standardize)
