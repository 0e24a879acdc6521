from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from sklearn.ensemble import RandomForestRegressor
from sklearn.linear_model import LinearRegression
from sklearn.neighbors import KNeighborsRegressor

from foldwise.contracts.model_configs import (
    KNNRegressorConfig,
    LinearRegConfig,
    RandomForestRegressorConfig,
)
from foldwise.components.interfaces import ModelBuilder

from .common import estimator_kwargs


@dataclass
class LinRegBuilder(ModelBuilder):
    cfg: LinearRegConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = estimator_kwargs(LinearRegression, self.cfg)
        return LinearRegression(**kw)


@dataclass
class KNNRegressorBuilder(ModelBuilder):
    cfg: KNNRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = estimator_kwargs(KNeighborsRegressor, self.cfg)
        return KNeighborsRegressor(**kw)


@dataclass
class RandomForestRegressorBuilder(ModelBuilder):
    cfg: RandomForestRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = estimator_kwargs(RandomForestRegressor, self.cfg, seed=self.seed)
        return RandomForestRegressor(**kw)
