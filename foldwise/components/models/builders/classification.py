from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from sklearn.ensemble import RandomForestClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.neighbors import KNeighborsClassifier

from foldwise.contracts.model_configs import ForestConfig, KNNConfig, LogRegConfig
from foldwise.components.interfaces import ModelBuilder

from .common import estimator_kwargs


@dataclass
class LogRegBuilder(ModelBuilder):
    cfg: LogRegConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = estimator_kwargs(LogisticRegression, self.cfg, seed=self.seed)
        if kw.get("penalty") not in (None, "elasticnet"):
            kw.pop("l1_ratio", None)
        return LogisticRegression(**kw)


@dataclass
class KNNBuilder(ModelBuilder):
    cfg: KNNConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = estimator_kwargs(KNeighborsClassifier, self.cfg)
        return KNeighborsClassifier(**kw)


@dataclass
class ForestBuilder(ModelBuilder):
    cfg: ForestConfig
    seed: Optional[int] = None

    def make_estimator(self) -> Any:
        kw = estimator_kwargs(RandomForestClassifier, self.cfg, seed=self.seed)
        return RandomForestClassifier(**kw)
