"""Built-in model builder registrations."""

from __future__ import annotations

from typing import Any, Optional

from foldwise.components.models.builders import (
    ForestBuilder,
    KNNBuilder,
    KNNRegressorBuilder,
    LinRegBuilder,
    LogRegBuilder,
    RandomForestRegressorBuilder,
)
from foldwise.registries.models import register_model_builder


@register_model_builder("linreg")
def _linreg(cfg: Any, seed: Optional[int]):
    return LinRegBuilder(cfg=cfg, seed=seed)


@register_model_builder("knnreg")
def _knnreg(cfg: Any, seed: Optional[int]):
    return KNNRegressorBuilder(cfg=cfg, seed=seed)


@register_model_builder("rfreg")
def _rfreg(cfg: Any, seed: Optional[int]):
    return RandomForestRegressorBuilder(cfg=cfg, seed=seed)


@register_model_builder("logreg")
def _logreg(cfg: Any, seed: Optional[int]):
    return LogRegBuilder(cfg=cfg, seed=seed)


@register_model_builder("knn")
def _knn(cfg: Any, seed: Optional[int]):
    return KNNBuilder(cfg=cfg, seed=seed)


@register_model_builder("forest")
def _forest(cfg: Any, seed: Optional[int]):
    return ForestBuilder(cfg=cfg, seed=seed)
