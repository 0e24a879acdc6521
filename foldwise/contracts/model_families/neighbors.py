from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel, Field

from ..choices import KNNAlgorithm, KNNWeights


class KNNConfig(BaseModel):
    algo: Literal["knn"] = "knn"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "neighbors"

    n_neighbors: int = Field(5, ge=1)
    weights: KNNWeights = "uniform"
    algorithm: KNNAlgorithm = "auto"
    leaf_size: int = 30
    p: int = 2


class KNNRegressorConfig(BaseModel):
    algo: Literal["knnreg"] = "knnreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "neighbors"

    n_neighbors: int = Field(5, ge=1)
    weights: KNNWeights = "uniform"
    algorithm: KNNAlgorithm = "auto"
    leaf_size: int = 30
    p: int = 2
