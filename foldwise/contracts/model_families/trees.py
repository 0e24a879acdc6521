from __future__ import annotations

from typing import ClassVar, Literal, Optional, Union

from pydantic import BaseModel

from ..choices import ClassTreeCriterion, MaxFeaturesName, RegTreeCriterion


class ForestConfig(BaseModel):
    algo: Literal["forest"] = "forest"

    task: ClassVar[str] = "classification"
    family: ClassVar[str] = "trees"

    n_estimators: int = 100
    criterion: ClassTreeCriterion = "gini"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    max_features: Union[int, float, MaxFeaturesName] = "sqrt"
    bootstrap: bool = True
    # None -> 1 inside fold workers; folds are already parallel.
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None


class RandomForestRegressorConfig(BaseModel):
    algo: Literal["rfreg"] = "rfreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "trees"

    n_estimators: int = 100
    criterion: RegTreeCriterion = "squared_error"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    max_features: Union[int, float, MaxFeaturesName] = 1.0
    bootstrap: bool = True
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None
