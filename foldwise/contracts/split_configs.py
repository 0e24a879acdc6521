from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class SplitHoldoutModel(BaseModel):
    mode: Literal["holdout"] = "holdout"
    train_frac: float = Field(0.8, gt=0.0, lt=1.0)
    stratified: bool = False


class SplitCVModel(BaseModel):
    mode: Literal["kfold"] = "kfold"
    n_splits: int = 5
    stratified: bool = False
    # shuffle=False deals rows round-robin in their stored order
    shuffle: bool = True


SplitConfig = Union[SplitHoldoutModel, SplitCVModel]
