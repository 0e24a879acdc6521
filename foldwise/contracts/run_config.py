from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from .choices import DatasetName
from .eval_configs import EvalModel
from .model_configs import ModelConfig
from .split_configs import SplitCVModel, SplitHoldoutModel


class DataModel(BaseModel):
    """Where the rows come from: a bundled dataset or a CSV file."""

    name: Optional[DatasetName] = None
    csv_path: Optional[str] = None
    target: Optional[str] = None
    # Feature columns to keep; None keeps every column except the target.
    features: Optional[list[str]] = None
    delimiter: Optional[str] = None

    @model_validator(mode="after")
    def _one_source(self) -> "DataModel":
        if (self.name is None) == (self.csv_path is None):
            raise ValueError("exactly one of 'name' or 'csv_path' must be set")
        if self.csv_path is not None and not self.target:
            raise ValueError("'target' is required when loading from csv_path")
        return self


class RunConfig(BaseModel):
    data: DataModel
    split: Union[SplitHoldoutModel, SplitCVModel] = Field(
        default_factory=SplitCVModel, discriminator="mode"
    )
    model: ModelConfig
    eval: EvalModel = Field(default_factory=EvalModel)
