from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import Field

from .linear import LinearRegConfig, LogRegConfig
from .neighbors import KNNConfig, KNNRegressorConfig
from .trees import ForestConfig, RandomForestRegressorConfig


ModelConfig = Annotated[
    Union[
        LinearRegConfig,
        KNNRegressorConfig,
        RandomForestRegressorConfig,
        LogRegConfig,
        KNNConfig,
        ForestConfig,
    ],
    Field(discriminator="algo"),
]


def get_model_task(model_cfg: Any) -> str:
    cls = model_cfg.__class__
    return getattr(cls, "task", "classification")
