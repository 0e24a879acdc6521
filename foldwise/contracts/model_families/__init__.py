from .linear import LinearRegConfig, LogRegConfig
from .neighbors import KNNConfig, KNNRegressorConfig
from .trees import ForestConfig, RandomForestRegressorConfig
from .registry import ModelConfig, get_model_task

__all__ = [
    "LinearRegConfig",
    "LogRegConfig",
    "KNNConfig",
    "KNNRegressorConfig",
    "ForestConfig",
    "RandomForestRegressorConfig",
    "ModelConfig",
    "get_model_task",
]
