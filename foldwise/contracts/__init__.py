"""Configuration and result contracts.

Keep module imports explicit in most of the codebase:

    from foldwise.contracts.run_config import RunConfig

The names re-exported here are a small set of convenience imports.
"""

from .choices import MetricName, ProblemKind, DatasetName
from .eval_configs import EvalModel
from .model_configs import ModelConfig, get_model_task
from .run_config import DataModel, RunConfig
from .split_configs import SplitCVModel, SplitHoldoutModel, SplitConfig

__all__ = [
    "MetricName",
    "ProblemKind",
    "DatasetName",
    "EvalModel",
    "ModelConfig",
    "get_model_task",
    "DataModel",
    "RunConfig",
    "SplitCVModel",
    "SplitHoldoutModel",
    "SplitConfig",
]
