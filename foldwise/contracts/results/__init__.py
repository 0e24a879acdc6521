from .common import ResultModel, JSONDict
from .cv import (
    CVReport,
    CVSummary,
    CrossValidationResult,
    FoldRow,
    MetricCell,
    MetricSummary,
    RepeatSummary,
    RepeatedCVResult,
)

__all__ = [
    "ResultModel",
    "JSONDict",
    "CVReport",
    "CVSummary",
    "CrossValidationResult",
    "FoldRow",
    "MetricCell",
    "MetricSummary",
    "RepeatSummary",
    "RepeatedCVResult",
]
