"""Public API.

This module is the **stable public surface**. Prefer importing from here
instead of reaching into internal subpackages:

    from foldwise.api import crossv_kfold, evaluate_cv, aggregate_report

The underlying implementations live under :mod:`foldwise.use_cases` and
:mod:`foldwise.components`.
"""

from __future__ import annotations

from foldwise.components.data.dataset import Dataset, Resample
from foldwise.components.evaluation.metrics import make_metric, score
from foldwise.components.evaluation.roc import roc_payload
from foldwise.components.models.fit import SklearnFit, make_fit
from foldwise.components.splitters import (
    Split,
    crossv_kfold,
    holdout_indices,
    kfold_indices,
    resample_partition,
)
from foldwise.core.errors import (
    AllFoldsFailed,
    FitFailure,
    FoldwiseError,
    InvalidArgument,
    MetricUndefined,
    RunCancelled,
)
from foldwise.core.progress import LoggingProgress, ProgressCallback
from foldwise.io.datasets import load_csv, load_dataset
from foldwise.registries.metrics import make_metrics
from foldwise.registries.models import make_model_builder
from foldwise.reporting.tables import report_to_frame, repeats_to_frame, summary_to_frame
from foldwise.runtime.cancel import CancelToken
from foldwise.runtime.pool import WorkerPool
from foldwise.runtime.random.rng import RngManager
from foldwise.use_cases.cross_validation import (
    aggregate_report,
    evaluate_cv,
    evaluate_holdout,
    iter_repeated_cv,
    repeated_cv,
    run_cross_validation,
)

__all__ = [
    # data
    "Dataset",
    "Resample",
    "Split",
    "load_dataset",
    "load_csv",
    # partitioning
    "kfold_indices",
    "crossv_kfold",
    "holdout_indices",
    "resample_partition",
    # models + metrics
    "make_model_builder",
    "make_fit",
    "SklearnFit",
    "make_metric",
    "make_metrics",
    "score",
    "roc_payload",
    # evaluation
    "evaluate_cv",
    "evaluate_holdout",
    "aggregate_report",
    "iter_repeated_cv",
    "repeated_cv",
    "run_cross_validation",
    # runtime
    "WorkerPool",
    "CancelToken",
    "RngManager",
    "ProgressCallback",
    "LoggingProgress",
    # reporting
    "report_to_frame",
    "summary_to_frame",
    "repeats_to_frame",
    # errors
    "FoldwiseError",
    "InvalidArgument",
    "FitFailure",
    "AllFoldsFailed",
    "MetricUndefined",
    "RunCancelled",
]
