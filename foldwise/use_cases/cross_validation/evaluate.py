from __future__ import annotations

"""Single-run evaluation: k-fold and holdout."""

import logging
from typing import Iterable, List, Optional, Sequence

import numpy as np

from foldwise.components.data.dataset import Dataset
from foldwise.components.evaluation.roc import roc_payload
from foldwise.components.interfaces import Fit, Metric
from foldwise.components.splitters.cv_split import crossv_kfold
from foldwise.components.splitters.holdout_split import resample_partition
from foldwise.components.splitters.types import Split
from foldwise.contracts.results.cv import CVReport
from foldwise.core.errors import AllFoldsFailed, InvalidArgument, MetricUndefined
from foldwise.runtime.cancel import CancelToken
from foldwise.runtime.pool import WorkerPool

from .folds import fit_and_score, metric_names, run_folds
from .types import HoldoutEvaluation

logger = logging.getLogger(__name__)


def _check_splits(dataset: Dataset, splits: Sequence[Split]) -> None:
    for s in splits:
        if s.train.dataset is not dataset or s.test.dataset is not dataset:
            raise InvalidArgument(f"split {s.fold_id} does not reference the evaluated dataset")
        overlap = np.intersect1d(s.train.idx, s.test.idx)
        if overlap.size:
            raise InvalidArgument(
                f"split {s.fold_id}: {overlap.size} rows are in both train and test (first: {int(overlap[0])})"
            )


def evaluate_splits(
    dataset: Dataset,
    splits: Iterable[Split],
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    seed: Optional[int] = None,
    pool: Optional[WorkerPool] = None,
    cancel: Optional[CancelToken] = None,
) -> CVReport:
    """Fit and score every split; raise :class:`AllFoldsFailed` if none succeeds."""

    splits = list(splits)
    if not splits:
        raise InvalidArgument("no splits to evaluate")
    _check_splits(dataset, splits)
    names = metric_names(metrics)

    rows = run_folds(splits, fit, metrics, pool=pool, cancel=cancel)

    report = CVReport(
        n_rows=dataset.n_rows,
        n_splits=len(splits),
        seed=seed,
        metric_names=names,
        rows=rows,
        notes=[f"fold {r.fold_id} failed: {r.error}" for r in rows if not r.ok],
    )
    if not report.ok_rows:
        raise AllFoldsFailed(
            "no fold produced a usable model; first error: "
            f"{rows[0].error if rows else 'n/a'}"
        )
    logger.info(
        "evaluated %d folds on %r (%d ok, %d failed)",
        len(rows),
        dataset.name,
        len(report.ok_rows),
        report.n_failed,
    )
    return report


def evaluate_cv(
    dataset: Dataset,
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    n_splits: int = 5,
    seed: Optional[int] = None,
    shuffle: bool = True,
    stratified: bool = False,
    pool: Optional[WorkerPool] = None,
    cancel: Optional[CancelToken] = None,
) -> CVReport:
    """k-fold cross-validation of ``fit`` on ``dataset``."""

    splits: List[Split] = crossv_kfold(
        dataset,
        n_splits,
        seed,
        shuffle=shuffle,
        stratified=stratified,
    )
    return evaluate_splits(dataset, splits, fit, metrics, seed=seed, pool=pool, cancel=cancel)


def evaluate_holdout(
    dataset: Dataset,
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    train_frac: float = 0.8,
    seed: Optional[int] = None,
    stratified: bool = False,
    compute_roc: bool = False,
) -> HoldoutEvaluation:
    """Fit once on a random training partition and score both partitions.

    Runs in-process so the fitted model can be returned; with ``compute_roc``
    a ROC payload of the model on the test partition is attached.
    """

    split = resample_partition(dataset, train_frac, seed, stratified=stratified)
    names = metric_names(metrics)
    row, model = fit_and_score(split, fit, metrics)

    report = CVReport(
        n_rows=dataset.n_rows,
        n_splits=1,
        seed=seed,
        metric_names=names,
        rows=[row],
        notes=[] if row.ok else [f"fit failed: {row.error}"],
    )
    if model is None:
        raise AllFoldsFailed(f"no fold produced a usable model: {row.error}")

    roc = None
    if compute_roc:
        try:
            roc = roc_payload(model, split.test)
        except MetricUndefined as e:
            logger.warning("ROC skipped: %s", e)
    return HoldoutEvaluation(report=report, model=model, roc=roc)
