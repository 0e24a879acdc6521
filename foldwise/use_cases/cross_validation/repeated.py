from __future__ import annotations

"""Repeated k-fold cross-validation.

Repeat ``r`` partitions with ``RngManager(base_seed).child_seed("repeat/{r}/split")``
so every repeat has its own, reproducible fold assignment. The iterator form is
lazy and restartable: calling it again with the same base seed yields the same
summaries.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from foldwise.components.data.dataset import Dataset
from foldwise.components.interfaces import Fit, Metric
from foldwise.components.splitters.cv_split import check_fold_count
from foldwise.contracts.results.cv import RepeatSummary, RepeatedCVResult
from foldwise.core.errors import InvalidArgument
from foldwise.core.progress import ProgressCallback
from foldwise.runtime.cancel import CancelToken
from foldwise.runtime.pool import WorkerPool
from foldwise.runtime.random.rng import RngManager
from foldwise.use_cases._deps import borrowed_pool

from .aggregate import aggregate_report, summarize_repeats
from .evaluate import evaluate_cv
from .folds import metric_names

logger = logging.getLogger(__name__)


def iter_repeated_cv(
    dataset: Dataset,
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    n_repeats: int = 10,
    n_splits: int = 5,
    base_seed: int = 0,
    shuffle: bool = True,
    stratified: bool = False,
    pool: Optional[WorkerPool] = None,
    cancel: Optional[CancelToken] = None,
    progress: Optional[ProgressCallback] = None,
) -> Iterator[RepeatSummary]:
    """Yield one aggregate summary per repeat, in repeat order.

    A cancelled repeat is discarded: the iterator raises
    :class:`~foldwise.core.errors.RunCancelled` instead of yielding it.
    """

    if int(n_repeats) < 1:
        raise InvalidArgument(f"n_repeats must be >= 1; got {n_repeats}")
    if not shuffle and int(n_repeats) > 1:
        logger.warning("shuffle=False: every repeat uses the same fold assignment")

    check_fold_count(dataset.n_rows, n_splits)
    seeds = RngManager(base_seed).repeat_seeds(int(n_repeats))
    metric_names(metrics)
    return _repeat_stream(
        dataset,
        fit,
        metrics,
        seeds=seeds,
        n_splits=n_splits,
        shuffle=shuffle,
        stratified=stratified,
        pool=pool,
        cancel=cancel,
        progress=progress,
    )


def _repeat_stream(
    dataset: Dataset,
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    seeds: List[int],
    n_splits: int,
    shuffle: bool,
    stratified: bool,
    pool: Optional[WorkerPool],
    cancel: Optional[CancelToken],
    progress: Optional[ProgressCallback],
) -> Iterator[RepeatSummary]:
    if progress is not None:
        progress.init(total=len(seeds), label=f"Repeat 0/{len(seeds)}")
    try:
        with borrowed_pool(pool) as p:
            for r, seed in enumerate(seeds):
                if cancel is not None:
                    cancel.raise_if_cancelled()
                report = evaluate_cv(
                    dataset,
                    fit,
                    metrics,
                    n_splits=n_splits,
                    seed=seed,
                    shuffle=shuffle,
                    stratified=stratified,
                    pool=p,
                    cancel=cancel,
                )
                summary = aggregate_report(report)
                logger.debug("repeat %d/%d done (seed=%d)", r + 1, len(seeds), seed)
                if progress is not None:
                    progress.update(current=r + 1, label=f"Repeat {r + 1}/{len(seeds)}")
                yield RepeatSummary(repeat=r, seed=seed, summary=summary)
    finally:
        if progress is not None:
            progress.finalize(label="Done")


def repeated_cv(
    dataset: Dataset,
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    n_repeats: int = 10,
    n_splits: int = 5,
    base_seed: int = 0,
    shuffle: bool = True,
    stratified: bool = False,
    pool: Optional[WorkerPool] = None,
    cancel: Optional[CancelToken] = None,
    progress: Optional[ProgressCallback] = None,
) -> RepeatedCVResult:
    """Eager form of :func:`iter_repeated_cv` plus the spread across repeats."""

    repeats: List[RepeatSummary] = list(
        iter_repeated_cv(
            dataset,
            fit,
            metrics,
            n_repeats=n_repeats,
            n_splits=n_splits,
            base_seed=base_seed,
            shuffle=shuffle,
            stratified=stratified,
            pool=pool,
            cancel=cancel,
            progress=progress,
        )
    )
    return RepeatedCVResult(
        n_repeats=len(repeats),
        n_splits=int(n_splits),
        base_seed=int(base_seed),
        repeats=repeats,
        spread=summarize_repeats(repeats),
    )
