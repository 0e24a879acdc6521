from __future__ import annotations

"""Fit-and-score per fold.

Each fold is an independent task: fit on the training resample, then call every
metric once on the training resample (in-sample) and once on the test resample
(out-of-sample). Folds share nothing but the read-only dataset, so they can run
on any worker of the pool; results are collected in fold order.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from foldwise.components.interfaces import Fit, Metric
from foldwise.components.splitters.types import Split
from foldwise.contracts.results.cv import FoldRow, MetricCell
from foldwise.core.errors import FitFailure, InvalidArgument, MetricUndefined
from foldwise.runtime.cancel import CancelToken
from foldwise.runtime.pool import WorkerPool
from foldwise.use_cases._deps import borrowed_pool

from .types import FoldTask

logger = logging.getLogger(__name__)


def metric_names(metrics: Sequence[Metric]) -> List[str]:
    if not metrics:
        raise InvalidArgument("at least one metric is required")
    names = [str(getattr(m, "name", None) or getattr(m, "__name__", "")) for m in metrics]
    if any(not n for n in names):
        raise InvalidArgument("every metric needs a name")
    if len(set(names)) != len(names):
        raise InvalidArgument(f"duplicate metric names: {names}")
    return names


def _score_side(metric: Metric, model: Any, resample) -> Tuple[Optional[float], Optional[str]]:
    try:
        value = float(metric(model, resample))
    except MetricUndefined as e:
        return None, str(e)
    if not np.isfinite(value):
        return None, f"non-finite value ({value})"
    return value, None


def fit_and_score(split: Split, fit: Fit, metrics: Sequence[Metric]) -> Tuple[FoldRow, Optional[Any]]:
    """Evaluate one fold; return its report row and the fitted model.

    A failing fit (or a model that cannot predict) yields a ``failed`` row and
    no model. An undefined metric only blanks its own cell.
    """

    names = metric_names(metrics)
    try:
        try:
            model = fit(split.train)
        except Exception as e:
            raise FitFailure(split.fold_id, e) from e
        if model is None:
            raise FitFailure(split.fold_id, ValueError("fit returned no model"))

        cells: List[MetricCell] = []
        for name, metric in zip(names, metrics):
            try:
                ins, ins_note = _score_side(metric, model, split.train)
                oos, oos_note = _score_side(metric, model, split.test)
            except Exception as e:
                raise FitFailure(split.fold_id, e) from e
            notes = [f"{side}: {n}" for side, n in (("in-sample", ins_note), ("out-of-sample", oos_note)) if n]
            cells.append(
                MetricCell(
                    name=name,
                    in_sample=ins,
                    out_of_sample=oos,
                    note="; ".join(notes) or None,
                )
            )
    except FitFailure as e:
        row = FoldRow(
            fold_id=split.fold_id,
            status="failed",
            n_train=split.n_train,
            n_test=split.n_test,
            error=f"{type(e.cause).__name__}: {e.cause}",
        )
        return row, None

    row = FoldRow(
        fold_id=split.fold_id,
        status="ok",
        n_train=split.n_train,
        n_test=split.n_test,
        metrics=cells,
    )
    return row, model


def _run_task(task: FoldTask) -> FoldRow:
    row, _ = fit_and_score(task.split, task.fit, task.metrics)
    return row


def run_folds(
    splits: Iterable[Split],
    fit: Fit,
    metrics: Sequence[Metric],
    *,
    pool: Optional[WorkerPool] = None,
    cancel: Optional[CancelToken] = None,
) -> List[FoldRow]:
    """Fit/evaluate every split on the pool and collect rows in fold order.

    Cancellation is checked before each fold is handed to a worker; a cancelled
    run raises :class:`~foldwise.core.errors.RunCancelled` and returns nothing.
    """

    metric_names(metrics)
    metrics = list(metrics)

    def _tasks() -> Iterator[FoldTask]:
        for split in splits:
            if cancel is not None and cancel.cancelled:
                return
            yield FoldTask(split=split, fit=fit, metrics=metrics)

    with borrowed_pool(pool) as p:
        rows: List[FoldRow] = p.map(_run_task, _tasks())

    if cancel is not None:
        cancel.raise_if_cancelled()

    for row in rows:
        if not row.ok:
            logger.warning("fold %d failed and is excluded from aggregation: %s", row.fold_id, row.error)
        else:
            for cell in row.metrics:
                if cell.note:
                    logger.debug("fold %d metric %s undefined (%s)", row.fold_id, cell.name, cell.note)
    return rows
