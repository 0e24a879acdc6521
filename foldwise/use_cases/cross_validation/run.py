from __future__ import annotations

"""Config-driven cross-validation (use-case).

Resolves a :class:`RunConfig` into a dataset, a fit callable and metrics, then
runs either a (repeated) k-fold evaluation or a single holdout evaluation.
"""

import logging
from typing import Any, Dict, List, Optional

from foldwise.components.data.dataset import Dataset
from foldwise.components.evaluation.metrics import metric_kind
from foldwise.components.models.fit import make_fit
from foldwise.contracts.model_configs import get_model_task
from foldwise.contracts.results.cv import CrossValidationResult
from foldwise.contracts.run_config import RunConfig
from foldwise.contracts.split_configs import SplitCVModel, SplitHoldoutModel
from foldwise.core.errors import InvalidArgument
from foldwise.core.progress import ProgressCallback
from foldwise.io.datasets import load_from_data_model
from foldwise.registries.metrics import make_metrics
from foldwise.registries.models import make_model_builder
from foldwise.registries.splitters import make_splitter
from foldwise.runtime.cancel import CancelToken
from foldwise.runtime.pool import WorkerPool
from foldwise.runtime.random.rng import RngManager
from foldwise.use_cases._deps import borrowed_pool, resolve_seed

from .aggregate import aggregate_report
from .evaluate import evaluate_holdout, evaluate_splits
from .repeated import repeated_cv

logger = logging.getLogger(__name__)


def _check_metric_kinds(metrics: List[str], kind: str) -> None:
    wrong = [m for m in metrics if metric_kind(m) != kind]
    if wrong:
        raise InvalidArgument(f"metrics {wrong} do not apply to a {kind} model")


def run_cross_validation(
    run_config: RunConfig,
    *,
    dataset: Optional[Dataset] = None,
    pool: Optional[WorkerPool] = None,
    cancel: Optional[CancelToken] = None,
    progress: Optional[ProgressCallback] = None,
) -> CrossValidationResult:
    cfg = run_config

    # --- Kind ---------------------------------------------------------------
    kind = get_model_task(cfg.model)
    _check_metric_kinds(list(cfg.eval.metrics), kind)

    # --- Load data ----------------------------------------------------------
    if dataset is None:
        dataset = load_from_data_model(cfg.data, kind=kind)
    if dataset.kind != kind:
        raise InvalidArgument(
            f"model {cfg.model.algo!r} is a {kind} model but dataset {dataset.name!r} is {dataset.kind}"
        )

    # --- RNG ----------------------------------------------------------------
    seed = resolve_seed(cfg.eval.seed, fallback=0)
    rngm = RngManager(seed)

    # --- Model + metrics ----------------------------------------------------
    builder = make_model_builder(cfg.model, seed=rngm.child_seed("model"))
    fit = make_fit(builder)
    metrics = make_metrics(cfg.eval.metrics)
    primary = cfg.eval.metrics[0]

    notes: List[str] = []
    result: Dict[str, Any] = {
        "mode": cfg.split.mode,
        "kind": kind,
        "algo": cfg.model.algo,
        "dataset": dataset.name,
        "n_rows": dataset.n_rows,
        "primary_metric": primary,
        "notes": notes,
    }

    # --- Holdout ------------------------------------------------------------
    if isinstance(cfg.split, SplitHoldoutModel):
        if cfg.eval.n_repeats > 1:
            notes.append("n_repeats ignored in holdout mode")
        holdout = evaluate_holdout(
            dataset,
            fit,
            metrics,
            train_frac=cfg.split.train_frac,
            seed=rngm.child_seed("holdout/split"),
            stratified=cfg.split.stratified,
            compute_roc=cfg.eval.compute_roc and kind == "classification",
        )
        summary = aggregate_report(holdout.report)
        result.update(
            report=holdout.report,
            summary=summary,
            metric_value=summary.get(primary).out_of_sample_mean,
            roc=holdout.roc,
        )
        notes.extend(holdout.report.notes)
        return CrossValidationResult.model_validate(result)

    if not isinstance(cfg.split, SplitCVModel):
        raise InvalidArgument(f"Unsupported split mode: {cfg.split.mode!r}")
    if cfg.eval.compute_roc:
        notes.append("compute_roc is only honoured in holdout mode")

    with borrowed_pool(pool, n_jobs=cfg.eval.n_jobs) as active_pool:
        # --- Repeated k-fold ------------------------------------------------
        if cfg.eval.n_repeats > 1:
            repeated = repeated_cv(
                dataset,
                fit,
                metrics,
                n_repeats=cfg.eval.n_repeats,
                n_splits=cfg.split.n_splits,
                base_seed=seed,
                shuffle=cfg.split.shuffle,
                stratified=cfg.split.stratified,
                pool=active_pool,
                cancel=cancel,
                progress=progress,
            )
            spread = next(m for m in repeated.spread if m.name == primary)
            result.update(repeated=repeated, metric_value=spread.out_of_sample_mean)
            return CrossValidationResult.model_validate(result)

        # --- Single k-fold --------------------------------------------------
        split_seed = rngm.repeat_seeds(1)[0]
        splitter = make_splitter(cfg.split, seed=split_seed)
        report = evaluate_splits(
            dataset,
            splitter.split(dataset),
            fit,
            metrics,
            seed=split_seed,
            pool=active_pool,
            cancel=cancel,
        )
        summary = aggregate_report(report)
        notes.extend(summary.notes)
        result.update(
            report=report,
            summary=summary,
            metric_value=summary.get(primary).out_of_sample_mean,
        )
        return CrossValidationResult.model_validate(result)
