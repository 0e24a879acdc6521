from __future__ import annotations

from typing import Any

import numpy as np
import pytest
from pydantic import ValidationError

from foldwise.components.data.dataset import Resample
from foldwise.components.evaluation.metrics import make_metric
from foldwise.components.models.builders import KNNBuilder
from foldwise.components.models.fit import SklearnFit
from foldwise.components.splitters import Split, crossv_kfold
from foldwise.contracts.model_configs import KNNConfig
from foldwise.core.errors import AllFoldsFailed, InvalidArgument, MetricUndefined, RunCancelled
from foldwise.runtime.cancel import CancelToken
from foldwise.runtime.pool import WorkerPool
from foldwise.use_cases.cross_validation import (
    aggregate_report,
    evaluate_cv,
    evaluate_holdout,
    evaluate_splits,
    fit_and_score,
)

from .conftest import ConstantModel, constant_fit


class SmallResampleUndefined:
    """Defined only on resamples of at least ``min_rows`` rows."""

    name = "picky"

    def __init__(self, min_rows: int):
        self.min_rows = min_rows

    def __call__(self, model: Any, resample: Resample) -> float:
        if len(resample) < self.min_rows:
            raise MetricUndefined(f"needs {self.min_rows} rows")
        return 1.0


def test_evaluate_cv_linear_regression(toy_regression, linreg_fit):
    report = evaluate_cv(
        toy_regression,
        linreg_fit,
        [make_metric("rmse"), make_metric("r2")],
        n_splits=5,
        seed=3,
    )
    assert report.n_splits == 5
    assert report.n_rows == 100
    assert report.metric_names == ["rmse", "r2"]
    assert [r.fold_id for r in report.rows] == [1, 2, 3, 4, 5]
    assert all(r.ok for r in report.rows)
    assert all(r.n_train == 80 and r.n_test == 20 for r in report.rows)

    summary = aggregate_report(report)
    rmse = summary.get("rmse")
    assert rmse.n_out_of_sample == 5
    assert rmse.in_sample_mean < 0.2
    assert rmse.out_of_sample_mean < 0.2
    assert summary.get("r2").out_of_sample_mean > 0.99


def test_failed_folds_are_recorded_and_excluded(toy_regression):
    def fit(train: Resample):
        # row 0 is in the training set of every fold but one
        if 0 in train.idx:
            raise np.linalg.LinAlgError("singular matrix")
        return ConstantModel(float(np.mean(train.y)))

    report = evaluate_cv(toy_regression, fit, [make_metric("rmse")], n_splits=4, seed=0)
    failed = [r for r in report.rows if not r.ok]
    assert len(failed) == 3
    assert all("LinAlgError" in r.error for r in failed)
    assert all(r.metrics == [] for r in failed)
    assert len(report.notes) == 3

    summary = aggregate_report(report)
    assert summary.n_folds_ok == 1
    assert summary.n_folds_failed == 3
    assert summary.get("rmse").n_out_of_sample == 1


def test_all_folds_failing_is_fatal(toy_regression):
    def fit(train: Resample):
        raise RuntimeError("boom")

    with pytest.raises(AllFoldsFailed):
        evaluate_cv(toy_regression, fit, [make_metric("rmse")], n_splits=3, seed=0)


def test_undefined_metric_only_blanks_its_cell(toy_regression):
    metrics = [make_metric("mae"), SmallResampleUndefined(min_rows=50)]
    report = evaluate_cv(toy_regression, constant_fit(3.0), metrics, n_splits=5, seed=1)
    for row in report.rows:
        assert row.ok
        picky = row.cell("picky")
        assert picky.in_sample == 1.0
        assert picky.out_of_sample is None
        assert "out-of-sample" in picky.note
        assert row.cell("mae").out_of_sample is not None

    summary = aggregate_report(report)
    assert summary.get("picky").out_of_sample_mean is None
    assert summary.get("picky").in_sample_mean == 1.0
    assert any("picky" in n for n in summary.notes)


def test_report_is_immutable(toy_regression):
    report = evaluate_cv(toy_regression, constant_fit(0.0), [make_metric("rmse")], n_splits=2, seed=0)
    with pytest.raises(ValidationError):
        report.n_rows = 5


def test_duplicate_metric_names_rejected(toy_regression):
    with pytest.raises(InvalidArgument):
        evaluate_cv(
            toy_regression,
            constant_fit(0.0),
            [make_metric("rmse"), make_metric("rmse")],
            n_splits=2,
            seed=0,
        )


def test_splits_must_reference_dataset(toy_regression, toy_classification):
    splits = crossv_kfold(toy_classification, 3, seed=0)
    with pytest.raises(InvalidArgument):
        evaluate_splits(toy_regression, splits, constant_fit(0.0), [make_metric("rmse")])


def test_overlapping_train_and_test_rejected(toy_regression):
    leaky = Split(
        fold_id=1,
        train=toy_regression.all_rows(),
        test=Resample(toy_regression, np.arange(10)),
    )
    with pytest.raises(InvalidArgument, match="both train and test"):
        evaluate_splits(toy_regression, [leaky], constant_fit(0.0), [make_metric("rmse")])


def test_non_finite_metric_value_is_blanked(toy_regression):
    class NotANumber:
        name = "nan_score"

        def __call__(self, model, resample):
            return float("nan")

    report = evaluate_cv(
        toy_regression, constant_fit(0.0), [make_metric("mae"), NotANumber()], n_splits=3, seed=0
    )
    for row in report.rows:
        assert row.ok
        cell = row.cell("nan_score")
        assert cell.in_sample is None and cell.out_of_sample is None
        assert "non-finite" in cell.note

    summary = aggregate_report(report)
    assert summary.get("nan_score").out_of_sample_mean is None
    assert summary.get("nan_score").n_out_of_sample == 0
    assert summary.get("mae").out_of_sample_mean is not None


def test_fit_and_score_returns_model(toy_regression, linreg_fit):
    split = crossv_kfold(toy_regression, 5, seed=0)[0]
    row, model = fit_and_score(split, linreg_fit, [make_metric("rmse")])
    assert row.ok
    assert model.predict(split.test.X).shape == (20,)


def test_cancelled_before_start(toy_regression):
    token = CancelToken()
    token.cancel("user abort")
    with pytest.raises(RunCancelled, match="user abort"):
        evaluate_cv(
            toy_regression, constant_fit(0.0), [make_metric("rmse")], n_splits=5, seed=0, cancel=token
        )


def test_cancelled_between_folds(toy_regression):
    token = CancelToken()
    calls = []

    def fit(train: Resample):
        calls.append(len(train))
        if len(calls) == 2:
            token.cancel()
        return ConstantModel(0.0)

    with pytest.raises(RunCancelled):
        evaluate_cv(
            toy_regression, fit, [make_metric("rmse")], n_splits=5, seed=0, cancel=token
        )
    assert len(calls) < 5


def test_parallel_matches_sequential(toy_regression, linreg_fit):
    metrics = [make_metric("rmse"), make_metric("mae")]
    sequential = evaluate_cv(toy_regression, linreg_fit, metrics, n_splits=5, seed=8)
    with WorkerPool(n_jobs=2) as pool:
        parallel = evaluate_cv(toy_regression, linreg_fit, metrics, n_splits=5, seed=8, pool=pool)
    assert parallel == sequential


def test_holdout_with_roc(toy_classification):
    fit = SklearnFit(builder=KNNBuilder(cfg=KNNConfig(n_neighbors=5)))
    out = evaluate_holdout(
        toy_classification,
        fit,
        [make_metric("accuracy"), make_metric("roc_auc")],
        train_frac=0.75,
        seed=2,
        stratified=True,
        compute_roc=True,
    )
    assert out.report.n_splits == 1
    row = out.report.rows[0]
    assert row.ok
    assert row.n_train == 45 and row.n_test == 15
    assert out.model is not None
    assert out.roc is not None and out.roc["kind"] == "binary"
    assert out.roc["auc"] == pytest.approx(row.cell("roc_auc").out_of_sample)


def test_holdout_failed_fit_is_fatal(toy_regression):
    def fit(train: Resample):
        raise ValueError("degenerate")

    with pytest.raises(AllFoldsFailed):
        evaluate_holdout(toy_regression, fit, [make_metric("rmse")], seed=0)
