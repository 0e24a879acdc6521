from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from foldwise.contracts.eval_configs import EvalModel
from foldwise.contracts.model_configs import KNNConfig, LinearRegConfig, RandomForestRegressorConfig
from foldwise.contracts.run_config import DataModel, RunConfig
from foldwise.contracts.split_configs import SplitCVModel, SplitHoldoutModel
from foldwise.core.errors import InvalidArgument
from foldwise.io.datasets import list_datasets, load_dataset
from foldwise.registries.metrics import list_metric_names, make_metrics, register_metric
from foldwise.registries.models import list_model_algos, make_model_builder
from foldwise.registries.splitters import list_split_modes, make_splitter
from foldwise.use_cases.cross_validation import run_cross_validation


def test_kfold_on_bundled_regression():
    cfg = RunConfig(
        data=DataModel(name="diabetes"),
        split=SplitCVModel(n_splits=5),
        model=LinearRegConfig(),
        eval=EvalModel(metrics=["rmse", "r2"], seed=0, n_jobs=1),
    )
    result = run_cross_validation(cfg)
    assert result.mode == "kfold"
    assert result.kind == "regression"
    assert result.n_rows == 442
    assert result.primary_metric == "rmse"
    assert result.report is not None and len(result.report.rows) == 5
    assert result.metric_value == pytest.approx(result.summary.get("rmse").out_of_sample_mean)
    assert 40.0 < result.metric_value < 70.0
    assert result.repeated is None


def test_kfold_run_is_reproducible():
    cfg = RunConfig(
        data=DataModel(name="diabetes"),
        model=RandomForestRegressorConfig(n_estimators=10),
        split=SplitCVModel(n_splits=3),
        eval=EvalModel(metrics=["mae"], seed=4, n_jobs=1),
    )
    assert run_cross_validation(cfg) == run_cross_validation(cfg)


def test_repeated_from_config():
    cfg = RunConfig(
        data=DataModel(name="diabetes"),
        model=LinearRegConfig(),
        split=SplitCVModel(n_splits=4),
        eval=EvalModel(metrics=["mae"], seed=1, n_repeats=3, n_jobs=1),
    )
    result = run_cross_validation(cfg)
    assert result.repeated is not None
    assert result.repeated.n_repeats == 3
    assert result.repeated.base_seed == 1
    assert result.metric_value == pytest.approx(result.repeated.spread[0].out_of_sample_mean)


def test_holdout_classifier_with_roc():
    cfg = RunConfig(
        data=DataModel(name="breast_cancer"),
        split=SplitHoldoutModel(train_frac=0.7, stratified=True),
        model=KNNConfig(n_neighbors=7),
        eval=EvalModel(metrics=["accuracy", "roc_auc"], seed=0, compute_roc=True),
    )
    result = run_cross_validation(cfg)
    assert result.mode == "holdout"
    assert result.kind == "classification"
    assert result.report.n_splits == 1
    assert result.metric_value > 0.8
    assert result.roc is not None
    assert result.roc["kind"] == "binary"
    assert len(result.roc["fpr"]) == len(result.roc["tpr"])


def test_csv_source(tmp_path):
    rng = np.random.default_rng(0)
    df = pd.DataFrame({"a": rng.normal(size=40), "b": rng.normal(size=40)})
    df["y"] = 2.0 * df["a"] - df["b"]
    path = tmp_path / "table.csv"
    df.to_csv(path, index=False)

    cfg = RunConfig(
        data=DataModel(csv_path=str(path), target="y", delimiter=","),
        model=LinearRegConfig(),
        split=SplitCVModel(n_splits=4),
        eval=EvalModel(metrics=["rmse"], seed=0, n_jobs=1),
    )
    result = run_cross_validation(cfg)
    assert result.dataset == "table"
    assert result.n_rows == 40
    assert result.metric_value == pytest.approx(0.0, abs=1e-8)


def test_metric_kind_mismatch():
    cfg = RunConfig(
        data=DataModel(name="diabetes"),
        model=LinearRegConfig(),
        eval=EvalModel(metrics=["accuracy"], n_jobs=1),
    )
    with pytest.raises(InvalidArgument):
        run_cross_validation(cfg)


def test_dataset_kind_mismatch():
    cfg = RunConfig(
        data=DataModel(name="breast_cancer"),
        model=LinearRegConfig(),
        eval=EvalModel(metrics=["rmse"], n_jobs=1),
    )
    with pytest.raises(InvalidArgument):
        run_cross_validation(cfg)


def test_config_validation():
    with pytest.raises(ValidationError):
        DataModel()
    with pytest.raises(ValidationError):
        DataModel(name="diabetes", csv_path="x.csv", target="y")
    with pytest.raises(ValidationError):
        DataModel(csv_path="x.csv")
    with pytest.raises(ValidationError):
        EvalModel(metrics=[])
    with pytest.raises(ValidationError):
        EvalModel(metrics=["rmse", "rmse"])
    with pytest.raises(ValidationError):
        EvalModel(n_repeats=0)
    with pytest.raises(ValidationError):
        SplitHoldoutModel(train_frac=1.0)


def test_split_mode_discriminator():
    cfg = RunConfig.model_validate(
        {
            "data": {"name": "diabetes"},
            "split": {"mode": "holdout", "train_frac": 0.6},
            "model": {"algo": "linreg"},
        }
    )
    assert isinstance(cfg.split, SplitHoldoutModel)
    assert isinstance(cfg.model, LinearRegConfig)
    assert isinstance(RunConfig(data=DataModel(name="diabetes"), model=LinearRegConfig()).split, SplitCVModel)


def test_registries():
    assert {"linreg", "knnreg", "rfreg", "logreg", "knn", "forest"} <= set(list_model_algos())
    assert list_split_modes() == ["holdout", "kfold"]
    assert {"rmse", "accuracy", "roc_auc"} <= set(list_metric_names())
    with pytest.raises(InvalidArgument):
        make_model_builder(SimpleNamespace(algo="nope"))
    with pytest.raises(InvalidArgument):
        make_metrics(["nope"])


def test_registered_metric_resolves_by_name():
    @register_metric("always_one")
    def _always_one():
        def metric(model, resample):
            return 1.0

        metric.name = "always_one"
        return metric

    (m,) = make_metrics(["always_one"])
    assert m(None, None) == 1.0
    assert "always_one" in list_metric_names()


def test_holdout_splitter_from_registry(toy_regression):
    splitter = make_splitter(SplitHoldoutModel(train_frac=0.5), seed=0)
    (split,) = list(splitter.split(toy_regression))
    assert split.n_train == 50 and split.n_test == 50


def test_bundled_datasets():
    assert list_datasets() == ["breast_cancer", "diabetes"]
    ds = load_dataset("breast_cancer")
    assert ds.kind == "classification"
    assert ds.X.shape == (569, 30)
    with pytest.raises(InvalidArgument):
        load_dataset("iris")
