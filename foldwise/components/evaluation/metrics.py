from __future__ import annotations

"""Metric implementations.

Every scorer takes true outcomes and predictions and returns a float, or raises
:class:`MetricUndefined` when the value would be meaningless (empty resample,
R² on constant outcomes, AUC with a single class, non-finite results). No
placeholder numbers are ever returned in place of an undefined metric.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Optional

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    balanced_accuracy_score,
    explained_variance_score,
    f1_score,
    log_loss,
    mean_absolute_error,
    mean_squared_error,
    precision_score,
    r2_score,
    recall_score,
    roc_auc_score,
)

from foldwise.components.data.dataset import Resample
from foldwise.core.errors import InvalidArgument, MetricUndefined
from foldwise.core.shapes import check_len, coerce_1d

EvalKind = Literal["classification", "regression"]

PROBA_METRICS = {"roc_auc", "log_loss"}


def _require_variance(y: np.ndarray, metric: str) -> None:
    if np.unique(y).size < 2:
        raise MetricUndefined(f"{metric} is undefined for constant outcomes")


def _r2(y, yhat) -> float:
    _require_variance(y, "r2")
    return r2_score(y, yhat)


def _explained_variance(y, yhat) -> float:
    _require_variance(y, "explained_variance")
    return explained_variance_score(y, yhat)


_REG_METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "rmse": lambda y, yhat: np.sqrt(mean_squared_error(y, yhat)),
    "mse": lambda y, yhat: mean_squared_error(y, yhat),
    "mae": lambda y, yhat: mean_absolute_error(y, yhat),
    "r2": _r2,
    "explained_variance": _explained_variance,
}


_CLASS_METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "accuracy": lambda y, yhat: accuracy_score(y, yhat),
    "balanced_accuracy": lambda y, yhat: balanced_accuracy_score(y, yhat),
    "f1_macro": lambda y, yhat: f1_score(y, yhat, average="macro", zero_division=0),
    "precision_macro": lambda y, yhat: precision_score(y, yhat, average="macro", zero_division=0),
    "recall_macro": lambda y, yhat: recall_score(y, yhat, average="macro", zero_division=0),
}


def _proba_score(metric: str, y_true: np.ndarray, proba: np.ndarray, labels) -> float:
    Z = np.asarray(proba)
    check_len(y_true, Z, "y_proba")
    if metric == "roc_auc":
        _require_variance(y_true, "roc_auc")
        if Z.ndim == 2 and Z.shape[1] == 2:
            return roc_auc_score(y_true, Z[:, 1], labels=labels)
        return roc_auc_score(y_true, Z, multi_class="ovr", labels=labels, average="macro")
    if metric == "log_loss":
        return log_loss(y_true, Z, labels=labels)
    raise InvalidArgument(f"Unknown probability metric '{metric}'")


def list_metrics(kind: Optional[EvalKind] = None) -> list[str]:
    if kind == "regression":
        return sorted(_REG_METRICS)
    if kind == "classification":
        return sorted(list(_CLASS_METRICS) + list(PROBA_METRICS))
    return sorted(list(_REG_METRICS) + list(_CLASS_METRICS) + list(PROBA_METRICS))


def metric_kind(metric: str) -> EvalKind:
    if metric in _REG_METRICS:
        return "regression"
    if metric in _CLASS_METRICS or metric in PROBA_METRICS:
        return "classification"
    raise InvalidArgument(f"Unknown metric '{metric}'. Supported: {list_metrics()}")


def score(
    y_true,
    y_pred=None,
    *,
    metric: str = "rmse",
    y_proba=None,
    labels=None,
) -> float:
    """Universal scorer for classification and regression."""
    y_true = coerce_1d(y_true)
    if y_true.size == 0:
        raise MetricUndefined(f"{metric} is undefined on an empty resample")

    kind = metric_kind(metric)

    if metric in PROBA_METRICS:
        if y_proba is None:
            raise InvalidArgument(f"Metric '{metric}' requires y_proba.")
        value = _proba_score(metric, y_true, y_proba, labels)
    else:
        if y_pred is None:
            raise InvalidArgument(f"Metric '{metric}' requires y_pred.")
        y_pred = coerce_1d(y_pred)
        check_len(y_true, y_pred, "y_pred")
        table = _REG_METRICS if kind == "regression" else _CLASS_METRICS
        value = table[metric](y_true, y_pred)

    value = float(value)
    if not np.isfinite(value):
        raise MetricUndefined(f"{metric} evaluated to a non-finite value ({value})")
    return value


@dataclass(frozen=True)
class PredictionMetric:
    """A named metric computed from a model's predictions on a resample.

    Hard-label/regression metrics use ``model.predict``; probability metrics
    use ``model.predict_proba`` with the model's ``classes_`` as labels.
    """

    name: str

    def __call__(self, model: Any, resample: Resample) -> float:
        if len(resample) == 0:
            raise MetricUndefined(f"{self.name} is undefined on an empty resample")

        X = resample.X
        if self.name in PROBA_METRICS:
            if not hasattr(model, "predict_proba"):
                raise InvalidArgument(
                    f"Metric '{self.name}' requires predict_proba, "
                    f"but model {type(model).__name__} has none."
                )
            return score(
                resample.y,
                metric=self.name,
                y_proba=model.predict_proba(X),
                labels=getattr(model, "classes_", None),
            )
        return score(resample.y, model.predict(X), metric=self.name)


def make_metric(name: str) -> PredictionMetric:
    metric_kind(name)
    return PredictionMetric(name=name)
