from __future__ import annotations

"""ROC curve payloads for classifiers.

Curves are returned as JSON-friendly dicts (lists, floats) so plotting code can
consume them directly; nothing here renders anything.
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np
from sklearn.metrics import roc_auc_score, roc_curve

from foldwise.components.data.dataset import Resample
from foldwise.core.errors import InvalidArgument, MetricUndefined
from foldwise.core.shapes import check_len, coerce_1d


def _tolist(a) -> list:
    return [float(v) for v in np.asarray(a, dtype=float).ravel()]


def binary_roc_curve_from_scores(
    y_true,
    y_score,
    *,
    pos_label: Optional[Any] = None,
) -> Dict[str, Any]:
    """Compute a ROC curve for binary classification from a 1D score/proba array."""
    y_true = coerce_1d(y_true)
    y_score = coerce_1d(y_score)
    check_len(y_true, y_score, "y_score")

    labels = np.unique(y_true)
    if labels.size != 2:
        raise MetricUndefined(f"binary ROC needs exactly two classes in y_true; got {labels.size}.")
    if pos_label is None:
        pos_label = labels[1]

    fpr, tpr, thresholds = roc_curve(
        y_true,
        y_score,
        pos_label=pos_label,
        drop_intermediate=False,
    )
    auc_val = roc_auc_score((y_true == pos_label).astype(int), y_score)

    return {
        "pos_label": pos_label.item() if hasattr(pos_label, "item") else pos_label,
        "fpr": _tolist(fpr),
        "tpr": _tolist(tpr),
        "thresholds": _tolist(thresholds),
        "auc": float(auc_val),
    }


def multiclass_roc_curves_from_scores(
    y_true,
    y_score,
    labels: Optional[Sequence] = None,
) -> Dict[str, Any]:
    """One-vs-rest ROC curves for multiclass classification from a 2D score/proba array."""
    y_true = coerce_1d(y_true)
    Y = np.asarray(y_score)
    if Y.ndim != 2:
        raise InvalidArgument(
            f"multiclass_roc_curves_from_scores expects a 2D array of scores, got shape {Y.shape}."
        )
    check_len(y_true, Y, "y_score")

    labels_arr = np.unique(y_true) if labels is None else np.asarray(labels)
    if Y.shape[1] != labels_arr.size:
        raise InvalidArgument(
            "Mismatch between number of columns in y_score "
            f"({Y.shape[1]}) and number of labels ({labels_arr.size})."
        )

    y_true_indicator = (y_true[:, None] == labels_arr[None, :]).astype(int)

    per_class: list[dict] = []
    aucs: list[float] = []
    for idx, label in enumerate(labels_arr):
        y_bin = y_true_indicator[:, idx]
        # a class absent from this resample has no curve
        if y_bin.min() == y_bin.max():
            continue
        fpr_k, tpr_k, thr_k = roc_curve(y_bin, Y[:, idx], pos_label=1, drop_intermediate=False)
        auc_k = float(roc_auc_score(y_bin, Y[:, idx]))
        per_class.append(
            {
                "label": label.item() if hasattr(label, "item") else label,
                "fpr": _tolist(fpr_k),
                "tpr": _tolist(tpr_k),
                "thresholds": _tolist(thr_k),
                "auc": auc_k,
            }
        )
        aucs.append(auc_k)

    if not per_class:
        raise MetricUndefined("no class has both positives and negatives in this resample")

    all_fpr = np.unique(np.concatenate([np.asarray(c["fpr"]) for c in per_class]))
    mean_tpr = np.zeros_like(all_fpr)
    for c in per_class:
        mean_tpr += np.interp(all_fpr, c["fpr"], c["tpr"])
    mean_tpr /= len(per_class)

    return {
        "labels": [lab.item() if hasattr(lab, "item") else lab for lab in labels_arr],
        "per_class": per_class,
        "macro_avg": {
            "fpr": _tolist(all_fpr),
            "tpr": _tolist(mean_tpr),
            "auc": float(np.mean(aucs)),
        },
    }


def roc_payload(model: Any, resample: Resample) -> Dict[str, Any]:
    """ROC curve(s) of a fitted classifier on ``resample``.

    Binary problems give a single curve for the second entry of
    ``model.classes_``; otherwise one-vs-rest curves per class.
    """

    if not hasattr(model, "predict_proba"):
        raise InvalidArgument(f"ROC requires predict_proba; {type(model).__name__} has none.")
    if len(resample) == 0:
        raise MetricUndefined("ROC is undefined on an empty resample")

    proba = np.asarray(model.predict_proba(resample.X))
    classes = getattr(model, "classes_", None)
    if proba.ndim == 2 and proba.shape[1] == 2:
        pos_label = classes[1] if classes is not None else None
        out = binary_roc_curve_from_scores(resample.y, proba[:, 1], pos_label=pos_label)
        out["kind"] = "binary"
        return out

    out = multiclass_roc_curves_from_scores(resample.y, proba, labels=classes)
    out["kind"] = "multiclass"
    return out
