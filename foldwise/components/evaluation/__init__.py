from .metrics import PROBA_METRICS, PredictionMetric, list_metrics, make_metric, score
from .roc import binary_roc_curve_from_scores, multiclass_roc_curves_from_scores, roc_payload

__all__ = [
    "PROBA_METRICS",
    "PredictionMetric",
    "list_metrics",
    "make_metric",
    "score",
    "binary_roc_curve_from_scores",
    "multiclass_roc_curves_from_scores",
    "roc_payload",
]
