"""Cross-validation use-case.

- folds: fit/score one split, run all splits on a worker pool
- aggregate: per-metric mean/std over successful folds, spread across repeats
- evaluate: k-fold and holdout evaluation of a fit callable
- repeated: repeated k-fold with per-repeat seeds
- run: config-driven entry point
"""

from .aggregate import aggregate_report, summarize_repeats
from .evaluate import evaluate_cv, evaluate_holdout, evaluate_splits
from .folds import fit_and_score, run_folds
from .repeated import iter_repeated_cv, repeated_cv
from .run import run_cross_validation
from .types import HoldoutEvaluation

__all__ = [
    "aggregate_report",
    "summarize_repeats",
    "evaluate_cv",
    "evaluate_holdout",
    "evaluate_splits",
    "fit_and_score",
    "run_folds",
    "iter_repeated_cv",
    "repeated_cv",
    "run_cross_validation",
    "HoldoutEvaluation",
]
