from __future__ import annotations

"""Exception taxonomy for the evaluation engine.

Structural problems (bad fold counts, empty data, every fold failing) propagate
to the caller. Per-fold problems (a fit raising, a metric being undefined) are
recovered locally and recorded in the report instead.
"""


class FoldwiseError(Exception):
    """Base class for all engine errors."""


class InvalidArgument(FoldwiseError, ValueError):
    """Malformed fold count, empty dataset or out-of-range resample indices."""


class FitFailure(FoldwiseError):
    """A per-fold fit raised or produced a degenerate model."""

    def __init__(self, fold_id: int, cause: BaseException):
        self.fold_id = int(fold_id)
        self.cause = cause
        super().__init__(f"fold {fold_id}: {type(cause).__name__}: {cause}")


class AllFoldsFailed(FoldwiseError):
    """No fold produced a usable model, so there is nothing to aggregate."""


class MetricUndefined(FoldwiseError, ArithmeticError):
    """A metric is mathematically undefined for the given resample."""


class RunCancelled(FoldwiseError):
    """The caller cancelled an evaluation run before it completed."""
