from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from .common import JSONDict, ResultModel


class MetricCell(ResultModel):
    """One metric evaluated on one fold, in-sample and out-of-sample.

    ``None`` means the metric was undefined for that side; ``note`` says why.
    """

    name: str
    in_sample: Optional[float] = None
    out_of_sample: Optional[float] = None
    note: Optional[str] = None


class FoldRow(ResultModel):
    fold_id: int
    status: Literal["ok", "failed"]
    n_train: int
    n_test: int
    metrics: List[MetricCell] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def cell(self, name: str) -> Optional[MetricCell]:
        for c in self.metrics:
            if c.name == name:
                return c
        return None


class CVReport(ResultModel):
    """Per-fold table for one evaluation run."""

    n_rows: int
    n_splits: int
    seed: Optional[int] = None
    metric_names: List[str]
    rows: List[FoldRow]
    notes: List[str] = Field(default_factory=list)

    @property
    def ok_rows(self) -> List[FoldRow]:
        return [r for r in self.rows if r.ok]

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.rows if not r.ok)


class MetricSummary(ResultModel):
    name: str
    in_sample_mean: Optional[float] = None
    in_sample_std: Optional[float] = None
    out_of_sample_mean: Optional[float] = None
    out_of_sample_std: Optional[float] = None
    n_in_sample: int = 0
    n_out_of_sample: int = 0


class CVSummary(ResultModel):
    metrics: List[MetricSummary]
    n_folds_ok: int
    n_folds_failed: int
    notes: List[str] = Field(default_factory=list)

    def get(self, name: str) -> MetricSummary:
        for m in self.metrics:
            if m.name == name:
                return m
        raise KeyError(f"metric {name!r} not in summary; have {[m.name for m in self.metrics]}")


class RepeatSummary(ResultModel):
    repeat: int
    seed: int
    summary: CVSummary


class RepeatedCVResult(ResultModel):
    """Eager result of a repeated k-fold run.

    ``spread`` holds, per metric, the mean and std of the out-of-sample means
    across repeats: the variance of the cross-validation estimate itself.
    """

    n_repeats: int
    n_splits: int
    base_seed: int
    repeats: List[RepeatSummary]
    spread: List[MetricSummary]


class CrossValidationResult(ResultModel):
    """Config-driven run output."""

    mode: Literal["kfold", "holdout"]
    kind: Literal["regression", "classification"]
    algo: str
    dataset: str
    n_rows: int
    primary_metric: str
    metric_value: Optional[float] = None
    report: Optional[CVReport] = None
    summary: Optional[CVSummary] = None
    repeated: Optional[RepeatedCVResult] = None
    roc: Optional[JSONDict] = None
    notes: List[str] = Field(default_factory=list)
