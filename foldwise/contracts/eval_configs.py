from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .choices import MetricName


class EvalModel(BaseModel):
    # First metric is the primary one reported in summaries/notes.
    metrics: List[MetricName] = Field(default_factory=lambda: ["rmse"])
    seed: Optional[int] = None
    n_repeats: int = Field(1, ge=1)
    # None -> FOLDWISE_N_JOBS or (cpu count - 1)
    n_jobs: Optional[int] = None
    # ROC payload for classifiers; holdout mode only
    compute_roc: bool = False

    @field_validator("metrics")
    @classmethod
    def _non_empty_unique(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("at least one metric is required")
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate metric names: {v}")
        return v
