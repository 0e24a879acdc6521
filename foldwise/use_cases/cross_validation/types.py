from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from foldwise.components.interfaces import Fit, Metric
from foldwise.components.splitters.types import Split
from foldwise.contracts.results.cv import CVReport


@dataclass(frozen=True)
class FoldTask:
    """Everything a worker needs to evaluate one fold."""

    split: Split
    fit: Fit
    metrics: Sequence[Metric]


@dataclass(frozen=True)
class HoldoutEvaluation:
    """Holdout run output; keeps the fitted model for inspection."""

    report: CVReport
    model: Optional[Any] = None
    roc: Optional[Dict[str, Any]] = None
