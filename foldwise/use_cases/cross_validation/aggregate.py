from __future__ import annotations

"""Reduce per-fold rows into summary statistics.

Only successful folds contribute. The reduction (mean and population standard
deviation) does not depend on row order beyond floating-point summation.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from foldwise.contracts.results.cv import CVReport, CVSummary, MetricSummary, RepeatSummary
from foldwise.core.errors import AllFoldsFailed, InvalidArgument


def _mean_std(values: List[float]) -> Tuple[Optional[float], Optional[float]]:
    if not values:
        return None, None
    arr = np.asarray(values, dtype=float)
    return float(np.mean(arr)), float(np.std(arr))


def aggregate_report(report: CVReport) -> CVSummary:
    """Per-metric mean/std over successful folds, in-sample and out-of-sample.

    Raises :class:`AllFoldsFailed` when no fold succeeded. A metric that was
    undefined on every successful fold gets ``None`` statistics and a note.
    """

    ok_rows = report.ok_rows
    if not ok_rows:
        raise AllFoldsFailed(
            f"no fold produced a usable model ({len(report.rows)} folds, all failed)"
        )

    notes: List[str] = []
    out: List[MetricSummary] = []
    for name in report.metric_names:
        ins: List[float] = []
        oos: List[float] = []
        for row in ok_rows:
            cell = row.cell(name)
            if cell is None:
                continue
            if cell.in_sample is not None:
                ins.append(cell.in_sample)
            if cell.out_of_sample is not None:
                oos.append(cell.out_of_sample)

        ins_mean, ins_std = _mean_std(ins)
        oos_mean, oos_std = _mean_std(oos)
        if oos_mean is None:
            notes.append(f"{name}: undefined out-of-sample on every successful fold")
        if ins_mean is None:
            notes.append(f"{name}: undefined in-sample on every successful fold")

        out.append(
            MetricSummary(
                name=name,
                in_sample_mean=ins_mean,
                in_sample_std=ins_std,
                out_of_sample_mean=oos_mean,
                out_of_sample_std=oos_std,
                n_in_sample=len(ins),
                n_out_of_sample=len(oos),
            )
        )

    n_failed = report.n_failed
    if n_failed:
        notes.append(f"{n_failed} of {len(report.rows)} folds failed and were excluded")

    return CVSummary(
        metrics=out,
        n_folds_ok=len(ok_rows),
        n_folds_failed=n_failed,
        notes=notes,
    )


def summarize_repeats(repeats: Sequence[RepeatSummary]) -> List[MetricSummary]:
    """Spread of the per-repeat means: how much the CV estimate itself varies."""

    if not repeats:
        raise InvalidArgument("no repeats to summarize")

    names = [m.name for m in repeats[0].summary.metrics]
    out: List[MetricSummary] = []
    for name in names:
        ins = [r.summary.get(name).in_sample_mean for r in repeats]
        oos = [r.summary.get(name).out_of_sample_mean for r in repeats]
        ins = [v for v in ins if v is not None]
        oos = [v for v in oos if v is not None]
        ins_mean, ins_std = _mean_std(ins)
        oos_mean, oos_std = _mean_std(oos)
        out.append(
            MetricSummary(
                name=name,
                in_sample_mean=ins_mean,
                in_sample_std=ins_std,
                out_of_sample_mean=oos_mean,
                out_of_sample_std=oos_std,
                n_in_sample=len(ins),
                n_out_of_sample=len(oos),
            )
        )
    return out
