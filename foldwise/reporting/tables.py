from __future__ import annotations

"""Tabular hand-off of evaluation results.

Long-format frames are convenient for plotting libraries and for printing;
nothing here renders anything itself.
"""

from typing import Sequence

import pandas as pd

from foldwise.contracts.results.cv import CVReport, CVSummary, RepeatSummary


def report_to_frame(report: CVReport) -> pd.DataFrame:
    """One row per (fold, metric); failed folds appear once with NaN scores."""
    records = []
    for row in report.rows:
        if not row.ok:
            records.append(
                {
                    "fold": row.fold_id,
                    "status": row.status,
                    "metric": None,
                    "in_sample": float("nan"),
                    "out_of_sample": float("nan"),
                    "n_train": row.n_train,
                    "n_test": row.n_test,
                    "error": row.error,
                }
            )
            continue
        for cell in row.metrics:
            records.append(
                {
                    "fold": row.fold_id,
                    "status": row.status,
                    "metric": cell.name,
                    "in_sample": cell.in_sample,
                    "out_of_sample": cell.out_of_sample,
                    "n_train": row.n_train,
                    "n_test": row.n_test,
                    "error": None,
                }
            )
    return pd.DataFrame.from_records(
        records,
        columns=["fold", "status", "metric", "in_sample", "out_of_sample", "n_train", "n_test", "error"],
    )


def summary_to_frame(summary: CVSummary) -> pd.DataFrame:
    return pd.DataFrame([m.model_dump() for m in summary.metrics]).set_index("name")


def repeats_to_frame(repeats: Sequence[RepeatSummary]) -> pd.DataFrame:
    """One row per (repeat, metric) with that repeat's means."""
    records = []
    for r in repeats:
        for m in r.summary.metrics:
            records.append(
                {
                    "repeat": r.repeat,
                    "seed": r.seed,
                    "metric": m.name,
                    "in_sample_mean": m.in_sample_mean,
                    "out_of_sample_mean": m.out_of_sample_mean,
                }
            )
    return pd.DataFrame.from_records(
        records,
        columns=["repeat", "seed", "metric", "in_sample_mean", "out_of_sample_mean"],
    )
