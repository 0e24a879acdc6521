# scripts/run_cv_local.py
from __future__ import annotations

import logging

from foldwise.api import LoggingProgress, repeats_to_frame, run_cross_validation, summary_to_frame
from foldwise.contracts.eval_configs import EvalModel
from foldwise.contracts.model_configs import KNNRegressorConfig
from foldwise.contracts.run_config import DataModel, RunConfig
from foldwise.contracts.split_configs import SplitCVModel

# ==== EDIT THESE AS YOU LIKE ==================================================
# Example A: bundled regression data
DATA = DataModel(name="diabetes")

# Example B: your own table
# DATA = DataModel(csv_path=r"./data/my_table.csv", target="outcome")

SPLIT = SplitCVModel(
    n_splits=5,
    stratified=False,
    shuffle=True,
)

MODEL = KNNRegressorConfig(n_neighbors=10)

EVAL = EvalModel(
    metrics=["rmse", "mae", "r2"],
    seed=42,
    n_repeats=10,
    n_jobs=None,   # None -> FOLDWISE_N_JOBS or (cpu count - 1)
)
# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    cfg = RunConfig(data=DATA, split=SPLIT, model=MODEL, eval=EVAL)
    result = run_cross_validation(cfg, progress=LoggingProgress())

    print("\n=== CV RESULT ===")
    print(f"Model: {result.algo} on {result.dataset} ({result.n_rows} rows)")
    print(f"Metric: {result.primary_metric} = {result.metric_value}")
    if result.repeated is not None:
        print(repeats_to_frame(result.repeated.repeats).groupby("metric")["out_of_sample_mean"].describe())
    elif result.summary is not None:
        print(summary_to_frame(result.summary))
    if result.notes:
        print("Notes:")
        for n in result.notes:
            print(f"- {n}")


if __name__ == "__main__":
    main()
