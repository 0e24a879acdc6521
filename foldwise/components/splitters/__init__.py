from .types import FoldIndices, Split
from .cv_split import crossv_kfold, kfold_indices
from .holdout_split import holdout_indices, resample_partition
from .splitters import HoldOutSplitter, KFoldSplitter

__all__ = [
    "FoldIndices",
    "Split",
    "crossv_kfold",
    "kfold_indices",
    "holdout_indices",
    "resample_partition",
    "HoldOutSplitter",
    "KFoldSplitter",
]
