from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

from foldwise.contracts.split_configs import SplitCVModel, SplitHoldoutModel
from foldwise.components.data.dataset import Dataset
from foldwise.components.splitters.cv_split import crossv_kfold
from foldwise.components.splitters.holdout_split import resample_partition
from foldwise.components.splitters.types import Split
from ..interfaces import Splitter


@dataclass
class HoldOutSplitter(Splitter):
    cfg: SplitHoldoutModel
    seed: Optional[int] = None

    def split(self, dataset: Dataset) -> Iterator[Split]:
        yield resample_partition(
            dataset,
            self.cfg.train_frac,
            self.seed,
            stratified=self.cfg.stratified,
        )


@dataclass
class KFoldSplitter(Splitter):
    cfg: SplitCVModel
    seed: Optional[int] = None

    def split(self, dataset: Dataset) -> Iterator[Split]:
        yield from crossv_kfold(
            dataset,
            self.cfg.n_splits,
            self.seed,
            shuffle=self.cfg.shuffle,
            stratified=self.cfg.stratified,
        )
