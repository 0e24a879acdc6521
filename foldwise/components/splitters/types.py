from __future__ import annotations

"""Splitter return contracts.

Splitters yield a *single, stable* fold payload shape. Index-level partitions
(:class:`FoldIndices`) are independent of any dataset; a :class:`Split` binds
them to one as :class:`~foldwise.components.data.Resample` views.
"""

from dataclasses import dataclass

import numpy as np

from foldwise.components.data.dataset import Resample


@dataclass(frozen=True, eq=False)
class FoldIndices:
    fold_id: int
    train: np.ndarray
    test: np.ndarray


@dataclass(frozen=True, eq=False)
class Split:
    """A single train/test split (fold). ``train`` and ``test`` are disjoint."""

    fold_id: int
    train: Resample
    test: Resample

    @property
    def n_train(self) -> int:
        return len(self.train)

    @property
    def n_test(self) -> int:
        return len(self.test)
