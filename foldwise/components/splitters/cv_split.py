from __future__ import annotations

"""k-fold partitioning.

Tie-breaking policy: rows are (optionally) permuted, then dealt round-robin,
position ``i`` going to fold ``i % k``. Fold sizes therefore differ by at most
one and the first ``n_rows % k`` folds receive the extra row.

Stratification sorts the permuted order by class (stably) before dealing, so
each class is spread round-robin over the folds as well.
"""

from typing import List, Optional

import numpy as np

from foldwise.components.data.dataset import Dataset, Resample
from foldwise.components.splitters.types import FoldIndices, Split
from foldwise.core.errors import InvalidArgument


def check_fold_count(n_rows: int, n_splits: int) -> None:
    if int(n_rows) < 1:
        raise InvalidArgument(f"Cannot partition an empty dataset (n_rows={n_rows}).")
    if int(n_splits) < 2:
        raise InvalidArgument(f"n_splits must be >= 2; got {n_splits}.")
    if int(n_splits) > int(n_rows):
        raise InvalidArgument(
            f"n_splits={n_splits} cannot be greater than the number of rows={n_rows}."
        )


def dealing_order(
    n_rows: int,
    seed: Optional[int],
    *,
    shuffle: bool = True,
    strata: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Row order used for round-robin dealing."""
    if shuffle:
        order = np.random.default_rng(seed).permutation(n_rows)
    else:
        order = np.arange(n_rows)

    if strata is not None:
        strata = np.asarray(strata).ravel()
        if strata.shape[0] != n_rows:
            raise InvalidArgument(f"strata length {strata.shape[0]} != n_rows {n_rows}")
        _, codes = np.unique(strata, return_inverse=True)
        order = order[np.argsort(codes[order], kind="stable")]

    return order


def kfold_indices(
    n_rows: int,
    n_splits: int,
    seed: Optional[int] = None,
    *,
    shuffle: bool = True,
    strata: Optional[np.ndarray] = None,
) -> List[FoldIndices]:
    """Partition ``range(n_rows)`` into ``n_splits`` disjoint test folds.

    Each returned :class:`FoldIndices` carries the sorted test indices of one
    fold and the sorted complementary train indices. Identical
    ``(n_rows, n_splits, seed)`` always give the identical partition.
    """

    check_fold_count(n_rows, n_splits)
    n_rows, n_splits = int(n_rows), int(n_splits)

    order = dealing_order(n_rows, seed, shuffle=shuffle, strata=strata)
    assignment = np.empty(n_rows, dtype=np.intp)
    assignment[order] = np.arange(n_rows) % n_splits

    folds: List[FoldIndices] = []
    for k in range(n_splits):
        in_test = assignment == k
        folds.append(
            FoldIndices(
                fold_id=k + 1,
                train=np.flatnonzero(~in_test),
                test=np.flatnonzero(in_test),
            )
        )
    return folds


def crossv_kfold(
    dataset: Dataset,
    n_splits: int = 5,
    seed: Optional[int] = None,
    *,
    shuffle: bool = True,
    stratified: bool = False,
) -> List[Split]:
    """k-fold splits of ``dataset`` as resample views."""
    strata = dataset.y if stratified else None
    return [
        Split(
            fold_id=f.fold_id,
            train=Resample(dataset, f.train),
            test=Resample(dataset, f.test),
        )
        for f in kfold_indices(dataset.n_rows, n_splits, seed, shuffle=shuffle, strata=strata)
    ]
