from __future__ import annotations

from typing import Optional

import numpy as np

from foldwise.components.data.dataset import Dataset, Resample
from foldwise.components.splitters.types import FoldIndices, Split
from foldwise.core.errors import InvalidArgument


def holdout_indices(
    n_rows: int,
    train_frac: float = 0.8,
    seed: Optional[int] = None,
    *,
    strata: Optional[np.ndarray] = None,
) -> FoldIndices:
    """Single random train/test partition of ``range(n_rows)``.

    The train side gets ``round(train_frac * n_rows)`` rows (per class when
    ``strata`` is given); both sides must end up non-empty.
    """

    if int(n_rows) < 2:
        raise InvalidArgument(f"A holdout partition needs at least 2 rows; got {n_rows}.")
    if not (0.0 < float(train_frac) < 1.0):
        raise InvalidArgument(f"train_frac must be in (0, 1); got {train_frac}.")

    n_rows = int(n_rows)
    rng = np.random.default_rng(seed)

    if strata is None:
        order = rng.permutation(n_rows)
        n_train = int(round(train_frac * n_rows))
        train = order[:n_train]
    else:
        strata = np.asarray(strata).ravel()
        if strata.shape[0] != n_rows:
            raise InvalidArgument(f"strata length {strata.shape[0]} != n_rows {n_rows}")
        parts = []
        for label in np.unique(strata):
            members = rng.permutation(np.flatnonzero(strata == label))
            parts.append(members[: int(round(train_frac * members.size))])
        train = np.concatenate(parts)

    in_train = np.zeros(n_rows, dtype=bool)
    in_train[train] = True
    if in_train.all() or not in_train.any():
        raise InvalidArgument(
            f"train_frac={train_frac} leaves one side of the partition empty for n_rows={n_rows}."
        )

    return FoldIndices(
        fold_id=1,
        train=np.flatnonzero(in_train),
        test=np.flatnonzero(~in_train),
    )


def resample_partition(
    dataset: Dataset,
    train_frac: float = 0.8,
    seed: Optional[int] = None,
    *,
    stratified: bool = False,
) -> Split:
    """Train/test partition of ``dataset`` as resample views."""
    f = holdout_indices(
        dataset.n_rows,
        train_frac,
        seed,
        strata=dataset.y if stratified else None,
    )
    return Split(fold_id=f.fold_id, train=Resample(dataset, f.train), test=Resample(dataset, f.test))
