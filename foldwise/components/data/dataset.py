from __future__ import annotations

"""Immutable datasets and index-only resample views.

A :class:`Resample` never copies the rows it refers to; it stores a read-only
index array plus a reference to the backing :class:`Dataset`. Row data is only
materialised when ``X``/``y`` are accessed, which is what a fitting or scoring
call needs anyway.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from foldwise.core.errors import InvalidArgument
from foldwise.core.shapes import ensure_xy_aligned


def _readonly(a: np.ndarray) -> np.ndarray:
    a = np.array(a, copy=True)
    a.setflags(write=False)
    return a


def _infer_kind(y: np.ndarray) -> str:
    """Heuristic kind inference; pass ``kind`` explicitly where it matters."""
    if y.dtype.kind in "OUSb":
        return "classification"
    if y.dtype.kind in "iu" and np.unique(y).size <= 20:
        return "classification"
    return "regression"


@dataclass(frozen=True, eq=False)
class Dataset:
    X: np.ndarray
    y: np.ndarray
    feature_names: Tuple[str, ...] = ()
    target_name: str = "y"
    kind: str = "regression"
    name: str = "dataset"

    def __post_init__(self) -> None:
        X, y = ensure_xy_aligned(self.X, self.y)
        if self.kind not in ("regression", "classification"):
            raise InvalidArgument(f"kind must be 'regression' or 'classification'; got {self.kind!r}")
        names = tuple(self.feature_names) or tuple(f"x{i}" for i in range(X.shape[1]))
        if len(names) != X.shape[1]:
            raise InvalidArgument(
                f"feature_names has {len(names)} entries but X has {X.shape[1]} columns"
            )
        object.__setattr__(self, "X", _readonly(X))
        object.__setattr__(self, "y", _readonly(y))
        object.__setattr__(self, "feature_names", names)

    @classmethod
    def from_arrays(
        cls,
        X,
        y,
        *,
        feature_names: Optional[Sequence[str]] = None,
        target_name: str = "y",
        kind: Optional[str] = None,
        name: str = "dataset",
    ) -> "Dataset":
        y_arr = np.asarray(y).ravel()
        return cls(
            X=np.asarray(X),
            y=y_arr,
            feature_names=tuple(feature_names or ()),
            target_name=target_name,
            kind=kind or _infer_kind(y_arr),
            name=name,
        )

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        target: str,
        *,
        features: Optional[Sequence[str]] = None,
        kind: Optional[str] = None,
        name: str = "dataset",
    ) -> "Dataset":
        if target not in df.columns:
            raise InvalidArgument(f"target column {target!r} not in frame columns {list(df.columns)}")
        cols = list(features) if features is not None else [c for c in df.columns if c != target]
        missing = [c for c in cols if c not in df.columns]
        if missing:
            raise InvalidArgument(f"feature columns not found: {missing}")
        X = df[cols].to_numpy(dtype=float)
        return cls.from_arrays(
            X,
            df[target].to_numpy(),
            feature_names=[str(c) for c in cols],
            target_name=str(target),
            kind=kind,
            name=name,
        )

    @property
    def n_rows(self) -> int:
        return int(self.X.shape[0])

    def __len__(self) -> int:
        return self.n_rows

    def all_rows(self) -> "Resample":
        return Resample(self, np.arange(self.n_rows))

    def to_frame(self) -> pd.DataFrame:
        return self.all_rows().to_frame()


@dataclass(frozen=True, eq=False)
class Resample:
    """Ordered row indices into a dataset."""

    dataset: Dataset
    idx: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        idx = np.asarray(self.idx)
        if idx.ndim != 1:
            raise InvalidArgument(f"resample indices must be 1D; got shape {idx.shape}")
        if idx.size and not np.issubdtype(idx.dtype, np.integer):
            raise InvalidArgument(f"resample indices must be integers; got dtype {idx.dtype}")
        idx = idx.astype(np.intp, copy=False)
        n = self.dataset.n_rows
        if idx.size and (idx.min() < 0 or idx.max() >= n):
            raise InvalidArgument(
                f"resample indices out of range for dataset of {n} rows: "
                f"[{int(idx.min())}, {int(idx.max())}]"
            )
        object.__setattr__(self, "idx", _readonly(idx))

    def __len__(self) -> int:
        return int(self.idx.shape[0])

    def __repr__(self) -> str:
        return f"<Resample [{len(self)} x {self.dataset.X.shape[1]}] of {self.dataset.name!r}>"

    @property
    def X(self) -> np.ndarray:
        return self.dataset.X[self.idx]

    @property
    def y(self) -> np.ndarray:
        return self.dataset.y[self.idx]

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(self.X, columns=list(self.dataset.feature_names), index=self.idx)
        df[self.dataset.target_name] = self.y
        return df
