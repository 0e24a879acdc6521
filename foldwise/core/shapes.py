from __future__ import annotations

"""Shape utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
- y is 1D: (n_samples,)
"""

from typing import Tuple

import numpy as np

from foldwise.core.errors import InvalidArgument


def coerce_1d(a) -> np.ndarray:
    """Return ``a`` as a 1D array; column vectors are flattened."""

    arr = np.asarray(a)
    if arr.ndim == 2 and 1 in arr.shape:
        return arr.ravel()
    if arr.ndim != 1:
        raise InvalidArgument(f"Expected a 1D array; got shape {arr.shape}.")
    return arr


def ensure_xy_aligned(X, y) -> Tuple[np.ndarray, np.ndarray]:
    """Strict alignment check: no transposition, no truncation.

    - X must be 2D (n_samples, n_features); 1D X is treated as one feature
    - y must be 1D (n_samples,)
    - n_samples must match and be at least 1
    """

    X = np.asarray(X)
    y = np.asarray(y).ravel()

    if X.ndim == 1:
        X = X[:, None]
    if X.ndim != 2:
        raise InvalidArgument(f"X must be 2D (n_samples, n_features). Got {X.shape}.")
    if X.shape[0] != y.shape[0]:
        raise InvalidArgument(f"X and y length mismatch: {X.shape[0]} vs {y.shape[0]}.")
    if X.shape[0] < 1 or X.shape[1] < 1:
        raise InvalidArgument(f"Dataset must have at least 1 row and 1 feature; got {X.shape}.")

    return X, y


def check_len(y_true: np.ndarray, y_pred_like: np.ndarray, name: str) -> None:
    if y_true.shape[0] != y_pred_like.shape[0]:
        raise InvalidArgument(
            f"Length mismatch: y_true({y_true.shape[0]}) vs {name}({y_pred_like.shape[0]})."
        )
