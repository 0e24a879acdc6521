from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from foldwise.components.data.dataset import Dataset, Resample
from foldwise.core.errors import InvalidArgument


def test_arrays_are_read_only(toy_regression: Dataset):
    with pytest.raises(ValueError):
        toy_regression.X[0, 0] = 1.0
    with pytest.raises(ValueError):
        toy_regression.y[0] = 1.0


def test_dataset_copies_input():
    X = np.arange(6, dtype=float).reshape(3, 2)
    y = np.array([1.0, 2.0, 3.0])
    ds = Dataset.from_arrays(X, y)
    X[0, 0] = 100.0
    assert ds.X[0, 0] == 0.0
    assert ds.feature_names == ("x0", "x1")


def test_empty_dataset_raises():
    with pytest.raises(InvalidArgument):
        Dataset.from_arrays(np.empty((0, 2)), np.empty(0))


def test_length_mismatch_raises():
    with pytest.raises(InvalidArgument):
        Dataset.from_arrays(np.zeros((3, 2)), np.zeros(4))


def test_kind_inference():
    assert Dataset.from_arrays(np.zeros((4, 1)), [0, 1, 0, 1]).kind == "classification"
    assert Dataset.from_arrays(np.zeros((4, 1)), [0.1, 1.7, 2.2, 3.9]).kind == "regression"


def test_from_frame_selects_columns():
    df = pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0], "out": [0.5, 0.1, 0.2]})
    ds = Dataset.from_frame(df, "out", features=["b"], name="tiny")
    assert ds.feature_names == ("b",)
    assert ds.target_name == "out"
    assert ds.X[:, 0].tolist() == [4.0, 5.0, 6.0]


def test_from_frame_missing_target_raises():
    df = pd.DataFrame({"a": [1.0, 2.0]})
    with pytest.raises(InvalidArgument):
        Dataset.from_frame(df, "missing")


def test_resample_is_index_view(toy_regression: Dataset):
    r = Resample(toy_regression, np.array([5, 1, 3]))
    assert len(r) == 3
    assert r.dataset is toy_regression
    np.testing.assert_array_equal(r.y, toy_regression.y[[5, 1, 3]])
    with pytest.raises(ValueError):
        r.idx[0] = 0


@pytest.mark.parametrize("idx", [[0, 100], [-1], [0.5]])
def test_resample_rejects_bad_indices(toy_regression: Dataset, idx):
    with pytest.raises(InvalidArgument):
        Resample(toy_regression, np.array(idx))


def test_resample_to_frame(toy_regression: Dataset):
    frame = Resample(toy_regression, np.array([2, 4])).to_frame()
    assert list(frame.index) == [2, 4]
    assert list(frame.columns) == ["x0", "x1", "x2", "y"]
