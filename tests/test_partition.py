from __future__ import annotations

import numpy as np
import pytest

from foldwise.components.data.dataset import Dataset
from foldwise.components.splitters import (
    crossv_kfold,
    holdout_indices,
    kfold_indices,
    resample_partition,
)
from foldwise.core.errors import InvalidArgument


@pytest.mark.parametrize("n_rows,n_splits", [(2, 2), (10, 3), (17, 4), (100, 5), (23, 23), (50, 7)])
def test_test_folds_partition_all_rows(n_rows, n_splits):
    folds = kfold_indices(n_rows, n_splits, seed=123)
    assert len(folds) == n_splits

    tests = [set(f.test.tolist()) for f in folds]
    for i in range(n_splits):
        for j in range(i + 1, n_splits):
            assert tests[i].isdisjoint(tests[j])
    assert set().union(*tests) == set(range(n_rows))

    for f in folds:
        assert set(f.train.tolist()).isdisjoint(f.test.tolist())
        assert set(f.train.tolist()) | set(f.test.tolist()) == set(range(n_rows))

    sizes = [f.test.size for f in folds]
    assert max(sizes) - min(sizes) <= 1


def test_hundred_rows_five_folds():
    folds = kfold_indices(100, 5, seed=7)
    assert [f.test.size for f in folds] == [20] * 5
    assert [f.train.size for f in folds] == [80] * 5
    assert sorted(np.concatenate([f.test for f in folds]).tolist()) == list(range(100))


def test_remainder_goes_to_first_folds():
    folds = kfold_indices(10, 3, seed=0)
    assert [f.test.size for f in folds] == [4, 3, 3]
    assert sum(f.test.size for f in folds) == 10


@pytest.mark.parametrize("n_splits", [1, 0, -2, 11])
def test_bad_fold_count_raises(n_splits):
    with pytest.raises(InvalidArgument):
        kfold_indices(10, n_splits, seed=0)


def test_empty_row_count_raises():
    with pytest.raises(InvalidArgument):
        kfold_indices(0, 2, seed=0)


def test_same_seed_same_partition():
    a = kfold_indices(50, 5, seed=99)
    b = kfold_indices(50, 5, seed=99)
    for fa, fb in zip(a, b):
        assert np.array_equal(fa.test, fb.test)
        assert np.array_equal(fa.train, fb.train)


def test_different_seed_different_partition():
    a = kfold_indices(20, 2, seed=1)
    b = kfold_indices(20, 2, seed=2)
    assert any(not np.array_equal(fa.test, fb.test) for fa, fb in zip(a, b))


def test_no_shuffle_deals_in_order():
    folds = kfold_indices(10, 3, seed=None, shuffle=False)
    assert folds[0].test.tolist() == [0, 3, 6, 9]
    assert folds[1].test.tolist() == [1, 4, 7]
    assert folds[2].test.tolist() == [2, 5, 8]


def test_stratified_spreads_classes_evenly():
    strata = np.array([0] * 45 + [1] * 15)
    folds = kfold_indices(60, 4, seed=3, strata=strata)
    for f in folds:
        counts = np.bincount(strata[f.test], minlength=2)
        assert abs(counts[0] - 45 / 4) < 1
        assert abs(counts[1] - 15 / 4) < 1
    sizes = [f.test.size for f in folds]
    assert max(sizes) - min(sizes) <= 1


def test_crossv_kfold_returns_views(toy_regression: Dataset):
    splits = crossv_kfold(toy_regression, 5, seed=11)
    assert [s.fold_id for s in splits] == [1, 2, 3, 4, 5]
    for s in splits:
        assert s.train.dataset is toy_regression
        assert s.test.dataset is toy_regression
        assert s.n_train + s.n_test == toy_regression.n_rows
        np.testing.assert_array_equal(s.test.X, toy_regression.X[s.test.idx])


def test_holdout_partition_is_disjoint_and_complete():
    f = holdout_indices(50, 0.8, seed=5)
    assert f.train.size == 40
    assert f.test.size == 10
    assert set(f.train.tolist()).isdisjoint(f.test.tolist())
    assert set(f.train.tolist()) | set(f.test.tolist()) == set(range(50))


@pytest.mark.parametrize("frac", [0.0, 1.0, -0.1, 1.5])
def test_holdout_bad_fraction_raises(frac):
    with pytest.raises(InvalidArgument):
        holdout_indices(50, frac, seed=0)


def test_holdout_one_side_empty_raises():
    with pytest.raises(InvalidArgument):
        holdout_indices(3, 0.9, seed=0)


def test_stratified_holdout_keeps_class_ratio(toy_classification: Dataset):
    split = resample_partition(toy_classification, 0.8, seed=1, stratified=True)
    counts = np.bincount(split.train.y, minlength=2)
    assert counts.tolist() == [36, 12]
