from __future__ import annotations

"""Dataset sources.

Two small datasets ship with scikit-learn and need no download:

- ``diabetes``: 442 patients, 10 baseline features, disease progression after
  one year as the (continuous) outcome.
- ``breast_cancer``: 569 tumours, 30 features, malignant/benign outcome.

Anything else is read from a delimited text file with pandas.
"""

from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Union

import pandas as pd
from sklearn.datasets import load_breast_cancer, load_diabetes

from foldwise.components.data.dataset import Dataset
from foldwise.contracts.run_config import DataModel
from foldwise.core.errors import InvalidArgument


def _diabetes() -> Dataset:
    bunch = load_diabetes(as_frame=True)
    return Dataset.from_frame(bunch.frame, "target", kind="regression", name="diabetes")


def _breast_cancer() -> Dataset:
    bunch = load_breast_cancer(as_frame=True)
    return Dataset.from_frame(bunch.frame, "target", kind="classification", name="breast_cancer")


_BUNDLED: Dict[str, Callable[[], Dataset]] = {
    "diabetes": _diabetes,
    "breast_cancer": _breast_cancer,
}


def list_datasets() -> list[str]:
    return sorted(_BUNDLED)


def load_dataset(name: str) -> Dataset:
    loader = _BUNDLED.get(name)
    if loader is None:
        raise InvalidArgument(f"Unknown bundled dataset {name!r}. Available: {list_datasets()}")
    return loader()


def load_csv(
    path: Union[str, Path],
    target: str,
    *,
    features: Optional[Sequence[str]] = None,
    delimiter: Optional[str] = None,
    kind: Optional[str] = None,
) -> Dataset:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")
    # sep=None lets pandas sniff the delimiter
    df = pd.read_csv(path, sep=delimiter, engine="python" if delimiter is None else "c")
    df = df.dropna(axis=0, how="any")
    return Dataset.from_frame(df, target, features=features, kind=kind, name=path.stem)


def load_from_data_model(cfg: DataModel, *, kind: Optional[str] = None) -> Dataset:
    if cfg.name is not None:
        return load_dataset(cfg.name)
    return load_csv(cfg.csv_path, cfg.target, features=cfg.features, delimiter=cfg.delimiter, kind=kind)
