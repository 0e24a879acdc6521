from __future__ import annotations
from typing import TYPE_CHECKING, Any, Iterator, Protocol

if TYPE_CHECKING:
    from foldwise.components.data.dataset import Dataset, Resample
    from foldwise.components.splitters.types import Split


class Splitter(Protocol):
    def split(self, dataset: Dataset) -> Iterator[Split]:
        """Yield train/test splits of ``dataset``.

        Implementations must yield :class:`foldwise.components.splitters.types.Split`.
        """
        ...


class ModelBuilder(Protocol):
    def make_estimator(self) -> Any:
        """Return a configured, unfitted estimator."""
        ...


class Fit(Protocol):
    def __call__(self, train: Resample) -> Any:
        """Fit a model on the training resample and return it.

        The returned model is opaque to the evaluator; it only needs
        ``predict(X)`` (and ``predict_proba(X)`` for probability metrics).
        """
        ...


class Metric(Protocol):
    name: str

    def __call__(self, model: Any, resample: Resample) -> float:
        """Score ``model`` on ``resample``.

        Raise :class:`foldwise.core.errors.MetricUndefined` when the metric has
        no meaningful value for this resample.
        """
        ...
