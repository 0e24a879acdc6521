from __future__ import annotations

"""Metric registry.

Built-in metric names resolve to :class:`PredictionMetric`; callers may
register their own ``(model, resample) -> float`` callables under new names.
"""

from typing import Callable, Iterable, List

from foldwise.components.evaluation.metrics import list_metrics, make_metric
from foldwise.components.interfaces import Metric
from foldwise.core.errors import InvalidArgument
from foldwise.registries.base import Registry

MetricFactory = Callable[[], Metric]

_METRICS: Registry[str, MetricFactory] = Registry(_name="metrics")


def register_metric(name: str) -> Callable[[MetricFactory], MetricFactory]:
    return _METRICS.register(name)


def _make_one(name: str) -> Metric:
    if name in _METRICS:
        return _METRICS.get(name)()
    if name in list_metrics():
        return make_metric(name)
    raise InvalidArgument(f"Unknown metric {name!r}. Supported: {list_metric_names()}")


def make_metrics(names: Iterable[str]) -> List[Metric]:
    return [_make_one(str(n)) for n in names]


def list_metric_names() -> list[str]:
    return sorted(set(list_metrics()) | set(_METRICS.keys()))
