from __future__ import annotations

import inspect
from typing import Any, Dict, Optional


def estimator_kwargs(estimator_cls: type, cfg: Any, *, seed: Optional[int] = None) -> Dict[str, Any]:
    """Constructor kwargs for ``estimator_cls`` taken from a model config.

    Unset (``None``) fields fall back to the estimator default and fields the
    estimator does not accept are dropped. ``seed`` fills ``random_state`` when
    the config leaves it unset. A config that exposes ``n_jobs`` but leaves it
    unset gets 1: folds already run in parallel, estimators must not fan out
    inside a worker.
    """

    params = inspect.signature(estimator_cls).parameters
    kw = {
        k: v
        for k, v in cfg.model_dump(exclude={"algo"}, exclude_none=True).items()
        if k in params
    }
    if seed is not None and "random_state" in params:
        kw.setdefault("random_state", int(seed))
    if "n_jobs" in params and "n_jobs" in type(cfg).model_fields:
        kw.setdefault("n_jobs", 1)
    return kw
