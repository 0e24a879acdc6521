from __future__ import annotations

"""Worker pool for fold-level parallelism.

A :class:`WorkerPool` wraps a reusable :class:`joblib.Parallel`. Entering the
context starts the workers once; every :meth:`WorkerPool.map` call inside the
context reuses them, and leaving the context releases them even if the body
raised::

    with WorkerPool(n_jobs=4) as pool:
        for summary in iter_repeated_cv(ds, fit, metrics, pool=pool, ...):
            ...

With ``n_jobs == 1`` tasks run in the calling process.
"""

import logging
import os
from typing import Any, Callable, Iterable, List, Optional

from joblib import Parallel, cpu_count, delayed

from foldwise.core.errors import InvalidArgument

logger = logging.getLogger(__name__)

N_JOBS_ENV = "FOLDWISE_N_JOBS"


def default_n_jobs() -> int:
    """Available processing units minus one, never below one."""
    return max(1, int(cpu_count()) - 1)


def resolve_n_jobs(n_jobs: Optional[int] = None) -> int:
    """Resolve the pool size.

    Precedence: explicit argument, then the ``FOLDWISE_N_JOBS`` environment
    variable, then :func:`default_n_jobs`. Negative values follow the joblib
    convention (``-1`` is all CPUs, ``-2`` all but one).
    """

    if n_jobs is None:
        raw = os.getenv(N_JOBS_ENV, "").strip()
        if raw:
            try:
                n_jobs = int(raw)
            except ValueError as e:
                raise InvalidArgument(f"{N_JOBS_ENV} must be an integer; got {raw!r}") from e
        else:
            return default_n_jobs()

    n_jobs = int(n_jobs)
    if n_jobs == 0:
        raise InvalidArgument("n_jobs must be non-zero")
    if n_jobs < 0:
        return max(1, int(cpu_count()) + 1 + n_jobs)
    return n_jobs


class WorkerPool:
    """Scoped worker pool; acquire with ``with``, released on exit."""

    def __init__(self, n_jobs: Optional[int] = None, *, backend: str = "loky"):
        self.n_jobs = resolve_n_jobs(n_jobs)
        self.backend = backend
        self._parallel: Optional[Parallel] = None

    @property
    def active(self) -> bool:
        return self._parallel is not None

    def __enter__(self) -> "WorkerPool":
        if self._parallel is not None:
            raise RuntimeError("WorkerPool is already active")
        parallel = Parallel(n_jobs=self.n_jobs, backend=self.backend)
        parallel.__enter__()
        self._parallel = parallel
        logger.debug("worker pool started: n_jobs=%d backend=%s", self.n_jobs, self.backend)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        parallel, self._parallel = self._parallel, None
        if parallel is not None:
            parallel.__exit__(exc_type, exc, tb)
            logger.debug("worker pool released")

    def map(self, fn: Callable[..., Any], tasks: Iterable[Any]) -> List[Any]:
        """Apply ``fn`` to every task and return the results in task order.

        ``tasks`` may be a generator; it is consumed lazily as workers free up,
        so checks performed while producing a task happen between dispatches.
        """

        if self._parallel is None:
            raise RuntimeError("WorkerPool must be entered before use")
        return list(self._parallel(delayed(fn)(t) for t in tasks))
