"""Dependency helpers for use-cases."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from foldwise.runtime.pool import WorkerPool


def resolve_seed(seed: Optional[int], *, fallback: int = 0) -> int:
    """Return a deterministic seed.

    Configs have an optional seed; when absent we still want repeatable
    behavior, hence a stable fallback.
    """

    return int(seed) if seed is not None else int(fallback)


@contextmanager
def borrowed_pool(pool: Optional[WorkerPool], *, n_jobs: Optional[int] = 1) -> Iterator[WorkerPool]:
    """Yield ``pool`` untouched, or a fresh pool scoped to the block.

    A pool supplied by the caller is never entered or released here; its
    lifecycle belongs to the caller. ``n_jobs`` sizes the fallback pool
    (``None`` means the default sizing of :class:`WorkerPool`).
    """

    if pool is not None:
        yield pool
        return
    with WorkerPool(n_jobs=n_jobs) as p:
        yield p
