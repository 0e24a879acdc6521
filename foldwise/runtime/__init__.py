"""Runtime resources: randomness, worker pools and cancellation."""

from .cancel import CancelToken
from .pool import WorkerPool, resolve_n_jobs
from .random.rng import RngManager

__all__ = ["CancelToken", "WorkerPool", "resolve_n_jobs", "RngManager"]
