from __future__ import annotations

"""Cooperative cancellation.

Cancellation is checked between folds only: a fit that is already running is
allowed to finish, its result is then discarded together with the rest of the
run.
"""

import threading
from typing import Optional

from foldwise.core.errors import RunCancelled


class CancelToken:
    """Thread-safe flag shared between the caller and an evaluation run."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: Optional[str] = None

    def cancel(self, reason: Optional[str] = None) -> None:
        self._reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            msg = "Evaluation run cancelled"
            if self._reason:
                msg = f"{msg}: {self._reason}"
            raise RunCancelled(msg)
