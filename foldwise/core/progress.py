from __future__ import annotations

"""Progress reporting for long runs.

Repeated cross-validation reports one step per finished repeat through any
object with the three methods of :class:`ProgressCallback`. Nothing here
depends on a UI; :class:`LoggingProgress` writes the steps to a logger.
"""

import logging
from typing import Optional, Protocol


class ProgressCallback(Protocol):
    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...


class LoggingProgress:
    """Progress callback that logs every step at ``level``."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("foldwise.progress")
        self.level = level
        self.total = 0
        self.current = 0

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        self.total, self.current = int(total), 0
        self.logger.log(self.level, "%s (0/%d)", label or "started", self.total)

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        self.current = int(current)
        self.logger.log(self.level, "%s (%d/%d)", label or "progress", self.current, self.total)

    def finalize(self, *, label: Optional[str] = None) -> None:
        self.logger.log(self.level, "%s (%d/%d)", label or "done", self.current, self.total)
