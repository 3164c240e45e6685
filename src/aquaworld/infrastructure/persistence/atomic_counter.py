"""Thread-safe monotonically increasing counter used for IDs."""

from __future__ import annotations

import itertools
import threading


class AtomicCounter:
    """Hands out ``start + 1``, ``start + 2``, ... exactly once each."""

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start + 1)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)
