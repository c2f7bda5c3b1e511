"""Partition read progress tracking.

The reader is the only writer. Observers (a supervising task or a thread
polling status) read immutable ReadProgress snapshots, so a value is never
seen half-updated.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ReadProgress:
    """Point-in-time view of a partition read."""

    documents_read: int = 0
    request_units_consumed: float = 0.0
    pages_read: int = 0
    throttles: int = 0
    timeouts: int = 0
    empty_responses: int = 0


class ProgressTracker:
    """Single-writer progress record with copy-on-read snapshots."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current = ReadProgress()

    def snapshot(self) -> ReadProgress:
        with self._lock:
            return self._current

    def reset(self) -> None:
        with self._lock:
            self._current = ReadProgress()

    def record_page(self, documents: int, request_units: float) -> None:
        with self._lock:
            self._current = replace(
                self._current,
                documents_read=self._current.documents_read + documents,
                request_units_consumed=self._current.request_units_consumed + request_units,
                pages_read=self._current.pages_read + 1,
            )

    def record_throttle(self) -> None:
        with self._lock:
            self._current = replace(self._current, throttles=self._current.throttles + 1)

    def record_timeout(self) -> None:
        with self._lock:
            self._current = replace(self._current, timeouts=self._current.timeouts + 1)

    def record_empty_response(self) -> None:
        with self._lock:
            self._current = replace(
                self._current, empty_responses=self._current.empty_responses + 1
            )
