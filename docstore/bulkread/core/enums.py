"""Core enumerations and classification types.

Key Types:
    - ErrorKind: How the reader reacts to a remote execution error
    - ErrorClassification: ErrorKind plus retry hint and original cause
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class ErrorKind(str, Enum):
    """Classification of remote execution errors."""

    THROTTLED = "throttled"
    TRANSIENT_TIMEOUT = "transient_timeout"
    MOVED_SPLIT = "moved_split"
    MOVED_OTHER = "moved_other"
    FATAL = "fatal"

    @property
    def is_retryable(self) -> bool:
        """Whether the reader absorbs this kind and reissues the request."""
        return self in (ErrorKind.THROTTLED, ErrorKind.TRANSIENT_TIMEOUT)

    @property
    def is_moved(self) -> bool:
        """Whether the partition has to be re-routed before any retry."""
        return self in (ErrorKind.MOVED_SPLIT, ErrorKind.MOVED_OTHER)


@dataclass(frozen=True)
class ErrorClassification:
    """Outcome of classifying one remote execution error.

    Attributes:
        kind: How the reader should react
        retry_after: Minimum backoff before retrying (only meaningful for THROTTLED)
        cause: The original exception, kept for diagnostics
    """

    kind: ErrorKind
    retry_after: timedelta = timedelta(0)
    cause: BaseException | None = None
