"""Read policy definitions.

This module defines the configuration that bounds a partition read: the page
size hint sent to the stored procedure and the retry budgets applied to
throttling, timeouts, and blank responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

DEFAULT_PAGE_SIZE_HINT = 5000


@dataclass(frozen=True)
class ReadPolicy:
    """Paging and retry policy for a partition read.

    Retry counters are consecutive: they reset every time a page is decoded
    successfully. A bound of None means that kind of error is retried without
    limit (max_elapsed still applies when set).

    Attributes:
        page_size_hint: Page size argument passed to the stored procedure
        max_throttle_retries: Consecutive throttled attempts allowed per request
        max_timeout_retries: Consecutive timed out attempts allowed per request
        max_empty_responses: Consecutive blank payloads allowed per request
        max_elapsed: Wall-clock budget for the whole read (None = unlimited)
        script_logging_enabled: Ask the server to capture stored procedure logs
    """

    page_size_hint: int = DEFAULT_PAGE_SIZE_HINT
    max_throttle_retries: int | None = 100
    max_timeout_retries: int | None = 10
    max_empty_responses: int = 10
    max_elapsed: timedelta | None = None
    script_logging_enabled: bool = True

    def __post_init__(self) -> None:
        """Validate policy configuration."""
        if self.page_size_hint <= 0:
            raise ValueError("page_size_hint must be positive")
        if self.max_throttle_retries is not None and self.max_throttle_retries < 0:
            raise ValueError("max_throttle_retries cannot be negative")
        if self.max_timeout_retries is not None and self.max_timeout_retries < 0:
            raise ValueError("max_timeout_retries cannot be negative")
        if self.max_empty_responses < 0:
            raise ValueError("max_empty_responses cannot be negative")
        if self.max_elapsed is not None and self.max_elapsed <= timedelta(0):
            raise ValueError("max_elapsed must be positive")
